import pytest

from backend.studio_service.styles import (
    StyleTable,
    LOGO_COLOR_VIBES,
    OUTFIT_VIBES,
    BLUEPRINT_STYLES,
    PRODUCT_BACKGROUNDS,
)

ALL_TABLES = [LOGO_COLOR_VIBES, OUTFIT_VIBES, BLUEPRINT_STYLES, PRODUCT_BACKGROUNDS]

def test_known_key_is_deterministic():
    phrase = BLUEPRINT_STYLES.phrase_for("Eco-Green")
    assert phrase == "bamboo flooring, vertical green wall textures, natural stone surfaces"
    assert BLUEPRINT_STYLES.phrase_for("Eco-Green") == phrase

@pytest.mark.parametrize("key", [None, "", "   ", "Art Deco", 42, ["Eco-Green"]])
def test_unknown_keys_fall_back_to_default(key):
    assert PRODUCT_BACKGROUNDS.resolve_key(key) == "Minimalist Studio"
    assert PRODUCT_BACKGROUNDS.phrase_for(key) == PRODUCT_BACKGROUNDS.default_phrase

def test_lookup_ignores_case_and_padding():
    assert PRODUCT_BACKGROUNDS.resolve_key("  luxury marble ") == "Luxury Marble"
    assert OUTFIT_VIBES.phrase_for("Elegant") == OUTFIT_VIBES.phrase_for("elegant")

def test_default_must_exist():
    with pytest.raises(ValueError):
        StyleTable({"Bold": "bold lines"}, default_key="Soft")

def test_table_cannot_be_mutated():
    phrases = {"Bold": "bold lines"}
    table = StyleTable(phrases, default_key="Bold")

    phrases["Bold"] = "changed"
    assert table.phrase_for("Bold") == "bold lines"

    with pytest.raises(TypeError):
        table._phrases["Bold"] = "changed"

@pytest.mark.parametrize("table", ALL_TABLES)
def test_every_table_lists_its_default(table):
    summary = table.to_dict()
    assert summary["default"] in summary["options"]
    assert all(table.phrase_for(key) for key in summary["options"])
