"""
Style tables: the fixed phrase behind each style key the client can pick.
Tables are built once at import time and cannot be mutated.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping


class StyleTable:
    """
    Immutable mapping from style key to descriptive phrase, with a default key.

    Lookup never fails: unknown, blank, or non-string keys resolve to the
    default phrase.
    """

    def __init__(self, phrases: Dict[str, str], default_key: str):
        if default_key not in phrases:
            raise ValueError(f"Default style '{default_key}' is not in the table")
        self._phrases: Mapping[str, str] = MappingProxyType(dict(phrases))
        self._by_lower: Mapping[str, str] = MappingProxyType(
            {key.lower(): key for key in phrases}
        )
        self.default_key = default_key

    @property
    def keys(self) -> List[str]:
        return list(self._phrases)

    @property
    def default_phrase(self) -> str:
        return self._phrases[self.default_key]

    def resolve_key(self, key: Any) -> str:
        """Return the canonical key for `key`, or the default key."""
        if not isinstance(key, str) or not key.strip():
            return self.default_key
        if key in self._phrases:
            return key
        return self._by_lower.get(key.strip().lower(), self.default_key)

    def phrase_for(self, key: Any) -> str:
        return self._phrases[self.resolve_key(key)]

    def to_dict(self) -> Dict[str, Any]:
        return {"options": self.keys, "default": self.default_key}


# --- LOGO COLOUR VIBES (/generate) ---
LOGO_COLOR_VIBES = StyleTable(
    {
        "Brand Default": "a colour palette chosen to express the brand personality",
        "Vibrant": "bold, saturated primary colours with high contrast",
        "Pastel": "soft pastel tones with gentle, friendly contrast",
        "Monochrome": "a strict black, white and grey monochrome palette",
        "Earthy": "warm earthy tones such as terracotta, olive and sand",
        "Luxury Gold": "deep black or navy paired with metallic gold accents",
        "Tech Blue": "crisp electric blues and cool greys with a digital feel",
    },
    default_key="Brand Default",
)

# --- OUTFIT VIBES (/style) ---
OUTFIT_VIBES = StyleTable(
    {
        "classic": "classic, timeless tailoring in refined neutral tones",
        "elegant": "elegant, polished pieces with luxurious fabrics and graceful lines",
        "casual": "relaxed casual layers that stay comfortable and put-together",
        "streetwear": "bold streetwear with oversized silhouettes, sneakers and graphic accents",
        "bohemian": "bohemian flowing fabrics, earthy prints and artisanal accessories",
        "minimalist": "minimalist clean cuts in a restrained monochrome palette",
        "edgy": "edgy statement pieces with leather, hardware and dark tones",
    },
    default_key="classic",
)

# --- BLUEPRINT RENDERING STYLES (/colorize) ---
BLUEPRINT_STYLES = StyleTable(
    {
        "Modern Minimalist": "clean white palette, light oak wood floors, grey tiles, minimalist aesthetic",
        "Warm Professional": "rich walnut flooring, beige walls, soft accent lighting, executive feel",
        "Industrial Loft": "concrete floor textures, exposed red brick accents, black metal outlines",
        "Eco-Green": "bamboo flooring, vertical green wall textures, natural stone surfaces",
        "Classic Blueprint": "aesthetic blue and white coloring with realistic texture overlays",
    },
    default_key="Modern Minimalist",
)

# --- PRODUCT BACKGROUNDS (/swap) ---
PRODUCT_BACKGROUNDS = StyleTable(
    {
        "Minimalist Studio": "clean, soft-lit professional studio setting with a neutral light-grey background",
        "Luxury Marble": "opulent white marble surface with elegant reflections and soft warm lighting",
        "Industrial Concrete": "raw industrial concrete surface with dramatic shadows and atmospheric lighting",
        "Soft Silk": "draped luxurious silk fabric in soft neutral tones with gentle folds and highlights",
        "Nature Green": "fresh natural setting with blurred green leaves in the background and natural sunlight",
    },
    default_key="Minimalist Studio",
)
