"""
The four studio endpoints, expressed as pipeline configurations.
"""

from typing import Dict, Any

from backend.studio_service import client as ai_client
from backend.studio_service import prompts
from backend.studio_service.errors import UpstreamError
from backend.studio_service.pipeline import (
    Endpoint,
    Resolution,
    check_image,
    check_text_lengths,
    is_blank,
    require_any,
    require_fields,
    resolve_description,
)
from backend.studio_service.styles import (
    LOGO_COLOR_VIBES,
    OUTFIT_VIBES,
    BLUEPRINT_STYLES,
    PRODUCT_BACKGROUNDS,
)


def _image_prompt_from(analysis: Dict[str, Any]) -> str:
    image_prompt = analysis.get("dallePrompt")
    if not isinstance(image_prompt, str) or is_blank(image_prompt):
        raise UpstreamError("Analysis did not include an image prompt")
    return image_prompt


# --- LOGO GENERATION ---

def validate_logo(data: Dict[str, Any]) -> None:
    require_fields(data, ["brandName", "industry", "personality"], "Missing required fields")
    check_text_lengths(data, ["brandName", "tagline", "industry", "personality"])


def resolve_logo(data: Dict[str, Any], color_phrase: str) -> Resolution:
    analysis = ai_client.analyze_json(
        prompts.BRAND_SYSTEM_PROMPT,
        prompts.brand_user_prompt(data, color_phrase),
        ai_client.BRAND_MODEL,
    )
    return Resolution(_image_prompt_from(analysis), analysis)


LOGO = Endpoint(
    name="logo",
    validate=validate_logo,
    styles=LOGO_COLOR_VIBES,
    style_field="colorVibe",
    resolve=resolve_logo,
    compose=lambda data, res, phrase: prompts.compose_logo_prompt(res.description, phrase),
    quality="standard",
    empty_message="No image was generated",
    respond=lambda url, res: {"imageUrl": url, "analysis": res.analysis},
    failure_message="Failed to generate logo",
)


# --- OUTFIT STYLING ---

def validate_outfit(data: Dict[str, Any]) -> None:
    require_fields(data, ["occasion", "weather"], "Missing occasion or weather")
    check_text_lengths(data, ["occasion", "weather", "customPreferences"])


def resolve_outfit(data: Dict[str, Any], vibe_phrase: str) -> Resolution:
    analysis = ai_client.analyze_json(
        prompts.STYLIST_SYSTEM_PROMPT,
        prompts.stylist_user_prompt(data, vibe_phrase),
        ai_client.STYLIST_MODEL,
    )
    return Resolution(_image_prompt_from(analysis), analysis)


def compose_outfit(data: Dict[str, Any], res: Resolution, vibe_phrase: str) -> str:
    return prompts.compose_outfit_prompt(
        res.description,
        data["occasion"],
        data["weather"],
        vibe_phrase,
        data.get("customPreferences"),
    )


def respond_outfit(image_url: str, res: Resolution) -> Dict[str, Any]:
    analysis = res.analysis
    return {
        "imageUrl": image_url,
        "analysis": {
            "outfitDescription": analysis.get("outfitDescription"),
            "items": analysis.get("items"),
            "rationale": analysis.get("rationale"),
            "palette": analysis.get("palette"),
        },
    }


OUTFIT = Endpoint(
    name="stylist",
    validate=validate_outfit,
    styles=OUTFIT_VIBES,
    style_field="styleVibe",
    resolve=resolve_outfit,
    compose=compose_outfit,
    quality="hd",
    empty_message="No style board was generated",
    respond=respond_outfit,
    failure_message="Failed to generate style",
)


# --- BLUEPRINT COLORIZATION ---

def validate_blueprint(data: Dict[str, Any]) -> None:
    require_fields(data, ["image"], "Missing blueprint image")
    check_image(data.get("image"))
    check_text_lengths(data, ["customInstructions"])


def resolve_blueprint(data: Dict[str, Any], style_phrase: str) -> Resolution:
    layout = ai_client.describe_image(data["image"], prompts.BLUEPRINT_VISION_PROMPT)
    return Resolution(layout, layout)


BLUEPRINT = Endpoint(
    name="colorizer",
    validate=validate_blueprint,
    styles=BLUEPRINT_STYLES,
    style_field="style",
    resolve=resolve_blueprint,
    compose=lambda data, res, phrase: prompts.compose_blueprint_prompt(
        res.description, phrase, data.get("customInstructions")
    ),
    quality="hd",
    empty_message="No colored blueprint was generated",
    respond=lambda url, res: {"imageUrl": url, "analysis": res.analysis},
    failure_message="Failed to colorize blueprint",
)


# --- PRODUCT BACKGROUND SWAP ---

def validate_product(data: Dict[str, Any]) -> None:
    require_any(data, ["image", "productDescription"], "Missing product information")
    check_image(data.get("image"))
    check_text_lengths(data, ["productDescription", "customPrompt"])


def resolve_product(data: Dict[str, Any], background_phrase: str) -> Resolution:
    description = resolve_description(
        data.get("productDescription"),
        data.get("image"),
        prompts.PRODUCT_VISION_PROMPT,
    )
    return Resolution(description)


PRODUCT = Endpoint(
    name="swap",
    validate=validate_product,
    styles=PRODUCT_BACKGROUNDS,
    style_field="backgroundStyle",
    resolve=resolve_product,
    compose=lambda data, res, phrase: prompts.compose_product_prompt(
        res.description, phrase, data.get("customPrompt")
    ),
    quality="standard",
    empty_message="No image was generated",
    respond=lambda url, res: {"imageUrl": url, "description": res.description},
    failure_message="Failed to swap background",
)


ENDPOINTS = {
    "generate": LOGO,
    "style": OUTFIT,
    "colorize": BLUEPRINT,
    "swap": PRODUCT,
}
