"""
Prompt text for the studio endpoints.
Instructions sent to the analysis model and the composers that build the
final image-generation prompt. Composers are pure string assembly.
"""

from typing import Dict, Any, Optional

# --- ANALYSIS INSTRUCTIONS ---

BRAND_SYSTEM_PROMPT = """
You are a professional brand strategist and logo designer.
Your task is to analyze a brand and create:
1. A detailed, professional logo generation prompt for DALL-E 3.
2. A color psychology analysis including primary and secondary colors.
3. Hex codes for the palette.

Return your response in strict JSON format:
{
  "dallePrompt": "...",
  "primaryColor": { "hex": "#...", "meaning": "..." },
  "secondaryColors": [ { "hex": "#...", "label": "..." } ],
  "rationale": "..."
}
"""

STYLIST_SYSTEM_PROMPT = """
You are a high-end celebrity fashion stylist.
Your task is to:
1. Recommend a complete outfit for a specific occasion and weather.
2. Include main clothing items, shoes, and accessories (watch, jewelry, bag).
3. Explain the style rationale (why this works for the weather/occasion).
4. Describe the color palette.

Return your response in strict JSON format:
{
  "outfitDescription": "...",
  "items": ["list of key items"],
  "rationale": "...",
  "palette": ["list of colors"],
  "dallePrompt": "A professional high-fashion mood board containing..."
}
"""

BLUEPRINT_VISION_PROMPT = (
    "Analyze this architectural blueprint. Describe the detailed layout, specific rooms, "
    "and dimensions indicated. Focus on providing a description for a 2D colored floor plan. "
    "Identify areas for wood flooring, tiling, grass, or specific wall colors."
)

PRODUCT_VISION_PROMPT = (
    "Describe the main product in this image in detail. Focus on its shape, color, "
    "materials, and unique features. Keep it to one paragraph."
)

# --- RENDERING CONSTRAINTS ---

LOGO_CONSTRAINTS = (
    "Clean, minimalist, professional logo design. Vector style, high resolution. "
    "Flat design or subtle gradients. Isolated on a WHITE background. "
    "No realistic photos, no complex backgrounds. Focus on scalability and modern branding."
)

MOOD_BOARD_CONSTRAINTS = (
    "High-end fashion mood board style. Professional studio lighting. "
    "Aesthetic arrangement of clothing items and accessories. Clean, elegant composition. "
    "No people, just the flatlay or mannequin arrangement. 8k resolution, Vogue aesthetic."
)

BLUEPRINT_CONSTRAINTS = (
    "This must be a TOP-DOWN 2D plan view only. No 3D perspectives, no isometric views. "
    "Use professional architectural markers and realistic texture overlays for flooring and furniture. "
    "Flat 2D vector-style with realistic shading. 8k resolution, crisp lines."
)

PRODUCT_CONSTRAINTS = (
    "The lighting is cinematic and perfectly showcases the product's details. "
    "High resolution, 8k, sharp focus, clean composition. Commercial photography style."
)

DEFAULT_PRODUCT = "a luxury product"


def _optional(text: Optional[str]) -> str:
    """Return user text followed by a space, or nothing when blank."""
    if not text or not text.strip():
        return ""
    return f"{text} "


# --- ANALYSIS REQUESTS ---

def brand_user_prompt(data: Dict[str, Any], color_phrase: str) -> str:
    """
    Brand details for the logo analysis, with the constraints the
    generated prompt has to respect.
    """
    return (
        f"Brand Name: {data.get('brandName')}\n"
        f"Tagline: {data.get('tagline') or 'None'}\n"
        f"Industry: {data.get('industry')}\n"
        f"Personality: {data.get('personality')}\n"
        f"Preferred Vibe: {color_phrase}\n\n"
        f"Requirements for DALL-E prompt:\n{LOGO_CONSTRAINTS}"
    )


def stylist_user_prompt(data: Dict[str, Any], vibe_phrase: str) -> str:
    """Occasion details for the outfit analysis."""
    return (
        f"Occasion: {data.get('occasion')}\n"
        f"Weather: {data.get('weather')}\n"
        f"Vibe: {vibe_phrase}\n"
        f"Extra Preferences: {data.get('customPreferences') or 'None'}\n\n"
        f"Requirements for DALL-E prompt:\n{MOOD_BOARD_CONSTRAINTS}"
    )


# --- IMAGE PROMPTS ---

def compose_logo_prompt(description: str, color_phrase: str) -> str:
    return (
        f"{description} "
        f"Color direction: {color_phrase}. "
        f"{LOGO_CONSTRAINTS}"
    )


def compose_outfit_prompt(description: str, occasion: str, weather: str,
                          vibe_phrase: str, preferences: Optional[str] = None) -> str:
    return (
        f"{description} "
        f"Outfit for a {occasion} in {weather} weather, styled with {vibe_phrase}. "
        f"{_optional(preferences)}"
        f"{MOOD_BOARD_CONSTRAINTS}"
    )


def compose_blueprint_prompt(layout: str, style_phrase: str,
                             instructions: Optional[str] = None) -> str:
    return (
        f"A high-quality 2D colored architectural floor plan based on this layout: {layout}. "
        f"The rendering style is {style_phrase}. "
        f"{_optional(instructions)}"
        f"{BLUEPRINT_CONSTRAINTS}"
    )


def compose_product_prompt(product: Optional[str], background_phrase: str,
                           custom_prompt: Optional[str] = None) -> str:
    return (
        f"A high-end, professional commercial product photograph of {product or DEFAULT_PRODUCT}. "
        f"The product is placed in a {background_phrase}. "
        f"{_optional(custom_prompt)}"
        f"{PRODUCT_CONSTRAINTS}"
    )
