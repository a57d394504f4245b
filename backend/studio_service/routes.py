"""
Studio service routes: logo generation, outfit styling, blueprint
colorization, and product background swap.
Each route runs the shared pipeline and converts failures to JSON errors.
"""

import logging
from typing import Tuple

from flask import Blueprint, request, jsonify, Response

from backend.studio_service.endpoints import ENDPOINTS, LOGO, OUTFIT, BLUEPRINT, PRODUCT
from backend.studio_service.errors import StudioError, to_studio_error
from backend.studio_service.pipeline import Endpoint, run_pipeline

logger = logging.getLogger(__name__)

# --- BLUEPRINT SETUP ---
studio_bp = Blueprint("studio", __name__)


def handle(endpoint: Endpoint) -> Tuple[Response, int]:
    """
    Run `endpoint` on the current request body.

    Returns:
        200: The endpoint's success payload.
        4xx/5xx: { "error": str } with the mapped status.
    """
    logger.info(f"--- {endpoint.name.upper()} START ---")
    data = request.get_json(silent=True)

    try:
        payload = run_pipeline(endpoint, data)
    except Exception as e:
        error = to_studio_error(e, endpoint.failure_message)
        summary = f"--- {endpoint.name.upper()} ERROR --- ({error.status_code}) {error.message}"
        if isinstance(e, StudioError):
            logger.error(summary)
        else:
            logger.exception(summary)
        return jsonify({"error": error.message}), error.status_code

    logger.info(f"--- {endpoint.name.upper()} SUCCESS ---")
    return jsonify(payload), 200


# --- ROUTES ---

@studio_bp.route("/generate", methods=["POST"])
def generate_logo() -> Tuple[Response, int]:
    """
    Generate a logo and a colour analysis for a brand.

    Expects:
    - brandName (str), industry (str), personality (str)
    - tagline (str, optional)
    - colorVibe (str, optional): colour style key

    Returns:
        200: { "imageUrl": str, "analysis": dict }
        400: Missing required fields.
        500: Configuration or AI error.
    """
    return handle(LOGO)


@studio_bp.route("/style", methods=["POST"])
def style_outfit() -> Tuple[Response, int]:
    """
    Recommend an outfit and render it as a mood board.

    Expects:
    - occasion (str), weather (str)
    - styleVibe (str, optional): vibe style key
    - customPreferences (str, optional)

    Returns:
        200: { "imageUrl": str, "analysis": { outfitDescription, items, rationale, palette } }
        400: Missing occasion or weather.
        401/429: Upstream credential or rate-limit failure.
        500: Configuration or AI error.
    """
    return handle(OUTFIT)


@studio_bp.route("/colorize", methods=["POST"])
def colorize_blueprint() -> Tuple[Response, int]:
    """
    Turn an uploaded blueprint into a colored 2D floor plan.

    Expects:
    - image (str): data URL or http(s) URL
    - style (str, optional): rendering style key
    - customInstructions (str, optional)

    Returns:
        200: { "imageUrl": str, "analysis": str }
        400: Missing blueprint image.
        500: Configuration or AI error.
    """
    return handle(BLUEPRINT)


@studio_bp.route("/swap", methods=["POST"])
def swap_background() -> Tuple[Response, int]:
    """
    Re-shoot a product on a new background.

    Expects:
    - productDescription (str) or image (str); the description wins when both are sent
    - backgroundStyle (str, optional): background style key
    - customPrompt (str, optional)

    Returns:
        200: { "imageUrl": str, "description": str }
        400: Missing product information.
        500: Configuration or AI error.
    """
    return handle(PRODUCT)


@studio_bp.route("/styles", methods=["GET"])
def list_styles() -> Tuple[Response, int]:
    """
    List the style keys each endpoint accepts, for the style picker.

    Returns:
        200: { "<route>": { "field": str, "options": [str], "default": str } }
    """
    styles = {
        route: {"field": endpoint.style_field, **endpoint.styles.to_dict()}
        for route, endpoint in ENDPOINTS.items()
    }
    return jsonify(styles), 200
