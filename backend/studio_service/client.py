"""
OpenAI access for the studio endpoints.
Creates the shared client from the environment and wraps the three calls
the pipeline makes: image description, JSON analysis, and image generation.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from openai import OpenAI
from dotenv import load_dotenv

from backend.studio_service.errors import ConfigurationError, UpstreamError, EmptyResultError

load_dotenv()

logger = logging.getLogger(__name__)

# --- API KEY RETRIEVAL ---
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")

# --- CALL POLICY ---
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", 60))
OPENAI_MAX_RETRIES = int(os.getenv("OPENAI_MAX_RETRIES", 0))

# --- MODELS ---
VISION_MODEL = os.getenv("VISION_MODEL", "gpt-4o-mini")
BRAND_MODEL = os.getenv("BRAND_MODEL", "gpt-4o")
STYLIST_MODEL = os.getenv("STYLIST_MODEL", "gpt-4o-mini")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "dall-e-3")
IMAGE_SIZE = os.getenv("IMAGE_SIZE", "1024x1024")

NOT_CONFIGURED_MESSAGE = "OpenAI API key is not configured"

# --- CLIENT INITIALIZATION ---
openai_client: Optional[OpenAI] = None

if OPENAI_API_KEY:
    try:
        openai_client = OpenAI(
            api_key=OPENAI_API_KEY,
            timeout=OPENAI_TIMEOUT_SECONDS,
            max_retries=OPENAI_MAX_RETRIES,
        )
        logger.info("Successfully initialized OpenAI client.")
    except Exception as e:
        openai_client = None
        logger.warning(f"OpenAI client initialization failed: {e}")
else:
    logger.warning("OPENAI_API_KEY is not defined in the environment.")


def is_configured() -> bool:
    """Return True when an OpenAI client is available."""
    return openai_client is not None


def _require_client() -> OpenAI:
    if openai_client is None:
        raise ConfigurationError(NOT_CONFIGURED_MESSAGE)
    return openai_client


def describe_image(image: str, instruction: str) -> str:
    """
    Ask the vision model to describe an image.

    Args:
        image (str): A data URL or remote URL of the image.
        instruction (str): The fixed instruction sent alongside the image.

    Returns:
        str: The first text answer from the model.

    Raises:
        ConfigurationError: No client is configured.
        UpstreamError: The model answered without any text.
    """
    client = _require_client()
    response = client.chat.completions.create(
        model=VISION_MODEL,
        messages=[
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": instruction},
                    {"type": "image_url", "image_url": {"url": image}},
                ],
            }
        ],
    )

    content = response.choices[0].message.content if response.choices else None
    if not isinstance(content, str) or not content.strip():
        raise UpstreamError("Image analysis returned no description")
    return content


def analyze_json(system_prompt: str, user_prompt: str, model: str) -> Dict[str, Any]:
    """
    Run a chat completion in JSON mode and parse the answer.

    Args:
        system_prompt (str): Role and output format for the model.
        user_prompt (str): The request details.
        model (str): Chat model name.

    Returns:
        dict: The parsed JSON object.

    Raises:
        ConfigurationError: No client is configured.
        UpstreamError: The answer is empty or not a JSON object.
    """
    client = _require_client()
    response = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        response_format={"type": "json_object"},
    )

    content = response.choices[0].message.content if response.choices else None
    try:
        result = json.loads(content or "{}")
    except (TypeError, ValueError):
        raise UpstreamError("Analysis service returned malformed JSON")

    if not isinstance(result, dict):
        raise UpstreamError("Analysis service returned malformed JSON")
    return result


def generate_image(prompt: str, quality: str, empty_message: str) -> str:
    """
    Generate a single image and return its URL.

    Args:
        prompt (str): The composed image prompt.
        quality (str): Quality tier ("standard" or "hd").
        empty_message (str): Error message when no image comes back.

    Returns:
        str: URL of the first generated image.

    Raises:
        ConfigurationError: No client is configured.
        EmptyResultError: The service produced no image URL.
    """
    client = _require_client()
    response = client.images.generate(
        model=IMAGE_MODEL,
        prompt=prompt,
        n=1,
        size=IMAGE_SIZE,
        quality=quality,
    )

    if not response.data:
        raise EmptyResultError(empty_message)

    image_url = response.data[0].url
    if not image_url:
        raise EmptyResultError(empty_message)
    return image_url
