"""
The request pipeline shared by every studio endpoint:
validate -> configuration check -> style lookup -> resolve description
-> compose prompt -> generate image -> format response.

Endpoint-specific behaviour is supplied through an `Endpoint` record.
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from dotenv import load_dotenv

from backend.studio_service import client as ai_client
from backend.studio_service.errors import InputError, ConfigurationError
from backend.studio_service.styles import StyleTable

load_dotenv()

logger = logging.getLogger(__name__)

# --- CONSTANTS FOR VALIDATION ---
MAX_TEXT_LENGTH = int(os.getenv("STUDIO_MAX_TEXT_LENGTH", 2000))
IMAGE_PREFIXES = ("data:image/", "http://", "https://")


@dataclass(frozen=True)
class Resolution:
    """The resolved description and whatever analysis the endpoint returns."""

    description: str
    analysis: Any = None


@dataclass(frozen=True)
class Endpoint:
    """Configuration for one studio endpoint."""

    name: str
    validate: Callable[[Dict[str, Any]], None]
    styles: StyleTable
    style_field: str
    resolve: Callable[[Dict[str, Any], str], Resolution]
    compose: Callable[[Dict[str, Any], Resolution, str], str]
    quality: str
    empty_message: str
    respond: Callable[[str, Resolution], Dict[str, Any]]
    failure_message: str


# --- VALIDATION HELPERS ---

def is_blank(value: Any) -> bool:
    """True for None, non-strings that are falsy, and whitespace-only strings."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def require_fields(data: Dict[str, Any], fields: Iterable[str], message: str) -> None:
    """Raise InputError unless every field is present and non-empty."""
    if any(is_blank(data.get(field)) for field in fields):
        raise InputError(message)


def require_any(data: Dict[str, Any], fields: Iterable[str], message: str) -> None:
    """Raise InputError unless at least one field is present and non-empty."""
    if all(is_blank(data.get(field)) for field in fields):
        raise InputError(message)


def check_image(value: Any) -> None:
    """Accept data URLs and http(s) URLs only. Blank values are skipped."""
    if is_blank(value):
        return
    if not isinstance(value, str) or not value.startswith(IMAGE_PREFIXES):
        raise InputError("Unsupported image reference")


def check_text_lengths(data: Dict[str, Any], fields: Iterable[str],
                       limit: Optional[int] = None) -> None:
    """
    Enforce the free-text bound on user-supplied fields.

    Args:
        data (dict): The request payload.
        fields (Iterable[str]): Free-text field names to check.
        limit (int, optional): Maximum characters; defaults to MAX_TEXT_LENGTH.

    Raises:
        InputError: A field is not a string or exceeds the limit.
    """
    limit = MAX_TEXT_LENGTH if limit is None else limit
    for field in fields:
        value = data.get(field)
        if value is None:
            continue
        if not isinstance(value, str):
            raise InputError(f"{field} must be a string")
        if len(value) > limit:
            raise InputError(f"{field} exceeds {limit} characters")


def resolve_description(text: Optional[str], image: Optional[str], instruction: str) -> str:
    """
    Use the supplied text verbatim when present, otherwise describe the image.

    Args:
        text (str, optional): A user-supplied description.
        image (str, optional): Data URL or remote URL of the image.
        instruction (str): Instruction sent to the vision model.

    Returns:
        str: The description to build the prompt from.
    """
    if not is_blank(text):
        return text
    if is_blank(image):
        raise InputError("Missing description or image")
    return ai_client.describe_image(image, instruction)


# --- PIPELINE ---

def run_pipeline(endpoint: Endpoint, data: Any) -> Dict[str, Any]:
    """
    Run one request through the shared pipeline.

    Args:
        endpoint (Endpoint): The endpoint configuration.
        data (Any): The decoded JSON body.

    Returns:
        dict: The success payload.

    Raises:
        StudioError: Any validation, configuration, or upstream failure.
        openai.OpenAIError: SDK failures, mapped by the caller.
    """
    if not isinstance(data, dict):
        raise InputError("Request body must be a JSON object")

    endpoint.validate(data)

    if not ai_client.is_configured():
        logger.error(f"[{endpoint.name}] OPENAI_API_KEY is missing")
        raise ConfigurationError(ai_client.NOT_CONFIGURED_MESSAGE)

    style_key = endpoint.styles.resolve_key(data.get(endpoint.style_field))
    style_phrase = endpoint.styles.phrase_for(style_key)
    logger.info(f"[{endpoint.name}] Using style '{style_key}'")

    resolution = endpoint.resolve(data, style_phrase)
    logger.info(f"[{endpoint.name}] Analysis complete.")

    prompt = endpoint.compose(data, resolution, style_phrase)

    logger.info(f"[{endpoint.name}] Generating image ({endpoint.quality} quality)...")
    image_url = ai_client.generate_image(prompt, endpoint.quality, endpoint.empty_message)
    logger.info(f"[{endpoint.name}] Image generation successful: {image_url[:50]}...")

    return endpoint.respond(image_url, resolution)
