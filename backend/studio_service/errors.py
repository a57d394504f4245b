"""
Error kinds raised by the studio pipeline.
Every error carries the HTTP status the route should answer with.
"""

from typing import Optional

import openai

# Friendly messages for upstream statuses the browser client shows verbatim
UPSTREAM_STATUS_MESSAGES = {
    401: "Invalid OpenAI API Key",
    429: "OpenAI rate limit exceeded or insufficient credits",
}


class StudioError(Exception):
    """Base error: a message for the client plus an HTTP status code."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InputError(StudioError):
    """Missing, empty, or malformed request field."""

    status_code = 400


class ConfigurationError(StudioError):
    """The OpenAI credential is not configured."""

    status_code = 500


class UpstreamError(StudioError):
    """The analysis or image service failed or answered with unusable content."""

    status_code = 500


class EmptyResultError(StudioError):
    """The image service answered but produced no image."""

    status_code = 500


def to_studio_error(exc: Exception, fallback_message: str) -> StudioError:
    """
    Map any exception raised while handling a request onto a StudioError.

    Args:
        exc (Exception): The exception caught at the route boundary.
        fallback_message (str): Message to use when the exception has no text.

    Returns:
        StudioError: An error carrying the message and status to return.
    """
    if isinstance(exc, StudioError):
        return exc

    if isinstance(exc, openai.APIStatusError):
        status = exc.status_code
        message = UPSTREAM_STATUS_MESSAGES.get(status) or exc.message or fallback_message
        return UpstreamError(message, status_code=status)

    return StudioError(str(exc) or fallback_message)
