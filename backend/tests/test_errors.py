import openai
import httpx

from backend.studio_service.errors import (
    StudioError,
    InputError,
    ConfigurationError,
    UpstreamError,
    EmptyResultError,
    to_studio_error,
)

def test_default_statuses():
    assert InputError("x").status_code == 400
    assert ConfigurationError("x").status_code == 500
    assert UpstreamError("x").status_code == 500
    assert EmptyResultError("x").status_code == 500
    assert UpstreamError("x", status_code=502).status_code == 502

def test_studio_errors_pass_through():
    error = InputError("Missing blueprint image")
    assert to_studio_error(error, "fallback") is error

def test_status_errors_keep_upstream_status(make_status_error):
    mapped = to_studio_error(make_status_error(openai.AuthenticationError, 401), "fallback")
    assert isinstance(mapped, UpstreamError)
    assert mapped.status_code == 401
    assert mapped.message == "Invalid OpenAI API Key"

    mapped = to_studio_error(make_status_error(openai.BadRequestError, 400, "Prompt rejected"), "fallback")
    assert mapped.status_code == 400
    assert mapped.message == "Prompt rejected"

def test_unexpected_errors_become_500():
    mapped = to_studio_error(RuntimeError("boom"), "Failed to swap background")
    assert type(mapped) is StudioError
    assert mapped.status_code == 500
    assert mapped.message == "boom"

    assert to_studio_error(RuntimeError(), "Failed to swap background").message == "Failed to swap background"

def test_connection_errors_have_no_upstream_status():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    mapped = to_studio_error(openai.APITimeoutError(request=request), "Failed to colorize blueprint")
    assert mapped.status_code == 500
