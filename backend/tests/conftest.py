import json
import pytest
from unittest.mock import MagicMock
from flask import Flask
import httpx

from backend.studio_service.routes import studio_bp

@pytest.fixture
def app():
    app = Flask(__name__)
    app.register_blueprint(studio_bp, url_prefix="/api")
    app.config["TESTING"] = True
    return app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def mock_openai(mocker):
    """
    Replaces the shared OpenAI client with a MagicMock.
    Images return one URL unless a test overrides it.
    """
    mock_client = MagicMock()
    mock_client.images.generate.return_value = image_response("https://images.example.com/result.png")
    mocker.patch("backend.studio_service.client.openai_client", mock_client)
    return mock_client


def chat_response(content):
    """Build a chat completion stub whose first choice carries `content`."""
    mock_response = MagicMock()
    if isinstance(content, dict):
        content = json.dumps(content)
    mock_response.choices[0].message.content = content
    return mock_response


def image_response(*urls):
    mock_response = MagicMock()
    mock_response.data = [MagicMock(url=url) for url in urls]
    return mock_response


def status_error(error_cls, status, message="upstream failure"):
    request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
    response = httpx.Response(status, request=request)
    return error_cls(message, response=response, body=None)


@pytest.fixture
def make_chat_response():
    return chat_response

@pytest.fixture
def make_image_response():
    return image_response

@pytest.fixture
def make_status_error():
    return status_error
