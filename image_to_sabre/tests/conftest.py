from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from image_to_sabre.app.api import create_app
from image_to_sabre.config import Settings

SMALL_IMAGE = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


class FakeInferenceClient:
    """Deterministic stand-in for the OpenAI client; records every call."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    def submit(self, prompt: str, image_data_url: str) -> str:
        self.calls.append((prompt, image_data_url))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def fake_client():
    return FakeInferenceClient("1  AA  100  Y  01JAN  JFK LAX  0800 1100")


@pytest.fixture
def api(settings, fake_client):
    return TestClient(create_app(settings, fake_client))
