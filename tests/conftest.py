import base64
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from image_forge.config import Settings
from image_forge.main import create_app

ALLOWED_ORIGIN = "http://localhost:8080"


def make_jpeg(color=(200, 120, 40)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format="JPEG")
    return buffer.getvalue()


class FakeAIClient:
    """Stands in for WorkersAIClient: records calls and replays a canned result."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def is_configured(self):
        return True

    def run(self, model, inputs):
        self.calls.append((model, inputs))
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        if "flux" in model:
            return {"image": base64.b64encode(make_jpeg()).decode("ascii")}
        return make_jpeg()


@pytest.fixture
def fake_ai():
    return FakeAIClient()


@pytest.fixture
def make_client():
    def _make(settings=None, ai_client=None):
        app = create_app(settings or Settings(), ai_client=ai_client or FakeAIClient())
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, fake_ai):
    return make_client(ai_client=fake_ai)
