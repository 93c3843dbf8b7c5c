import pytest

from gateway.llm import client as client_module
from gateway.llm.provider_config import Settings
from tests.helpers import FakeResponse, RecordingPost


@pytest.fixture
def settings():
    return Settings(
        api_key="test-key",
        chat_system_message="system says hi",
        base_url="https://example.test/v1",
        request_timeout=5,
    )


@pytest.fixture
def fake_post(monkeypatch):
    """Patch the transport with a recorder; tests set `.response` or `.exc`."""
    recorder = RecordingPost(FakeResponse({}))
    monkeypatch.setattr(client_module.requests, "post", recorder)
    return recorder
