import pytest
import requests

from tests.helpers import FakeResponse, chat_payload
from gateway.errors import InvalidRequest, UpstreamError
from gateway.llm.provider_config import Settings
from gateway.llm.registry import DEEPSEEK, GUARD, LLAMA, ModelRole, get_model
from gateway.llm.service import complete_chat


def test_sends_system_and_user_messages_with_safety_model(fake_post, settings):
    fake_post.response = FakeResponse(chat_payload("hello there"))

    result = complete_chat(get_model(ModelRole.PRIMARY_CHAT), "be brief", "hi", settings)

    assert result.raw_text == "hello there"
    assert len(fake_post.calls) == 1
    call = fake_post.calls[0]
    assert call["url"] == "https://example.test/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer test-key"
    assert call["timeout"] == 5
    assert call["json"] == {
        "model": LLAMA,
        "safety_model": GUARD,
        "messages": [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hi"},
        ],
    }


def test_reasoning_model_is_forwarded(fake_post, settings):
    fake_post.response = FakeResponse(chat_payload("<think>x</think>y"))

    result = complete_chat(get_model(ModelRole.REASONING_CHAT), "s", "why?", settings)

    assert fake_post.calls[0]["json"]["model"] == DEEPSEEK
    assert result.raw_text == "<think>x</think>y"


def test_missing_api_key_still_calls_provider(fake_post, settings):
    fake_post.response = FakeResponse({"error": "unauthorized"}, status_code=401)
    keyless = Settings(base_url=settings.base_url)

    with pytest.raises(UpstreamError):
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "hi", keyless)

    assert "Authorization" not in fake_post.calls[0]["headers"]


@pytest.mark.parametrize("prompt", ["", None, 42])
def test_invalid_prompt_fails_before_network(fake_post, settings, prompt):
    with pytest.raises(InvalidRequest):
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", prompt, settings)

    assert fake_post.calls == []


def test_whitespace_prompt_is_forwarded(fake_post, settings):
    fake_post.response = FakeResponse(chat_payload("ok"))

    result = complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "   ", settings)

    assert result.raw_text == "ok"
    assert fake_post.calls[0]["json"]["messages"][1] == {"role": "user", "content": "   "}


def test_transport_failure_is_upstream_error(fake_post, settings):
    fake_post.exc = requests.ConnectionError("connection refused")

    with pytest.raises(UpstreamError) as excinfo:
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "hi", settings)

    assert str(excinfo.value) == "TOGETHER HTTP ERROR"


def test_http_status_is_sanitized(fake_post, settings):
    fake_post.response = FakeResponse({"error": {"message": "secret detail"}}, status_code=503)

    with pytest.raises(UpstreamError) as excinfo:
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "hi", settings)

    assert str(excinfo.value) == "TOGETHER HTTP ERROR (503)"


def test_non_json_body_is_upstream_error(fake_post, settings):
    fake_post.response = FakeResponse(json_error=ValueError("not json"))

    with pytest.raises(UpstreamError):
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "hi", settings)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": ["oops"]},
        {"choices": {"a": 1}},
        {"choices": "abc"},
        {"choices": [{"message": "oops"}]},
        {"choices": [{"message": {"content": 5}}]},
    ],
)
def test_unusable_completion_is_upstream_error(fake_post, settings, payload):
    fake_post.response = FakeResponse(payload)

    with pytest.raises(UpstreamError):
        complete_chat(get_model(ModelRole.PRIMARY_CHAT), "s", "hi", settings)
