"""Chat completion adapter.

Architectural role:
    Provides the canonical chat entrypoint used by the request router. Builds
    a two-message conversation (system, user), attaches the safety-filter
    model as a moderation parameter, and extracts the first choice's text.

Model call flow:
    prompt -> `ChatRequest` validation -> payload -> `client.send_request`
    -> first choice content -> `ChatResult`.

Determinism:
    Payload construction is deterministic for fixed inputs and settings.
    Generated output remains non-deterministic because inference runs remotely.
"""

import logging

from gateway.errors import UpstreamError
from gateway.llm.client import send_request
from gateway.llm.provider_config import Settings, load_settings
from gateway.llm.registry import ModelRole, get_model
from gateway.llm.types import ChatRequest, ChatResult, ModelDescriptor

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "chat/completions"


def complete_chat(
    model: ModelDescriptor,
    system_message: str,
    user_prompt: str,
    settings: Settings | None = None,
) -> ChatResult:
    """Run one chat completion against `model`.

    Args:
        model: Chat model descriptor from the registry.
        system_message: System instruction sent before the user prompt.
        user_prompt: Caller prompt; must be a non-empty string.
        settings: Process configuration. Loaded from the environment when
            omitted.

    Returns:
        `ChatResult` holding the first choice's message content.

    Failure scenarios:
        - Empty prompt -> `InvalidRequest`, raised before any network call.
        - Transport/status/decoding failure -> `UpstreamError`.
        - No choices or no message content -> `UpstreamError`.
    """
    request = ChatRequest(model=model, system_message=system_message, user_prompt=user_prompt)
    settings = settings or load_settings()

    data = send_request(
        CHAT_COMPLETIONS_PATH,
        request.to_payload(get_model(ModelRole.SAFETY_FILTER)),
        settings,
    )

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise UpstreamError(f"no choices returned by {model.provider_id}")

    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    if not isinstance(message, dict):
        raise UpstreamError(f"no message returned by {model.provider_id}")

    content = message.get("content")
    if not isinstance(content, str):
        raise UpstreamError(f"no message content returned by {model.provider_id}")

    if settings.debug:
        logger.debug("Chat answer from %s: %r", model.provider_id, content)

    return ChatResult(raw_text=content)
