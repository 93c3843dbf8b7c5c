"""Request routing for the three gateway operations.

Architectural role:
    Sits between the API/CLI adapters and the inference adapters. Each
    operation maps one prompt to one structured reply.

Control-flow model (per call):
    1. Resolve the model descriptor from the registry.
    2. Run the blocking adapter call in a worker thread (`asyncio.to_thread`).
    3. Shape the result into the operation's reply body.
    4. Convert any raised failure into a `{"error": ...}` reply.

Operations:
    - `primary_chat`   -> `{"answer": str}`
    - `reasoning_chat` -> `{"think": str, "say": str}`
    - `generate_image` -> `{"result": url}`

Error handling strategy:
    `GatewayError` subclasses carry their own status code and caller-facing
    message. Any other exception is logged with traceback and replied to as a
    generic 500. Nothing propagates past the router.

State:
    None. The router only holds read-only settings and the adapter callables,
    so concurrent calls are independent.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from gateway.core.shaping import extract_reasoning
from gateway.errors import FormatMismatch, GatewayError, InvalidRequest
from gateway.image.service import generate_image as default_image_fn
from gateway.llm.provider_config import Settings
from gateway.llm.registry import ModelRole, get_model
from gateway.llm.service import complete_chat as default_chat_fn

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = GatewayError.public_message


@dataclass
class GatewayReply:
    """Structured reply produced by every router operation."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def error_reply(exc: Exception) -> GatewayReply:
    """Map a failure to its caller-facing reply.

    `InvalidRequest` and `FormatMismatch` map to 400. `UpstreamError` and
    `UnsupportedModel` map to 500 with a generic message. Anything else is a
    500 with the generic internal-error message.
    """
    if isinstance(exc, GatewayError):
        return GatewayReply(exc.status_code, {"error": exc.public_message})
    return GatewayReply(500, {"error": GENERIC_ERROR_MESSAGE})


class RequestRouter:
    """Dispatch prompts to the inference adapters and shape their replies.

    Args:
        settings: Process-wide configuration, passed through to adapters.
        chat_fn: Chat adapter with the `complete_chat` signature.
        image_fn: Image adapter with the `generate_image` signature.
    """

    def __init__(
        self,
        settings: Settings,
        chat_fn: Callable = default_chat_fn,
        image_fn: Callable = default_image_fn,
    ) -> None:
        self.settings = settings
        self.chat_fn = chat_fn
        self.image_fn = image_fn

    async def _chat(self, role: ModelRole, prompt) -> str:
        if self.settings.debug:
            logger.info("Prompt (%s): %r", role.value, prompt)
        result = await asyncio.to_thread(
            self.chat_fn,
            get_model(role),
            self.settings.chat_system_message,
            prompt,
            self.settings,
        )
        return result.raw_text

    async def _run(self, operation: str, coro_factory) -> GatewayReply:
        try:
            body = await coro_factory()
        except (InvalidRequest, FormatMismatch) as exc:
            logger.warning("%s rejected: %s", operation, exc)
            return error_reply(exc)
        except GatewayError as exc:
            logger.error("%s failed: %s", operation, exc)
            return error_reply(exc)
        except Exception as exc:
            logger.exception("%s failed unexpectedly", operation)
            return error_reply(exc)

        if self.settings.debug:
            logger.info("%s reply: %r", operation, body)
        return GatewayReply(200, body)

    async def primary_chat(self, prompt) -> GatewayReply:
        """Answer `prompt` with the primary chat model."""

        async def run():
            answer = await self._chat(ModelRole.PRIMARY_CHAT, prompt)
            return {"answer": answer}

        return await self._run("primary_chat", run)

    async def reasoning_chat(self, prompt) -> GatewayReply:
        """Answer `prompt` with the reasoning model, split into think/say."""

        async def run():
            raw_text = await self._chat(ModelRole.REASONING_CHAT, prompt)
            structured = extract_reasoning(raw_text)
            if structured is None:
                raise FormatMismatch("<think> and </think> tags not found in model output")
            return {"think": structured.reasoning, "say": structured.answer}

        return await self._run("reasoning_chat", run)

    async def generate_image(self, prompt) -> GatewayReply:
        """Generate one image for `prompt` and reply with its URL."""

        async def run():
            if self.settings.debug:
                logger.info("Prompt (%s): %r", ModelRole.IMAGE.value, prompt)
            result = await asyncio.to_thread(
                self.image_fn,
                get_model(ModelRole.IMAGE),
                prompt,
                self.settings,
            )
            return {"result": result.url}

        return await self._run("generate_image", run)
