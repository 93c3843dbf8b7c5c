"""
HTTP API adapter for the inference gateway.

Architectural role:
- Expose the three gateway operations as JSON POST endpoints.
- Parse the request body and extract the prompt.
- Delegate all model work to `gateway.core.engine.RequestRouter`.
- Render router replies as JSON responses with their status codes.

Endpoints:
- `POST /llama`: primary chat -> `{"answer": ...}`
- `POST /deepseek`: reasoning chat -> `{"think": ..., "say": ...}`
- `POST /flux`: image generation -> `{"result": <url>}`

API request lifecycle:
1. Parse request JSON; expect an object with a `prompt` key.
2. Forward the prompt to the matching router operation.
3. Return the router's `GatewayReply` as a `JSONResponse`.

Input validation behavior:
- Invalid JSON, a non-object body, or a non-string prompt -> HTTP 400
  `{"error": ...}` (validated against `PromptRequest`).
- Missing/empty prompt -> HTTP 400 (raised by request construction).

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Builds the default router lazily from `load_settings()` on first request.
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from gateway.core.engine import GatewayReply, RequestRouter, error_reply
from gateway.errors import InvalidRequest
from gateway.llm.provider_config import load_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Together inference gateway")

_DEFAULT_ROUTER: RequestRouter | None = None


class PromptRequest(BaseModel):
    """Request body shared by all three endpoints."""

    prompt: str | None = None


def get_router() -> RequestRouter:
    """Return the process-wide router, creating it on first use."""
    global _DEFAULT_ROUTER
    if _DEFAULT_ROUTER is None:
        _DEFAULT_ROUTER = RequestRouter(load_settings())
    return _DEFAULT_ROUTER


async def read_prompt(request: Request):
    """Return the raw `prompt` value from a JSON object body.

    Raises:
        InvalidRequest: the body is not valid JSON, not a JSON object, or
            carries a non-string prompt.
    """
    try:
        body = await request.json()
    except ValueError as exc:
        raise InvalidRequest("request body is not valid JSON") from exc

    try:
        return PromptRequest.model_validate(body).prompt
    except ValidationError as exc:
        raise InvalidRequest("request body must be an object with a string prompt") from exc


def to_response(reply: GatewayReply) -> JSONResponse:
    return JSONResponse(status_code=reply.status_code, content=reply.body)


async def dispatch(request: Request, operation) -> JSONResponse:
    try:
        prompt = await read_prompt(request)
    except InvalidRequest as exc:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return to_response(error_reply(exc))

    return to_response(await operation(prompt))


@app.post("/llama")
async def llama(request: Request, router: RequestRouter = Depends(get_router)):
    """Chat with the primary model."""
    return await dispatch(request, router.primary_chat)


@app.post("/deepseek")
async def deepseek(request: Request, router: RequestRouter = Depends(get_router)):
    """Chat with the reasoning model; replies carry `think` and `say`."""
    return await dispatch(request, router.reasoning_chat)


@app.post("/flux")
async def flux(request: Request, router: RequestRouter = Depends(get_router)):
    """Generate one image and return its URL."""
    return await dispatch(request, router.generate_image)
