"""Image generation adapter.

Role in pipeline:
    - Receives an image model descriptor and prompt from the request router.
    - Resolves the model's fixed step count from the registry.
    - Submits one generation request and returns the first image URL.

Size validation:
    - Width, height, and image count are fixed (1024x1024, one image).
    - Callers cannot tune the step count; it is a per-model constant.

Error handling strategy:
    - Unknown image model -> `UnsupportedModel` before any network call.
    - Empty prompt -> `InvalidRequest` before any network call.
    - Provider failure or empty result set -> `UpstreamError`.
"""

import logging

from gateway.errors import UpstreamError
from gateway.llm.client import send_request
from gateway.llm.provider_config import Settings, load_settings
from gateway.llm.registry import (
    IMAGE_COUNT,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    resolve_image_steps,
)
from gateway.llm.types import ImageRequest, ImageResult, ModelDescriptor

logger = logging.getLogger(__name__)

IMAGE_GENERATIONS_PATH = "images/generations"


def build_image_request(model: ModelDescriptor, prompt: str) -> ImageRequest:
    """Construct an `ImageRequest` with registry-resolved parameters."""
    return ImageRequest(
        model=model,
        prompt=prompt,
        width=IMAGE_WIDTH,
        height=IMAGE_HEIGHT,
        count=IMAGE_COUNT,
        steps=resolve_image_steps(model),
    )


def generate_image(
    model: ModelDescriptor,
    prompt: str,
    settings: Settings | None = None,
) -> ImageResult:
    """Generate one image and return its URL.

    Args:
        model: Image model descriptor from the registry.
        prompt: Text prompt for generation.
        settings: Process configuration. Loaded from the environment when
            omitted.

    Returns:
        `ImageResult` with the first generated image URL.
    """
    request = build_image_request(model, prompt)
    settings = settings or load_settings()

    if settings.debug:
        logger.debug(
            "Image request: model=%s steps=%d prompt=%r",
            model.provider_id,
            request.steps,
            prompt,
        )

    data = send_request(IMAGE_GENERATIONS_PATH, request.to_payload(), settings)

    images = data.get("data")
    if not isinstance(images, list) or not images:
        raise UpstreamError(f"no images returned by {model.provider_id}")

    first = images[0] if isinstance(images[0], dict) else {}
    url = first.get("url")
    if not isinstance(url, str) or not url:
        raise UpstreamError(f"image without url returned by {model.provider_id}")

    return ImageResult(url=url)
