"""Static model registry.

Architectural role:
    Maps the fixed logical model roles to Together provider identifiers and
    holds per-model image generation settings.

Lookup semantics:
    - `get_model(role)` accepts a `ModelRole` or its string value. Any other
      value is a programming error and raises `ValueError` from the enum.
    - `resolve_image_steps(model)` consults an explicit table. Models without
      an entry raise `UnsupportedModel`; there is no default step count.

Determinism:
    Both tables are read-only mappings built at import time.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from gateway.errors import UnsupportedModel
from gateway.llm.types import ModelDescriptor, ModelKind


class ModelRole(str, Enum):
    PRIMARY_CHAT = "chat-primary"
    REASONING_CHAT = "chat-reasoning"
    SAFETY_FILTER = "safety-filter"
    IMAGE = "image-generator"


LLAMA = "meta-llama/Llama-3.3-70B-Instruct-Turbo-Free"
DEEPSEEK = "deepseek-ai/DeepSeek-R1-Distill-Llama-70B-free"
GUARD = "meta-llama/Meta-Llama-Guard-3-8B"
FLUX = "black-forest-labs/FLUX.1-schnell-Free"

MODELS = MappingProxyType({
    ModelRole.PRIMARY_CHAT: ModelDescriptor(
        ModelRole.PRIMARY_CHAT.value, LLAMA, ModelKind.CHAT
    ),
    ModelRole.REASONING_CHAT: ModelDescriptor(
        ModelRole.REASONING_CHAT.value, DEEPSEEK, ModelKind.CHAT
    ),
    ModelRole.SAFETY_FILTER: ModelDescriptor(
        ModelRole.SAFETY_FILTER.value, GUARD, ModelKind.SAFETY_FILTER
    ),
    ModelRole.IMAGE: ModelDescriptor(
        ModelRole.IMAGE.value, FLUX, ModelKind.IMAGE
    ),
})


# Fixed output geometry for every image request.
IMAGE_WIDTH = 1024
IMAGE_HEIGHT = 1024
IMAGE_COUNT = 1


@dataclass(frozen=True)
class ImageModelSettings:
    steps: int


IMAGE_MODEL_SETTINGS = MappingProxyType({
    FLUX: ImageModelSettings(steps=4),
})


def get_model(role) -> ModelDescriptor:
    """Return the descriptor registered for a logical role."""
    return MODELS[ModelRole(role)]


def resolve_image_steps(model: ModelDescriptor) -> int:
    """Return the step count for an image model.

    Raises:
        UnsupportedModel: `model` is not an image model with a table entry.
    """
    settings = IMAGE_MODEL_SETTINGS.get(model.provider_id)
    if model.kind is not ModelKind.IMAGE or settings is None:
        raise UnsupportedModel(f"no image settings for {model.provider_id!r}")
    return settings.steps
