"""Shared request/result data structures for the inference adapters."""

from dataclasses import dataclass
from enum import Enum

from gateway.errors import InvalidRequest


class ModelKind(str, Enum):
    CHAT = "chat"
    SAFETY_FILTER = "safety-filter"
    IMAGE = "image"


@dataclass(frozen=True)
class ModelDescriptor:
    logical_name: str
    provider_id: str
    kind: ModelKind


def require_prompt(prompt) -> str:
    """Return `prompt` unchanged or raise `InvalidRequest` when it is unusable."""
    if not isinstance(prompt, str) or not prompt:
        raise InvalidRequest("prompt is missing or empty")
    return prompt


@dataclass(frozen=True)
class ChatRequest:
    model: ModelDescriptor
    system_message: str
    user_prompt: str

    def __post_init__(self):
        require_prompt(self.user_prompt)

    def to_payload(self, safety_model: ModelDescriptor) -> dict:
        """Build the chat-completions body for this request."""
        return {
            "model": self.model.provider_id,
            "safety_model": safety_model.provider_id,
            "messages": [
                {"role": "system", "content": self.system_message},
                {"role": "user", "content": self.user_prompt},
            ],
        }


@dataclass(frozen=True)
class ChatResult:
    raw_text: str


@dataclass(frozen=True)
class StructuredChatResult:
    reasoning: str
    answer: str


@dataclass(frozen=True)
class ImageRequest:
    model: ModelDescriptor
    prompt: str
    width: int
    height: int
    count: int
    steps: int

    def __post_init__(self):
        require_prompt(self.prompt)

    def to_payload(self) -> dict:
        """Build the image-generations body for this request."""
        return {
            "model": self.model.provider_id,
            "prompt": self.prompt,
            "width": self.width,
            "height": self.height,
            "n": self.count,
            "steps": self.steps,
        }


@dataclass(frozen=True)
class ImageResult:
    url: str
