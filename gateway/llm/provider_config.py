"""Provider/runtime configuration for the gateway.

Architectural role:
    Centralizes Together API endpoint, credential lookup, and the default chat
    system message consumed by `gateway.llm.client`, `gateway.llm.service`, and
    `gateway.image.service`.

Model call flow integration:
    - `load_settings()` is called once at process start by the API/CLI layers.
    - The resulting `Settings` is passed explicitly into the router and adapters.

Determinism:
    Deterministic for a fixed process environment and key file. Values are read
    once; nothing mutates a `Settings` instance after construction.

Failure behavior:
    A missing API key is represented as `None` and is not validated here. The
    first upstream call then fails with an authentication error.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

TOGETHER_BASE_URL = "https://api.together.xyz/v1"
TOGETHER_KEY_FILE = "config/together.key"

# Socket-level failure bound handed to `requests` for one provider call.
# Not a gateway deadline; calls are never cancelled by the gateway.
DEFAULT_REQUEST_TIMEOUT = 120

# Shared system instruction sent as the first chat message.
DEFAULT_CHAT_SYSTEM_MESSAGE = (
    "마크다운을 사용하지 말고, 한국어만 사용하고 한국어 글자만 사용해. "
    "혹시라도 영어로 답변하면 다시 한번 한국어와 한글을 사용하는지 확인하고, "
    "그렇지 않다면 삭제해."
)


@dataclass(frozen=True)
class Settings:
    """Process-wide, read-only gateway configuration.

    Attributes:
        api_key: Together API key, or `None` when not configured.
        chat_system_message: System message prepended to every chat request.
        base_url: Together REST API root (no trailing slash).
        request_timeout: Per-request transport timeout in seconds.
        debug: Enables logging of prompt and answer text.
    """

    api_key: str | None = None
    chat_system_message: str = DEFAULT_CHAT_SYSTEM_MESSAGE
    base_url: str = TOGETHER_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    debug: bool = False


def load_key(path):
    """Load the Together API key from environment override or key file.

    Resolution order:
        1. `TOGETHER_API_KEY` environment variable.
        2. Raw file contents at `path`.

    Args:
        path: Key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path with no environment value returns `None`.
        - Missing or empty file returns `None`.
    """
    env_value = os.getenv("TOGETHER_API_KEY")
    if env_value:
        return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def load_settings() -> Settings:
    """Build `Settings` from the current environment.

    `CHAT_SYSTEM_MESSAGE` overrides the default system message only when set;
    an explicitly empty value is kept as-is.
    """
    system_message = os.getenv("CHAT_SYSTEM_MESSAGE")
    if system_message is None:
        system_message = DEFAULT_CHAT_SYSTEM_MESSAGE

    return Settings(
        api_key=load_key(TOGETHER_KEY_FILE),
        chat_system_message=system_message,
        base_url=os.getenv("TOGETHER_BASE_URL", TOGETHER_BASE_URL).rstrip("/"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)),
        debug=os.getenv("DEBUG") == "true",
    )
