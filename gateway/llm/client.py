"""Together API transport client.

Architectural role:
    Executes one HTTP request against the Together REST API and returns the
    decoded JSON body. Shared by chat completion (`gateway.llm.service`) and
    image generation (`gateway.image.service`).

Model invocation flow:
    adapter -> `send_request(path, payload, settings)` -> POST
    `<base_url>/<path>` -> parsed JSON dict.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with the
    configured timeout.

Timeout:
    `settings.request_timeout` is passed to `requests` as the socket-level
    failure bound of the transport. It is not a gateway timeout: there is no
    deadline or cancellation around a call, which runs until the provider
    answers or the transport itself fails.

Failure handling model:
    Every transport, status, or decoding failure is raised as `UpstreamError`.
    The exception text is sanitized to a provider label plus HTTP status so
    response bodies and key material never reach logs or callers.
"""

import logging

import requests

from gateway.errors import UpstreamError
from gateway.llm.provider_config import Settings

logger = logging.getLogger(__name__)

PROVIDER_LABEL = "together"


def _build_sanitized_http_error(provider_name: str, err: requests.exceptions.RequestException) -> str:
    """Build provider-labeled HTTP error text without exposing raw internals.

    Args:
        provider_name: Active provider label.
        err: Request exception instance.

    Returns:
        Sanitized error string with optional status code.
    """
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)

    label = str(provider_name or "provider").upper()
    if status_code:
        return f"{label} HTTP ERROR ({status_code})"
    return f"{label} HTTP ERROR"


def build_headers(settings: Settings) -> dict:
    """Return request headers; the bearer token is omitted when no key is set."""
    headers = {"Content-Type": "application/json"}
    if settings.api_key:
        headers["Authorization"] = f"Bearer {settings.api_key}"
    return headers


def send_request(path: str, payload: dict, settings: Settings) -> dict:
    """Send one request to the Together API and decode the JSON response.

    Args:
        path: Endpoint path relative to `settings.base_url`.
        payload: JSON request body.
        settings: Process configuration (key, base URL, timeout).

    Returns:
        Decoded JSON object.

    Raises:
        UpstreamError: network failure, non-2xx status, or a body that is not
            a JSON object.
    """
    url = f"{settings.base_url}/{path.lstrip('/')}"

    try:
        response = requests.post(
            url,
            headers=build_headers(settings),
            json=payload,
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as err:
        safe_error = _build_sanitized_http_error(PROVIDER_LABEL, err)
        logger.warning("Upstream request to %s failed: %s", path, safe_error)
        raise UpstreamError(safe_error) from err
    except ValueError as err:
        logger.warning("Upstream response from %s was not valid JSON", path)
        raise UpstreamError(f"{PROVIDER_LABEL.upper()} INVALID RESPONSE") from err

    if not isinstance(data, dict):
        raise UpstreamError(f"{PROVIDER_LABEL.upper()} INVALID RESPONSE")

    return data
