"""Gateway error taxonomy.

Every failure raised below the router is one of these types. The router maps
each to a structured `{"error": ...}` reply using `status_code` and
`public_message`; the exception's own text is only ever logged.
"""


class GatewayError(Exception):
    """Base class for failures surfaced to gateway callers."""

    status_code = 500
    public_message = "Internal server error."


class InvalidRequest(GatewayError):
    """Missing, empty, or malformed prompt."""

    status_code = 400
    public_message = "A prompt is required."


class UpstreamError(GatewayError):
    """Provider call failed, returned no data, or returned an unusable body."""

    status_code = 500
    public_message = "The AI model call failed."


class UnsupportedModel(GatewayError):
    """Image model has no configured step count."""

    status_code = 500
    public_message = "The requested model is not supported."


class FormatMismatch(GatewayError):
    """Reasoning-model output lacked the `<think>` tagged structure."""

    status_code = 400
    public_message = "The AI model response was malformed."
