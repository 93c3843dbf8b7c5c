"""Image generation adapter package.

Scope:
    Provides the text-to-image adapter used by the router for the image
    generation endpoint. Transport is shared with `gateway.llm.client`.
"""
