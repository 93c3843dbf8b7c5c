"""Together inference gateway.

Forwards prompts to the Together hosted inference API (chat completion and
image generation) and reshapes the responses for a frontend.
"""
