"""Core request handling package.

Composition:
    - `engine`: request router for the three gateway operations.
    - `shaping`: model-specific post-processing of raw model output.
"""
