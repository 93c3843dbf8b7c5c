"""LLM access package.

Architectural role:
    Provides configuration, the model registry, request/result types, and the
    transport used by the router to invoke Together models.

Module split:
    - `provider_config`: environment-driven settings and key lookup.
    - `registry`: logical model roles and per-model image settings.
    - `types`: request/result data structures.
    - `client`: HTTP transport and error sanitization.
    - `service`: chat completion adapter.
"""
