"""Gateway API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level parsing and response rendering.
- Delegates model work to the core router.
"""
