# Area: Game
"""Capability token that gates debug-only controller operations."""

import secrets


class DebugCapability:
    """
    Opaque token issued by the host application.

    A controller only honours debug operations presented with the same
    token object it was constructed with.
    """

    def __init__(self, label: str = "debug"):
        self.label = label
        self._token = secrets.token_hex(8)

    def __repr__(self) -> str:
        return f"DebugCapability({self.label!r})"
