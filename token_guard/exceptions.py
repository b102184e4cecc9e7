"""
Exceptions raised at the edges of token-guard.

The classification engine itself never raises on odd input; these are
reserved for caller-side setup (invalid rule options, bad settings).
"""


class TokenGuardError(Exception):
    """Base class for all token-guard errors."""


class ConfigurationError(TokenGuardError, ValueError):
    """Raised when rule options or settings fail validation."""

    def __init__(self, message: str, field: str = ""):
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)
