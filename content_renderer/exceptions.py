"""Exceptions raised by the rendering pipeline."""


class RendererError(Exception):
    """Base class for every error the renderer surfaces to callers."""


class ConfigurationError(RendererError, ValueError):
    """Invalid construction-time options; no renderer is built."""


class InvalidInput(RendererError, ValueError):
    """The text handed to ``render`` was empty."""


class SecurityViolation(RendererError):
    """The security gate found a forbidden construct in sanitized output."""

    def __init__(self, reason: str):
        super().__init__(f"SecurityChecker: {reason}")
        self.reason = reason
