"""Renders untrusted markdown/HTML posts into safe HTML with embedded media."""

from .config import RenderConfiguration
from .exceptions import ConfigurationError, InvalidInput, RendererError, SecurityViolation
from .localization import LocalizationStrings
from .markdown import DefaultRenderer, RenderResult

__all__ = [
    "ConfigurationError",
    "DefaultRenderer",
    "InvalidInput",
    "LocalizationStrings",
    "RenderConfiguration",
    "RenderResult",
    "RendererError",
    "SecurityViolation",
]
