# content_renderer/markdown/postprocessors/__init__.py

from .link_decorator import LinkDecorator
from .sanitizer import TagTransformingSanitizer

__all__ = ["LinkDecorator", "TagTransformingSanitizer"]
