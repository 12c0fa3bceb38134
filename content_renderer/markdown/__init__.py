from .renderer import DefaultRenderer, RenderResult

__all__ = ["DefaultRenderer", "RenderResult"]
