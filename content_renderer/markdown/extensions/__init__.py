from .strikethrough import StrikethroughExtension

__all__ = ["StrikethroughExtension"]
