# content_renderer/markdown/preprocessors/__init__.py

from .preliminary_sanitizer import (
    normalize_newlines,
    strip_control_characters,
    strip_html_comments,
)

PREPROCESSORS = [
    normalize_newlines,
    strip_control_characters,
    strip_html_comments,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
