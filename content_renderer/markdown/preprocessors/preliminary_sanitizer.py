"""
Preliminary cleanup applied before format detection.

Only neutralizes constructs that would confuse the markdown/HTML detector
or the parser. No tag is judged here; that is the sanitizer's job.
"""

import re
from html import escape

# C0 controls except tab, newline and carriage return, plus DEL
CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

# an unterminated comment runs to the end of the text
HTML_COMMENT_RE = re.compile(r"<!--([\s\S]*?)(?:-->|$)")


def normalize_newlines(text: str, context: dict) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_control_characters(text: str, context: dict) -> str:
    return CONTROL_CHARS_RE.sub("", text)


def strip_html_comments(text: str, context: dict) -> str:
    """
    Rewrite HTML comments as visible, escaped text.

    Converts:
        <!-- note -->      → (html comment removed: note)
    """

    def replace(match):
        body = match.group(1).strip()
        if not body:
            return ""
        return f"(html comment removed: {escape(body, quote=False)})"

    return HTML_COMMENT_RE.sub(replace, text)
