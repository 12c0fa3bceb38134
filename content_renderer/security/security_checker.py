"""
Final security gate.

Runs over sanitized HTML right before embeds are expanded. It shares no
data with the sanitizer's allow-list: a short, strict set of patterns is
matched against the raw text and any hit aborts the render.
"""

import logging
import re

from ..exceptions import SecurityViolation

logger = logging.getLogger(__name__)

SCRIPT_TAG_RE = re.compile(r"<\s*script", re.IGNORECASE)

# a tag name followed by its attributes, walked one by one so quoted values
# are never read as attribute names; text outside tags is never matched
_TAG_ATTRIBUTES = (
    r"""<[a-z][a-z0-9]*"""
    r"""(?:\s+[^\s=>/"']+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>"'][^\s>]*))?)*?"""
)

EXECUTABLE_URL_ATTR_RE = re.compile(
    _TAG_ATTRIBUTES
    + r"""\s+(?:href|src|action|formaction|xlink:href)\s*=\s*["']?\s*"""
    r"""(?:javascript|vbscript|data\s*:\s*text/html)""",
    re.IGNORECASE,
)

EVENT_HANDLER_ATTR_RE = re.compile(
    _TAG_ATTRIBUTES
    + r"""\s+on[a-z]+\s*=""",
    re.IGNORECASE,
)


class SecurityChecker:
    @staticmethod
    def check_security(html: str, allow_script_tag: bool = False) -> None:
        if not allow_script_tag and SCRIPT_TAG_RE.search(html):
            SecurityChecker._fail("script tags are not allowed")

        if EXECUTABLE_URL_ATTR_RE.search(html):
            SecurityChecker._fail("executable URL schemes are not allowed in attributes")

        if EVENT_HANDLER_ATTR_RE.search(html):
            SecurityChecker._fail("inline event handlers are not allowed")

    @staticmethod
    def _fail(reason: str):
        logger.warning(f"Security gate rejected rendered output: {reason}")
        raise SecurityViolation(reason)
