"""
Turns bare URLs, #hashtags and @mentions found in text into markup.

URLs are found by bleach's linker; hashtags and mentions by the pattern
below. Embed markers are passed through untouched. ``linkify`` returns
HTML for a text node, or ``None`` when nothing in it needs rewriting so
the caller can leave the node alone.
"""

from __future__ import annotations

import re
from html import escape
from typing import Optional

from bleach.linkifier import Linker

from ...security.account_names import validate_account_name
from .markers import MARKER_RE

TAG_RE = re.compile(
    r"(?<![\w&/#])#(?P<tag>[a-zA-Z][\w-]{0,31})"
    r"|(?<![\w/@.])@(?P<account>[a-zA-Z][a-zA-Z0-9.\-]{1,15})"
)

IMAGE_URL_RE = re.compile(r"\.(?:png|jpe?g|gif|webp)(?:\?[^\s]*)?$", re.IGNORECASE)

# set on linked image URLs; the DOM pass swaps these anchors for images
IMAGE_LINK_ATTR = "data-image-link"


class TextLinker:
    """Linkifies the text nodes of one document, recording into its parse state."""

    def __init__(self, options, localization, state):
        self.options = options
        self.localization = localization
        self.state = state
        self.linked = 0
        self.linker = Linker(callbacks=[self._record_url])

    def _record_url(self, attrs, new=False):
        # existing anchors (hashtags, mentions) pass through as they are
        if not new:
            return attrs

        href = attrs.get((None, "href"), "")
        if IMAGE_URL_RE.search(href):
            self.state.add_image(href)
            attrs[(None, IMAGE_LINK_ATTR)] = "true"
        else:
            self.state.add_link(href)
        self.linked += 1
        return attrs

    def linkify(self, text: str) -> Optional[str]:
        pieces = []
        position = 0
        changed = False

        for marker in MARKER_RE.finditer(text):
            html, segment_changed = self._linkify_segment(text[position:marker.start()])
            pieces.append(html)
            pieces.append(escape(marker.group(0), quote=False))
            changed = changed or segment_changed
            position = marker.end()

        html, segment_changed = self._linkify_segment(text[position:])
        pieces.append(html)
        changed = changed or segment_changed

        return "".join(pieces) if changed else None

    def _linkify_segment(self, segment: str) -> tuple[str, bool]:
        if not segment:
            return "", False

        html, tagged = self._link_tags(segment)
        linked_before = self.linked
        html = self.linker.linkify(html)
        return html, tagged or self.linked > linked_before

    def _link_tags(self, text: str) -> tuple[str, bool]:
        pieces = []
        position = 0
        changed = False

        for match in TAG_RE.finditer(text):
            trailing = ""

            if match.group("tag"):
                tag = match.group("tag")
                if tag.replace("-", "").isdigit():
                    continue
                hashtag = tag.lower()
                self.state.hashtags.add(hashtag)
                href = self.options.hashtag_url_fn(hashtag)
                replacement = (
                    f'<a href="{escape(href)}" data-hashtag="{escape(hashtag)}">#{escape(tag)}</a>'
                )
            else:
                raw = match.group("account")
                account = raw.rstrip(".-")
                trailing = raw[len(account):]
                account_lower = account.lower()
                if validate_account_name(account_lower, self.localization) is not None:
                    continue
                self.state.usertags.add(account_lower)
                href = self.options.usertag_url_fn(account_lower)
                replacement = (
                    f'<a href="{escape(href)}" data-usertag="{escape(account_lower)}">@{escape(account)}</a>'
                )

            pieces.append(escape(text[position:match.start()], quote=False))
            pieces.append(replacement)
            pieces.append(escape(trailing, quote=False))
            position = match.end()
            changed = True

        pieces.append(escape(text[position:], quote=False))
        return "".join(pieces), changed
