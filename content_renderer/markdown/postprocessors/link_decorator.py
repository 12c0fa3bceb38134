# content_renderer/markdown/postprocessors/link_decorator.py
"""
Rewrites anchors for the tag-transforming sanitizer.

For every anchor:
1. Phishing and pseudo-local links are de-fanged into plain text with a warning
2. Accepted links get the normalized href
3. External links get title, rel, target and the external CSS class
4. Internal links get the internal CSS class
"""

import logging
from typing import Optional

from ...security.link_sanitizer import LinkSanitizer

logger = logging.getLogger(__name__)

PHISHY_CLASS = "phishy"


class LinkDecorator:
    def __init__(self, options, localization, link_sanitizer: Optional[LinkSanitizer] = None):
        self.options = options
        self.localization = localization
        self.link_sanitizer = link_sanitizer or LinkSanitizer(options)

    def rewrite_tagged_link(self, anchor) -> None:
        """Build hrefs for hashtag and mention anchors tagged upstream."""
        hashtag = anchor.get("data-hashtag")
        if hashtag is not None:
            del anchor["data-hashtag"]
            if hashtag.strip():
                anchor["href"] = self.options.hashtag_url_fn(hashtag.strip().lower())

        usertag = anchor.get("data-usertag")
        if usertag is not None:
            del anchor["data-usertag"]
            if usertag.strip():
                anchor["href"] = self.options.usertag_url_fn(usertag.strip().lower())

    def is_safe(self, href: str, text: str) -> Optional[str]:
        url = self.link_sanitizer.sanitize_link(href, text)
        if url is None:
            return None

        is_link_safe_fn = self.options.is_link_safe_fn
        if is_link_safe_fn is not None and not is_link_safe_fn(url):
            logger.warning(f"Link rejected by is_link_safe_fn: {url}")
            return None
        return url

    def is_external(self, url: str) -> bool:
        matches_fn = self.options.add_external_css_class_to_matching_links_fn
        if matches_fn is not None and matches_fn(url):
            return True
        return not self.link_sanitizer.is_internal(url)

    def decorate(self, soup, anchor) -> None:
        href = (anchor.get("href") or "").strip()
        if not href:
            return

        text = anchor.get_text()
        url = self.is_safe(href, text)
        if url is None:
            warning = soup.new_tag("span", attrs={"class": PHISHY_CLASS})
            warning.string = f"{text} [{self.localization.phishing_warning}]"
            anchor.replace_with(warning)
            return

        anchor["href"] = url
        if self.is_external(url):
            self._decorate_external(anchor)
        else:
            self._decorate_internal(anchor)

    def _decorate_external(self, anchor):
        anchor["title"] = self.localization.external_link

        rel = []
        if self.options.add_nofollow_to_links:
            rel.append("nofollow")
        if self.options.add_target_blank_to_links:
            anchor["target"] = "_blank"
            rel.append("noopener")
        elif anchor.has_attr("target"):
            del anchor["target"]

        if rel:
            anchor["rel"] = " ".join(rel)
        elif anchor.has_attr("rel"):
            del anchor["rel"]

        self._set_class(anchor, self.options.css_class_for_external_links)

    def _decorate_internal(self, anchor):
        for attr in ("target", "rel"):
            if anchor.has_attr(attr):
                del anchor[attr]
        self._set_class(anchor, self.options.css_class_for_internal_links)

    @staticmethod
    def _set_class(anchor, css_class):
        if css_class:
            anchor["class"] = css_class
        elif anchor.has_attr("class"):
            del anchor["class"]
