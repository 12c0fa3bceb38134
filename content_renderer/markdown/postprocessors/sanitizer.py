# content_renderer/markdown/postprocessors/sanitizer.py
"""
Tag-transforming sanitizer.

Two passes over the document:
1. BeautifulSoup rewrite: drop dangerous elements with their content,
   de-fang and decorate links, suppress or proxy images
2. bleach allow-list clean: unwrap every other tag, drop every attribute
   not listed for its tag

``script`` is the one tag left untouched here. Whether it may appear in
output is decided by the security gate alone.
"""

import logging
import re
from urllib.parse import urlparse

import bleach
from bs4 import BeautifulSoup, NavigableString

from ...exceptions import ConfigurationError
from ...localization import LocalizationStrings
from .link_decorator import LinkDecorator

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset(
    {
        # text
        "p",
        "br",
        "div",
        "span",
        "center",
        "b",
        "strong",
        "i",
        "em",
        "u",
        "q",
        "del",
        "strike",
        "s",
        "sup",
        "sub",
        # headings
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        # lists
        "ul",
        "ol",
        "li",
        "hr",
        "blockquote",
        "dl",
        "dt",
        "dd",
        # code
        "pre",
        "code",
        # tables
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
        # media and links
        "img",
        "a",
        "details",
        "summary",
        # judged by the security gate
        "script",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel", "target", "class"],
    "img": ["src", "alt", "title", "width", "height"],
    "div": ["class"],
    "span": ["class"],
    "code": ["class"],
    "pre": ["class"],
    "ol": ["start"],
    "th": ["colspan", "rowspan", "align"],
    "td": ["colspan", "rowspan", "align"],
    "script": ["src", "type"],
}

# link hrefs reach bleach already normalized to these by the link sanitizer
ALLOWED_PROTOCOLS = ["http", "https", "hive"]

IMAGE_SCHEMES = {"", "http", "https", "hive"}

# removed together with everything inside them
CONTENT_DROPPING_TAGS = (
    "style",
    "iframe",
    "object",
    "embed",
    "noscript",
    "template",
    "textarea",
    "select",
    "form",
    "svg",
    "math",
    "head",
    "title",
    "meta",
    "link",
    "base",
)

ROOT_RE = re.compile(r"^\s*<html>([\s\S]*)</html>\s*$")


class TagTransformingSanitizer:
    def __init__(self, options, localization: LocalizationStrings = LocalizationStrings.DEFAULT):
        self._validate(options, localization)
        self.options = options
        self.localization = localization
        self.link_decorator = LinkDecorator(options, localization)

    @staticmethod
    def _validate(options, localization):
        if options is None:
            raise ConfigurationError("TagTransformingSanitizer options are required")
        for name in ("image_proxy_fn", "hashtag_url_fn", "usertag_url_fn"):
            if not callable(getattr(options, name, None)):
                raise ConfigurationError(f"TagTransformingSanitizer requires a callable {name}")
        if not isinstance(localization, LocalizationStrings):
            raise ConfigurationError("TagTransformingSanitizer requires LocalizationStrings")

    def sanitize(self, html: str) -> str:
        match = ROOT_RE.match(html)
        inner = match.group(1) if match else html

        soup = BeautifulSoup(inner, "html.parser")
        self._drop_dangerous(soup)
        self._transform_links(soup)
        self._transform_images(soup)

        cleaned = bleach.clean(
            str(soup),
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            strip_comments=True,
        )
        return f"<html>{cleaned}</html>" if match else cleaned

    @staticmethod
    def _drop_dangerous(soup):
        for tag in soup.find_all(CONTENT_DROPPING_TAGS):
            if tag.decomposed:
                continue
            logger.debug(f"Dropping <{tag.name}> with its content")
            tag.decompose()

    def _transform_links(self, soup):
        for anchor in soup.find_all("a"):
            self.link_decorator.rewrite_tagged_link(anchor)
            self.link_decorator.decorate(soup, anchor)

    def _transform_images(self, soup):
        for img in soup.find_all("img"):
            if self.options.do_not_show_images:
                img.replace_with(NavigableString(self.localization.no_image))
                continue

            src = (img.get("src") or "").strip()
            try:
                scheme = urlparse(src).scheme.lower()
            except ValueError:
                scheme = None
            if not src or scheme not in IMAGE_SCHEMES:
                img.decompose()
                continue

            img["src"] = self.options.image_proxy_fn(src)
