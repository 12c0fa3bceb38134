# content_renderer/markdown/renderer.py

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Union

import markdown as md

from ..config import RenderConfiguration
from ..exceptions import ConfigurationError, InvalidInput
from ..localization import LocalizationStrings
from ..security.security_checker import SecurityChecker
from .config import get_markdown_config
from .embedder.asset_embedder import AssetEmbedder
from .embedder.dom_parser import HtmlDOMParser
from .embedder.markers import EmbedArena
from .postprocessors import TagTransformingSanitizer
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

HTML_DOCUMENT_RE = re.compile(r"^<html>([\S\s]*)</html>$")
HTML_PARAGRAPH_RE = re.compile(r"^<p>[\S\s]*</p>")


@dataclass(frozen=True)
class RenderResult:
    html: str
    links: tuple = ()
    images: tuple = ()
    hashtags: frozenset = frozenset()
    usertags: frozenset = frozenset()


class DefaultRenderer:
    """
    Renders untrusted markdown or HTML into safe HTML with embedded media.

    Configuration and localization are validated here, before any render,
    and never change afterwards; one instance may serve concurrent renders.
    """

    def __init__(
        self,
        options: Union[RenderConfiguration, Mapping],
        localization: Union[LocalizationStrings, Mapping] = LocalizationStrings.DEFAULT,
    ):
        self.options = self._validate_options(options)
        self.localization = self._validate_localization(localization)

        self.embedder = AssetEmbedder(self.options)
        self.tag_transforming_sanitizer = TagTransformingSanitizer(self.options, self.localization)
        self.dom_parser = HtmlDOMParser(self.options, self.localization, embedder=self.embedder)
        self.markdown_config = get_markdown_config(breaks=self.options.breaks)

    @staticmethod
    def _validate_options(options) -> RenderConfiguration:
        if isinstance(options, Mapping):
            return RenderConfiguration.from_mapping(options)
        if not isinstance(options, RenderConfiguration):
            raise ConfigurationError("Renderer options must be a RenderConfiguration or a mapping")
        return options

    @staticmethod
    def _validate_localization(localization) -> LocalizationStrings:
        if isinstance(localization, Mapping):
            return LocalizationStrings.from_mapping(localization)
        if not isinstance(localization, LocalizationStrings):
            raise ConfigurationError("Localization must be LocalizationStrings or a mapping")
        return localization

    def render(self, text: str) -> str:
        return self.render_document(text).html

    def render_document(self, text: str) -> RenderResult:
        """Render and also return the links and images found along the way."""
        if not text or not isinstance(text, str):
            raise InvalidInput("Input is required and cannot be empty")

        # markers live only as long as this call
        arena = EmbedArena()
        context = {"arena": arena}

        text = apply_preprocessors(text, context)

        if self.is_html(text):
            logger.debug("Input detected as pre-rendered HTML, skipping markdown")
        else:
            text = self.render_markdown(text)

        text = self.wrap_rendered_text_with_html_if_needed(text)

        document = self.dom_parser.parse(text, arena)
        text = self.sanitize(document.html)

        SecurityChecker.check_security(text, allow_script_tag=self.options.allow_insecure_script_tags)

        text = self.embedder.insert_assets(text, arena)

        return RenderResult(
            html=text,
            links=document.links,
            images=document.images,
            hashtags=document.hashtags,
            usertags=document.usertags,
        )

    def render_markdown(self, text: str) -> str:
        return md.markdown(text, **self.markdown_config)

    @staticmethod
    def wrap_rendered_text_with_html_if_needed(rendered_text: str) -> str:
        if not rendered_text.startswith("<html>"):
            rendered_text = f"<html>{rendered_text}</html>"
        return rendered_text

    @staticmethod
    def is_html(text: str) -> bool:
        # the full-document wrapper wins over the paragraph check
        if HTML_DOCUMENT_RE.match(text):
            return True
        return bool(HTML_PARAGRAPH_RE.match(text))

    def sanitize(self, text: str) -> str:
        if self.options.skip_sanitization:
            logger.debug("Sanitization skipped by configuration")
            return text
        return self.tag_transforming_sanitizer.sanitize(text)
