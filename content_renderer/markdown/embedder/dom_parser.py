"""
Structural pass between markdown conversion and sanitization.

Walks the parsed document once to:
- swap recognized media objects, autolinked media anchors and media URLs
  in text for embed markers
- linkify bare URLs, #hashtags and @mentions in text
- resolve IPFS image references, or hide every image when configured to
- collect every link and image for callers building previews
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, NavigableString

from ...localization import LocalizationStrings
from .asset_embedder import AssetEmbedder
from .linkify import IMAGE_LINK_ATTR, TextLinker
from .markers import EmbedArena

logger = logging.getLogger(__name__)

# text under these tags is never linkified or scanned for media
SKIP_TEXT_PARENTS = {"a", "code", "pre", "script", "style", "textarea", "iframe", "object", "embed"}

EMBEDDABLE_OBJECTS = ("iframe", "embed", "object")

IPFS_CID_RE = re.compile(r"^(Qm[1-9A-HJ-NP-Za-km-z]{44})$")


@dataclass
class ParseState:
    links: list = field(default_factory=list)
    images: list = field(default_factory=list)
    hashtags: set = field(default_factory=set)
    usertags: set = field(default_factory=set)

    def add_link(self, url):
        if url and url not in self.links:
            self.links.append(url)

    def add_image(self, url):
        if url and url not in self.images:
            self.images.append(url)


@dataclass(frozen=True)
class ParsedDocument:
    html: str
    links: tuple
    images: tuple
    hashtags: frozenset
    usertags: frozenset


class HtmlDOMParser:
    def __init__(self, options, localization: LocalizationStrings = LocalizationStrings.DEFAULT, embedder=None):
        self.options = options
        self.localization = localization
        self.embedder = embedder or AssetEmbedder(options)

    def parse(self, html: str, arena: EmbedArena) -> ParsedDocument:
        soup = BeautifulSoup(html, "html.parser")
        state = ParseState()

        self._process_objects(soup, arena, state)
        self._process_links(soup, arena, state)
        self._process_images(soup, state)
        self._process_text_nodes(soup, arena, state, TextLinker(self.options, self.localization, state))

        logger.debug(
            f"Parsed document: {len(state.links)} links, {len(state.images)} images, {len(arena)} embeds"
        )
        return ParsedDocument(
            html=str(soup),
            links=tuple(state.links),
            images=tuple(state.images),
            hashtags=frozenset(state.hashtags),
            usertags=frozenset(state.usertags),
        )

    def _process_objects(self, soup, arena, state):
        for tag in soup.find_all(EMBEDDABLE_OBJECTS):
            if any(parent.name in EMBEDDABLE_OBJECTS for parent in tag.parents):
                continue

            source = tag.get("src") or tag.get("data") or ""
            if not source and tag.name == "object":
                movie = tag.find("param", attrs={"name": "movie"})
                source = movie.get("value", "") if movie else ""

            marker, out = self.embedder.mark_object(source, arena)
            if marker is None:
                continue

            tag.replace_with(NavigableString(marker))
            for link in out["links"]:
                state.add_link(link)
            for image in out["images"]:
                state.add_image(image)

    def _process_links(self, soup, arena, state):
        for anchor in soup.find_all("a"):
            href = (anchor.get("href") or "").strip()
            if not href:
                continue

            text = anchor.get_text().strip()
            match = self.embedder.match_url(href)
            if match and (not text or text == href):
                embedder, metadata = match
                anchor.replace_with(NavigableString(arena.mark(embedder, metadata)))
                state.add_link(metadata.link or href)
                state.add_image(metadata.image)
                continue

            state.add_link(href)

    def _process_images(self, soup, state):
        for img in soup.find_all("img"):
            src = (img.get("src") or "").strip()
            if src:
                src = self.resolve_ipfs(src)
                state.add_image(src)

            if self.options.do_not_show_images:
                img.replace_with(self.hidden_image())
            elif src:
                img["src"] = src

    def hidden_image(self):
        return NavigableString(self.localization.no_image)

    def image_for_link(self, fragment, anchor):
        if self.options.do_not_show_images:
            return self.hidden_image()
        return fragment.new_tag("img", attrs={"src": self.resolve_ipfs(anchor["href"]), "alt": ""})

    def resolve_ipfs(self, src: str) -> str:
        prefix = self.options.ipfs_prefix
        if not prefix:
            return src
        prefix = prefix.rstrip("/")
        if src.startswith("/ipfs/"):
            return f"{prefix}/{src[len('/ipfs/'):]}"
        if IPFS_CID_RE.match(src):
            return f"{prefix}/{src}"
        return src

    def _process_text_nodes(self, soup, arena, state, text_linker):
        for node in list(soup.find_all(string=True)):
            # comments, doctypes and script/style bodies are subclasses
            if type(node) is not NavigableString:
                continue
            if any(parent.name in SKIP_TEXT_PARENTS for parent in node.parents):
                continue

            text = str(node)
            marked, found = self.embedder.find_and_mark(text, arena)
            for metadata in found:
                state.add_link(metadata.link)
                state.add_image(metadata.image)

            linked = text_linker.linkify(marked)
            if linked is not None:
                fragment = BeautifulSoup(linked, "html.parser")
                for anchor in fragment.find_all("a", attrs={IMAGE_LINK_ATTR: True}):
                    anchor.replace_with(self.image_for_link(fragment, anchor))
                node.replace_with(*list(fragment.contents))
            elif marked != text:
                node.replace_with(NavigableString(marked))
