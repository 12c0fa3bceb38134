"""
Recognizes media links and turns them into embedded players.

Recognition (``find_and_mark``) runs during the DOM parse and swaps each
media URL for a marker. Expansion (``insert_assets``) runs last, after the
security gate, and swaps each marker for the player markup.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...exceptions import ConfigurationError
from .embedders import (
    AbstractEmbedder,
    EmbedMetadata,
    EmbedSize,
    SpotifyEmbedder,
    ThreeSpeakEmbedder,
    TwitchEmbedder,
    TwitterEmbedder,
    VimeoEmbedder,
    YoutubeEmbedder,
)
from .markers import MARKER_RE, EmbedArena

logger = logging.getLogger(__name__)


class AssetEmbedder:
    def __init__(self, options, embedders: Optional[Iterable[AbstractEmbedder]] = None):
        self._validate(options)
        self.size = EmbedSize(width=options.assets_width, height=options.assets_height)
        if embedders is None:
            embedders = [
                YoutubeEmbedder(),
                VimeoEmbedder(),
                TwitchEmbedder(options.base_url),
                SpotifyEmbedder(),
                ThreeSpeakEmbedder(),
                TwitterEmbedder(),
            ]
        self.embedders = tuple(embedders)

    @staticmethod
    def _validate(options):
        if options is None:
            raise ConfigurationError("AssetEmbedder options are required")
        for name in ("assets_width", "assets_height", "base_url"):
            if not hasattr(options, name):
                raise ConfigurationError(f"AssetEmbedder options must define {name}")

    def match_url(self, candidate: str):
        """Return ``(embedder, metadata)`` for the first embedder recognizing ``candidate``."""
        for embedder in self.embedders:
            metadata = embedder.match_url(candidate)
            if metadata:
                return embedder, metadata
        return None

    def find_and_mark(self, text: str, arena: EmbedArena) -> tuple[str, list[EmbedMetadata]]:
        """Replace every recognized media URL in ``text`` with its marker."""
        found = []

        for embedder in self.embedders:

            def replace(match, embedder=embedder):
                metadata = embedder.metadata_from_match(match)
                if metadata is None:
                    return match.group(0)
                found.append(metadata)
                return arena.mark(embedder, metadata)

            text = embedder.url_pattern.sub(replace, text)
        return text, found

    def mark_object(self, source: str, arena: EmbedArena) -> tuple[Optional[str], dict]:
        """
        Marker for an embeddable object (iframe, embed, object) by its source.

        Also returns the ``links`` and ``images`` side channel gathered from
        the recognized metadata.
        """
        out = {"links": [], "images": []}
        match = self.match_url(source)
        if match is None:
            return None, out

        embedder, metadata = match
        if metadata.image:
            out["images"].append(metadata.image)
        if metadata.link:
            out["links"].append(metadata.link)
        return arena.mark(embedder, metadata), out

    def insert_assets(self, text: str, arena: EmbedArena) -> str:
        return self.insert_marked_embeds(text, arena, self.size)

    @staticmethod
    def insert_marked_embeds(text: str, arena: EmbedArena, size: EmbedSize) -> str:
        def expand(match):
            entry = arena.resolve(match.group("nonce"), match.group("kind"), match.group("id"))
            if entry is None:
                logger.debug(f"Dropping unresolved embed marker {match.group(0)!r}")
                return ""
            embedder, metadata = entry
            return embedder.embed(metadata.id, size)

        return MARKER_RE.sub(expand, text)
