"""
Base class for platform embedders.

An embedder recognizes one platform's media URLs and renders the player
markup for an id it extracted earlier. Embedders hold no per-render state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape
from typing import Optional

# characters an embed id may carry through a marker token
EMBED_ID_RE = re.compile(r"^[\w.\-/]+$")


@dataclass(frozen=True)
class EmbedMetadata:
    url: str
    id: str
    image: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class EmbedSize:
    width: int
    height: int


class AbstractEmbedder:
    kind = None
    # Must expose a named group ``id``; matched with ``search`` in free text
    url_pattern: re.Pattern = None

    def match_url(self, candidate: str) -> Optional[EmbedMetadata]:
        if not candidate:
            return None
        match = self.url_pattern.search(candidate.strip())
        if not match:
            return None
        return self.metadata_from_match(match)

    def metadata_from_match(self, match: re.Match) -> Optional[EmbedMetadata]:
        embed_id = self.embed_id(match)
        if not embed_id or not EMBED_ID_RE.match(embed_id):
            return None
        return EmbedMetadata(
            url=match.group(0),
            id=embed_id,
            image=self.thumbnail(embed_id),
            link=self.canonical_link(embed_id),
        )

    def embed_id(self, match: re.Match) -> Optional[str]:
        return match.group("id")

    def thumbnail(self, embed_id: str) -> Optional[str]:
        return None

    def canonical_link(self, embed_id: str) -> Optional[str]:
        return None

    def embed(self, embed_id: str, size: EmbedSize) -> str:
        raise NotImplementedError

    @staticmethod
    def iframe(src: str, size: EmbedSize, wrapper_class: str = "videoWrapper") -> str:
        return (
            f'<div class="{wrapper_class}">'
            f'<iframe width="{size.width}" height="{size.height}" src="{escape(src)}" '
            f'frameborder="0" allowfullscreen="allowfullscreen"></iframe>'
            f"</div>"
        )


def fit_aspect_ratio(size: EmbedSize, ratio_w: int = 16, ratio_h: int = 9) -> EmbedSize:
    """Largest box with the given ratio that fits inside ``size``."""
    width = int(size.width)
    height = width * ratio_h // ratio_w
    if height > size.height:
        height = int(size.height)
        width = height * ratio_w // ratio_h
    return EmbedSize(width=width, height=height)
