"""
Embed markers.

A marker is a plain-text token that stands in for a recognized media URL
between the DOM parse and the final expansion, so it passes through the
sanitizer untouched:

    ~~~ embed:<nonce>:<kind>:<id> ~~~

The nonce is drawn per render. Tokens from any other render, or typed by
a user, never resolve and expand to nothing.
"""

from __future__ import annotations

import logging
import re
import secrets

logger = logging.getLogger(__name__)

MARKER_RE = re.compile(r"~~~ embed:(?P<nonce>[0-9a-f]+):(?P<kind>[a-z0-9]+):(?P<id>[\w.\-/]+) ~~~")


class EmbedArena:
    """Markers created during a single render, keyed by ``(kind, id)``."""

    def __init__(self, nonce: str | None = None):
        self.nonce = nonce or secrets.token_hex(8)
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def mark(self, embedder, metadata) -> str:
        key = (embedder.kind, metadata.id)
        if key not in self._entries:
            self._entries[key] = (embedder, metadata)
            logger.debug(f"Embed marker created for {embedder.kind}:{metadata.id}")
        return self.token(embedder.kind, metadata.id)

    def token(self, kind: str, embed_id: str) -> str:
        return f"~~~ embed:{self.nonce}:{kind}:{embed_id} ~~~"

    def resolve(self, nonce: str, kind: str, embed_id: str):
        """Return ``(embedder, metadata)`` for a marker of this render, else ``None``."""
        if nonce != self.nonce:
            return None
        return self._entries.get((kind, embed_id))

    def metadata(self):
        return [metadata for _, metadata in self._entries.values()]
