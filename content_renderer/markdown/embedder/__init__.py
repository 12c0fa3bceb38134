from .asset_embedder import AssetEmbedder
from .dom_parser import HtmlDOMParser, ParsedDocument
from .markers import MARKER_RE, EmbedArena

__all__ = [
    "AssetEmbedder",
    "EmbedArena",
    "HtmlDOMParser",
    "MARKER_RE",
    "ParsedDocument",
]
