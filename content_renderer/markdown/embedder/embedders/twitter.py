import re
from html import escape

from .base import AbstractEmbedder


class TwitterEmbedder(AbstractEmbedder):
    """Posts render as a blockquote the platform widget script upgrades client-side."""

    kind = "twitter"
    url_pattern = re.compile(
        r"https?://(?:www\.|mobile\.)?(?:twitter|x)\.com/"
        r"(?P<user>\w{1,15})/status(?:es)?/(?P<status>\d+)"
        r"(?:[?#][^\s<>\"']*)?",
        re.IGNORECASE,
    )

    def embed_id(self, match):
        return f"{match.group('user')}/{match.group('status')}"

    def canonical_link(self, embed_id):
        user, status = embed_id.split("/", 1)
        return f"https://twitter.com/{user}/status/{status}"

    def embed(self, embed_id, size):
        link = escape(self.canonical_link(embed_id))
        return (
            f'<div class="twitterWrapper" style="max-width: {size.width}px">'
            f'<blockquote class="twitter-tweet"><a href="{link}">{link}</a></blockquote>'
            f"</div>"
        )
