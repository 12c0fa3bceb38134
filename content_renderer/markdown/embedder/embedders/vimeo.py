import re

from .base import AbstractEmbedder, fit_aspect_ratio


class VimeoEmbedder(AbstractEmbedder):
    kind = "vimeo"
    url_pattern = re.compile(
        r"https?://(?:www\.|player\.)?vimeo\.com/(?:video/)?(?P<id>\d+)(?:[?#][^\s<>\"']*)?",
        re.IGNORECASE,
    )

    def canonical_link(self, embed_id):
        return f"https://vimeo.com/{embed_id}"

    def embed(self, embed_id, size):
        return self.iframe(f"https://player.vimeo.com/video/{embed_id}", fit_aspect_ratio(size))
