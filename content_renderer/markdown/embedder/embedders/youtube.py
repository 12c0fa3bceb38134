import re

from .base import AbstractEmbedder, fit_aspect_ratio


class YoutubeEmbedder(AbstractEmbedder):
    kind = "youtube"
    url_pattern = re.compile(
        r"https?://(?:www\.|m\.)?"
        r"(?:youtube\.com/(?:watch\?(?:[^\s<>\"']*?&)?v=|embed/|shorts/|v/)|youtu\.be/)"
        r"(?P<id>[\w-]{11})"
        r"(?:[?&#][^\s<>\"']*)?",
        re.IGNORECASE,
    )

    def thumbnail(self, embed_id):
        return f"https://img.youtube.com/vi/{embed_id}/0.jpg"

    def canonical_link(self, embed_id):
        return f"https://youtu.be/{embed_id}"

    def embed(self, embed_id, size):
        return self.iframe(f"https://www.youtube.com/embed/{embed_id}", fit_aspect_ratio(size))
