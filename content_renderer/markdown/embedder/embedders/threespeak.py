import re

from .base import AbstractEmbedder, fit_aspect_ratio


class ThreeSpeakEmbedder(AbstractEmbedder):
    kind = "threespeak"
    url_pattern = re.compile(
        r"https?://(?:www\.)?3speak\.(?:tv|co|online)/(?:watch|embed)\?v=(?P<id>[\w.\-]+/[\w\-]+)",
        re.IGNORECASE,
    )

    def canonical_link(self, embed_id):
        return f"https://3speak.tv/watch?v={embed_id}"

    def embed(self, embed_id, size):
        return self.iframe(f"https://3speak.tv/embed?v={embed_id}", fit_aspect_ratio(size))
