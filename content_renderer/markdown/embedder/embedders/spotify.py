import re

from .base import AbstractEmbedder, EmbedSize

# spotify renders its players at fixed heights
TRACK_PLAYER_HEIGHT = 152
LIST_PLAYER_HEIGHT = 352


class SpotifyEmbedder(AbstractEmbedder):
    kind = "spotify"
    url_pattern = re.compile(
        r"https?://open\.spotify\.com/(?:embed/)?"
        r"(?P<type>playlist|album|track|episode|show|artist)/(?P<sid>\w+)"
        r"(?:\?[^\s<>\"']*)?",
        re.IGNORECASE,
    )

    def embed_id(self, match):
        return f"{match.group('type').lower()}/{match.group('sid')}"

    def canonical_link(self, embed_id):
        return f"https://open.spotify.com/{embed_id}"

    def embed(self, embed_id, size):
        player_height = TRACK_PLAYER_HEIGHT if embed_id.startswith(("track/", "episode/")) else LIST_PLAYER_HEIGHT
        bounded = EmbedSize(width=size.width, height=min(size.height, player_height))
        return self.iframe(f"https://open.spotify.com/embed/{embed_id}", bounded, wrapper_class="audioWrapper")
