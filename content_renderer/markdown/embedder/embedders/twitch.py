import re
from urllib.parse import urlparse

from .base import AbstractEmbedder, fit_aspect_ratio


class TwitchEmbedder(AbstractEmbedder):
    """Channels embed as ``<name>``, recorded videos as ``v<number>``."""

    kind = "twitch"
    url_pattern = re.compile(
        r"https?://(?:www\.|player\.)?twitch\.tv/"
        r"(?:videos/(?P<video>\d+)"
        r"|\?(?:[^\s<>\"']*?&)?(?:channel=(?P<qchannel>\w+)|video=v?(?P<qvideo>\d+))"
        r"|(?P<channel>\w+))"
        r"(?:[?#][^\s<>\"']*)?",
        re.IGNORECASE,
    )

    def __init__(self, base_url: str):
        # twitch refuses to play unless the embedding host is named
        self.parent_domain = urlparse(base_url).hostname

    def embed_id(self, match):
        video = match.group("video") or match.group("qvideo")
        if video:
            return f"v{video}"
        return (match.group("channel") or match.group("qchannel") or "").lower() or None

    def canonical_link(self, embed_id):
        if embed_id.startswith("v") and embed_id[1:].isdigit():
            return f"https://www.twitch.tv/videos/{embed_id[1:]}"
        return f"https://www.twitch.tv/{embed_id}"

    def embed(self, embed_id, size):
        if embed_id.startswith("v") and embed_id[1:].isdigit():
            src = f"https://player.twitch.tv/?video={embed_id}"
        else:
            src = f"https://player.twitch.tv/?channel={embed_id}"
        return self.iframe(f"{src}&parent={self.parent_domain}", fit_aspect_ratio(size))
