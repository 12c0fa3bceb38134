from .base import AbstractEmbedder, EmbedMetadata, EmbedSize
from .spotify import SpotifyEmbedder
from .threespeak import ThreeSpeakEmbedder
from .twitch import TwitchEmbedder
from .twitter import TwitterEmbedder
from .vimeo import VimeoEmbedder
from .youtube import YoutubeEmbedder

__all__ = [
    "AbstractEmbedder",
    "EmbedMetadata",
    "EmbedSize",
    "SpotifyEmbedder",
    "ThreeSpeakEmbedder",
    "TwitchEmbedder",
    "TwitterEmbedder",
    "VimeoEmbedder",
    "YoutubeEmbedder",
]
