"""Tests for embed recognition, markers and expansion."""

import pytest

from content_renderer.exceptions import ConfigurationError
from content_renderer.markdown.embedder.asset_embedder import AssetEmbedder
from content_renderer.markdown.embedder.embedders import (
    EmbedSize,
    SpotifyEmbedder,
    ThreeSpeakEmbedder,
    TwitchEmbedder,
    TwitterEmbedder,
    VimeoEmbedder,
    YoutubeEmbedder,
)
from content_renderer.markdown.embedder.embedders.base import fit_aspect_ratio
from content_renderer.markdown.embedder.markers import MARKER_RE, EmbedArena

from .conftest import BASE_URL, YOUTUBE_ID

SIZE = EmbedSize(width=640, height=480)


class TestRecognizers:
    @pytest.mark.parametrize(
        "url",
        [
            f"https://www.youtube.com/watch?v={YOUTUBE_ID}",
            f"https://youtube.com/watch?feature=share&v={YOUTUBE_ID}",
            f"https://m.youtube.com/watch?v={YOUTUBE_ID}&t=10s",
            f"https://youtu.be/{YOUTUBE_ID}",
            f"https://www.youtube.com/embed/{YOUTUBE_ID}",
            f"https://www.youtube.com/shorts/{YOUTUBE_ID}",
        ],
    )
    def test_youtube_urls(self, url):
        metadata = YoutubeEmbedder().match_url(url)
        assert metadata.id == YOUTUBE_ID
        assert metadata.image == f"https://img.youtube.com/vi/{YOUTUBE_ID}/0.jpg"
        assert metadata.link == f"https://youtu.be/{YOUTUBE_ID}"

    def test_non_media_url(self):
        assert YoutubeEmbedder().match_url("https://example.com/watch?v=x") is None
        assert YoutubeEmbedder().match_url("") is None

    def test_vimeo(self):
        embedder = VimeoEmbedder()
        assert embedder.match_url("https://vimeo.com/76979871").id == "76979871"
        assert embedder.match_url("https://player.vimeo.com/video/76979871").id == "76979871"
        assert 'src="https://player.vimeo.com/video/76979871"' in embedder.embed("76979871", SIZE)

    def test_twitch_channel_and_video(self):
        embedder = TwitchEmbedder(BASE_URL)
        assert embedder.match_url("https://www.twitch.tv/SomeStreamer").id == "somestreamer"
        assert embedder.match_url("https://www.twitch.tv/videos/123456").id == "v123456"
        assert embedder.match_url("https://player.twitch.tv/?channel=streamer&parent=x").id == "streamer"

        channel = embedder.embed("somestreamer", SIZE)
        assert "https://player.twitch.tv/?channel=somestreamer&amp;parent=example.com" in channel
        video = embedder.embed("v123456", SIZE)
        assert "?video=v123456" in video

    def test_spotify(self):
        embedder = SpotifyEmbedder()
        metadata = embedder.match_url("https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC?si=abc")
        assert metadata.id == "track/4uLU6hMCjMI75M1A2tKUQC"
        track = embedder.embed(metadata.id, SIZE)
        assert 'height="152"' in track
        assert 'src="https://open.spotify.com/embed/track/4uLU6hMCjMI75M1A2tKUQC"' in track
        assert 'height="352"' in embedder.embed("playlist/37i9dQZF1DXcBWIGoYBM5M", SIZE)

    def test_threespeak(self):
        embedder = ThreeSpeakEmbedder()
        metadata = embedder.match_url("https://3speak.tv/watch?v=alice/xyzabc")
        assert metadata.id == "alice/xyzabc"
        assert "https://3speak.tv/embed?v=alice/xyzabc" in embedder.embed(metadata.id, SIZE)

    def test_twitter(self):
        embedder = TwitterEmbedder()
        metadata = embedder.match_url("https://x.com/someone/status/1234567890?s=20")
        assert metadata.id == "someone/1234567890"
        assert metadata.link == "https://twitter.com/someone/status/1234567890"
        assert 'class="twitter-tweet"' in embedder.embed(metadata.id, SIZE)


class TestAspectRatio:
    def test_width_bound(self):
        assert fit_aspect_ratio(EmbedSize(640, 480)) == EmbedSize(640, 360)

    def test_height_bound(self):
        assert fit_aspect_ratio(EmbedSize(640, 200)) == EmbedSize(355, 200)


class TestMarkers:
    def test_find_and_mark_then_expand(self, embedder, arena):
        text = f"one https://youtu.be/{YOUTUBE_ID} two https://vimeo.com/76979871 three"
        marked, found = embedder.find_and_mark(text, arena)

        assert "https://" not in marked
        assert len(MARKER_RE.findall(marked)) == 2
        assert [m.id for m in found] == [YOUTUBE_ID, "76979871"]

        expanded = embedder.insert_assets(marked, arena)
        assert f"https://www.youtube.com/embed/{YOUTUBE_ID}" in expanded
        assert "https://player.vimeo.com/video/76979871" in expanded
        assert 'width="640"' in expanded
        assert not MARKER_RE.search(expanded)
        assert expanded.startswith("one ") and expanded.endswith(" three")

    def test_same_url_same_marker(self, embedder, arena):
        url = f"https://youtu.be/{YOUTUBE_ID}"
        marked, _ = embedder.find_and_mark(f"{url} and {url}", arena)
        token = arena.token("youtube", YOUTUBE_ID)
        assert marked == f"{token} and {token}"
        assert len(arena) == 1

    def test_longer_url_not_corrupted_by_prefix(self, embedder, arena):
        marked, _ = embedder.find_and_mark(
            f"https://youtu.be/{YOUTUBE_ID} https://youtu.be/{YOUTUBE_ID}?t=42", arena
        )
        assert "?t=42" not in marked
        assert len(arena) == 1

    def test_orphan_marker_expands_to_nothing(self, embedder, arena):
        other = EmbedArena()
        forged = other.token("youtube", YOUTUBE_ID)
        assert embedder.insert_assets(f"a {forged} b", arena) == "a  b"

    def test_unknown_entry_expands_to_nothing(self, embedder, arena):
        assert embedder.insert_assets(arena.token("youtube", "unknownid00"), arena) == ""

    def test_marker_ids_are_not_counters(self, embedder):
        first, second = EmbedArena(nonce="aa"), EmbedArena(nonce="aa")
        url = f"https://youtu.be/{YOUTUBE_ID}"
        assert embedder.find_and_mark(url, first)[0] == embedder.find_and_mark(url, second)[0]

    def test_mark_object_side_channel(self, embedder, arena):
        marker, out = embedder.mark_object(f"https://www.youtube.com/embed/{YOUTUBE_ID}", arena)
        assert marker == arena.token("youtube", YOUTUBE_ID)
        assert out == {
            "links": [f"https://youtu.be/{YOUTUBE_ID}"],
            "images": [f"https://img.youtube.com/vi/{YOUTUBE_ID}/0.jpg"],
        }

    def test_mark_object_unrecognized(self, embedder, arena):
        assert embedder.mark_object("https://evil.test/frame", arena) == (None, {"links": [], "images": []})

    def test_custom_embedder_set(self, options, arena):
        embedder = AssetEmbedder(options, embedders=[VimeoEmbedder()])
        marked, found = embedder.find_and_mark(f"https://youtu.be/{YOUTUBE_ID}", arena)
        assert found == []
        assert marked == f"https://youtu.be/{YOUTUBE_ID}"

    def test_requires_options(self):
        with pytest.raises(ConfigurationError):
            AssetEmbedder(None)
