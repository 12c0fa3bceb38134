"""Shared fixtures for renderer tests."""

import pytest

from content_renderer.config import RenderConfiguration
from content_renderer.localization import LocalizationStrings
from content_renderer.markdown.embedder.asset_embedder import AssetEmbedder
from content_renderer.markdown.embedder.markers import EmbedArena
from content_renderer.markdown.postprocessors.sanitizer import TagTransformingSanitizer
from content_renderer.markdown.renderer import DefaultRenderer

BASE_URL = "https://example.com"
YOUTUBE_ID = "dQw4w9WgXcQ"


def make_options(**overrides) -> RenderConfiguration:
    options = {"base_url": BASE_URL}
    options.update(overrides)
    return RenderConfiguration(**options)


@pytest.fixture
def options() -> RenderConfiguration:
    return make_options()


@pytest.fixture
def localization() -> LocalizationStrings:
    return LocalizationStrings.DEFAULT


@pytest.fixture
def renderer(options) -> DefaultRenderer:
    return DefaultRenderer(options)


@pytest.fixture
def sanitizer(options) -> TagTransformingSanitizer:
    return TagTransformingSanitizer(options)


@pytest.fixture
def embedder(options) -> AssetEmbedder:
    return AssetEmbedder(options)


@pytest.fixture
def arena() -> EmbedArena:
    return EmbedArena()
