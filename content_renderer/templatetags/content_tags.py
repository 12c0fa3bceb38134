# content_renderer/templatetags/content_tags.py

from functools import lru_cache

from django import template
from django.conf import settings
from django.utils.safestring import mark_safe

from content_renderer.config import RenderConfiguration
from content_renderer.localization import LocalizationStrings
from content_renderer.markdown.renderer import DefaultRenderer

register = template.Library()


def _settings_options():
    return dict(getattr(settings, "CONTENT_RENDERER", {}))


def _settings_localization():
    mapping = getattr(settings, "CONTENT_RENDERER_LOCALIZATION", None)
    if mapping is None:
        return LocalizationStrings.DEFAULT
    return LocalizationStrings.from_mapping(mapping)


@lru_cache(maxsize=1)
def get_renderer():
    """Process-wide renderer built from settings.CONTENT_RENDERER."""
    return DefaultRenderer(
        RenderConfiguration.from_mapping(_settings_options()),
        _settings_localization(),
    )


@register.filter(name="render_content")
def render_content_filter(value):
    if not value:
        return ""
    return mark_safe(get_renderer().render(value))


@register.simple_tag
def render_content_with(value, **overrides):
    """Render with per-call option overrides, e.g. do_not_show_images=True"""
    if not value:
        return ""
    options = {**_settings_options(), **overrides}
    renderer = DefaultRenderer(RenderConfiguration.from_mapping(options), _settings_localization())
    return mark_safe(renderer.render(value))
