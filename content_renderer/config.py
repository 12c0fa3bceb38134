"""
Renderer configuration.

One immutable ``RenderConfiguration`` is built per renderer and shared,
read-only, with every component the renderer constructs.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote, urlparse

from .exceptions import ConfigurationError


def default_image_proxy(url: str) -> str:
    return url


def default_hashtag_url(hashtag: str) -> str:
    return f"/trending/{quote(hashtag)}"


def default_usertag_url(account: str) -> str:
    return f"/@{quote(account)}"


# camelCase option names accepted by ``from_mapping``
OPTION_ALIASES = {
    "baseUrl": "base_url",
    "breaks": "breaks",
    "skipSanitization": "skip_sanitization",
    "allowInsecureScriptTags": "allow_insecure_script_tags",
    "addNofollowToLinks": "add_nofollow_to_links",
    "addTargetBlankToLinks": "add_target_blank_to_links",
    "cssClassForInternalLinks": "css_class_for_internal_links",
    "cssClassForExternalLinks": "css_class_for_external_links",
    "doNotShowImages": "do_not_show_images",
    "ipfsPrefix": "ipfs_prefix",
    "assetsWidth": "assets_width",
    "assetsHeight": "assets_height",
    "imageProxyFn": "image_proxy_fn",
    "hashtagUrlFn": "hashtag_url_fn",
    "usertagUrlFn": "usertag_url_fn",
    "isLinkSafeFn": "is_link_safe_fn",
    "addExternalCssClassToMatchingLinksFn": "add_external_css_class_to_matching_links_fn",
}

_BOOL_OPTIONS = (
    "breaks",
    "skip_sanitization",
    "allow_insecure_script_tags",
    "add_nofollow_to_links",
    "add_target_blank_to_links",
    "do_not_show_images",
)
_OPTIONAL_STR_OPTIONS = (
    "css_class_for_internal_links",
    "css_class_for_external_links",
    "ipfs_prefix",
)
_REQUIRED_CALLABLES = ("image_proxy_fn", "hashtag_url_fn", "usertag_url_fn")
_OPTIONAL_CALLABLES = ("is_link_safe_fn", "add_external_css_class_to_matching_links_fn")


@dataclass(frozen=True)
class RenderConfiguration:
    base_url: str
    breaks: bool = True
    skip_sanitization: bool = False
    allow_insecure_script_tags: bool = False
    add_nofollow_to_links: bool = True
    add_target_blank_to_links: bool = True
    css_class_for_internal_links: Optional[str] = None
    css_class_for_external_links: Optional[str] = None
    do_not_show_images: bool = False
    ipfs_prefix: Optional[str] = None
    assets_width: int = 640
    assets_height: int = 480
    image_proxy_fn: Callable[[str], str] = default_image_proxy
    hashtag_url_fn: Callable[[str], str] = default_hashtag_url
    usertag_url_fn: Callable[[str], str] = default_usertag_url
    is_link_safe_fn: Optional[Callable[[str], bool]] = None
    add_external_css_class_to_matching_links_fn: Optional[Callable[[str], bool]] = None

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError("base_url must be a non-empty string")
        try:
            parsed = urlparse(self.base_url)
        except ValueError as e:
            raise ConfigurationError(f"base_url is not a valid URL: {e}") from e
        if not parsed.scheme or not parsed.hostname:
            raise ConfigurationError(f"base_url is not an absolute URL: {self.base_url}")

        for name in _BOOL_OPTIONS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")

        for name in _OPTIONAL_STR_OPTIONS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string")

        for name in ("assets_width", "assets_height"):
            value = getattr(self, name)
            # bool is an int subclass and never a meaningful size
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number")

        for name in _REQUIRED_CALLABLES:
            if not callable(getattr(self, name)):
                raise ConfigurationError(f"{name} must be callable")

        for name in _OPTIONAL_CALLABLES:
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(f"{name} must be callable")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RenderConfiguration":
        """Build from a dict of options, e.g. a Django settings entry."""
        if not isinstance(mapping, Mapping):
            raise ConfigurationError("Renderer options must be a mapping")

        known = {field.name for field in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown renderer option: {key}")
            kwargs[name] = value

        if "base_url" not in kwargs:
            raise ConfigurationError("base_url is required")
        return cls(**kwargs)
