"""
Localized strings injected into rendered output.

Validated eagerly: a renderer is never built with an empty message.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Mapping

from .exceptions import ConfigurationError

_CAMEL_CASE_NAMES = {
    "phishingWarning": "phishing_warning",
    "externalLink": "external_link",
    "noImage": "no_image",
    "accountNameWrongLength": "account_name_wrong_length",
    "accountNameBadActor": "account_name_bad_actor",
    "accountNameWrongSegment": "account_name_wrong_segment",
}


@dataclass(frozen=True)
class LocalizationStrings:
    phishing_warning: str = (
        "Link expanded to plain text; beware of a potential phishing attempt"
    )
    external_link: str = "This link will take you away from example.com"
    no_image: str = "Images not allowed"
    account_name_wrong_length: str = (
        "Account name should be between 3 and 16 characters long"
    )
    account_name_bad_actor: str = "This account is on a bad actor list"
    account_name_wrong_segment: str = "This account name contains a bad segment"

    DEFAULT: ClassVar["LocalizationStrings"]

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{field.name} should be a non-empty string")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "LocalizationStrings":
        """Build from a dict using either snake_case or camelCase keys."""
        if not isinstance(mapping, Mapping):
            raise ConfigurationError("LocalizationStrings should be built from a mapping")

        known = {field.name for field in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_NAMES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown localization key: {key}")
            kwargs[name] = value
        return cls(**kwargs)


LocalizationStrings.DEFAULT = LocalizationStrings()
