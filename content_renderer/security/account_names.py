import re
from typing import Optional

from ..localization import LocalizationStrings

BAD_ACTORS = frozenset(
    {
        "hiveio-support",
        "hive-support",
        "hivewallet",
        "hive.wallet",
        "hivesigner-support",
        "peakd-support",
        "ecency-support",
        "blocktrades-support",
        "bittrex-deposit",
        "binance-deposit",
        "poloniex-deposit",
    }
)

_SEGMENT_START_RE = re.compile(r"^[a-z]")
_SEGMENT_CHARS_RE = re.compile(r"^[a-z0-9-]+$")
_SEGMENT_END_RE = re.compile(r"[a-z0-9]$")


def validate_account_name(
    name: str, localization: LocalizationStrings = LocalizationStrings.DEFAULT
) -> Optional[str]:
    """Return ``None`` for a valid account name, else the localized reason."""
    if not name:
        return localization.account_name_wrong_length

    length = len(name)
    if length < 3 or length > 16:
        return localization.account_name_wrong_length

    if name in BAD_ACTORS:
        return localization.account_name_bad_actor

    for segment in name.split("."):
        if (
            len(segment) < 3
            or not _SEGMENT_START_RE.match(segment)
            or not _SEGMENT_CHARS_RE.match(segment)
            or "--" in segment
            or not _SEGMENT_END_RE.search(segment)
        ):
            return localization.account_name_wrong_segment

    return None
