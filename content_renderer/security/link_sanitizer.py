"""
Link safety evaluation.

A link is rejected when it is on the phishing list (fails closed) or when
its visible text claims our own domain while the target does not (the
pseudo-local heuristic, which fails open).
"""

import logging
import re
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from ..exceptions import ConfigurationError
from .phishing import PhishingList, default_phishing_list

logger = logging.getLogger(__name__)

# relative, fragment, protocol-relative, http(s) and hive links are kept as-is
KNOWN_PROTOCOL_RE = re.compile(r"^((#)|(/(?!/))|(((hive|https?):)?//))", re.IGNORECASE)

_TOP_LEVEL_DOMAIN_RE = re.compile(r"([^\s/$.?#]+\.[^\s/$.?#]+)$")


def top_level_domain(hostname: str) -> Optional[str]:
    """Last two dot-separated labels of a hostname."""
    if not hostname:
        return None
    match = _TOP_LEVEL_DOMAIN_RE.search(hostname.lower().rstrip("."))
    return match.group(1) if match else None


class LinkSanitizer:
    def __init__(self, options: Any, phishing_list: PhishingList = default_phishing_list):
        base_url = self._validate(options)
        self.base_url = base_url
        self.phishing_list = phishing_list
        self.top_level_base_domain = self._top_level_base_domain_from_base_url(base_url)

    @staticmethod
    def _validate(options) -> str:
        if options is None:
            raise ConfigurationError("LinkSanitizer options must be an object")

        if isinstance(options, Mapping):
            base_url = options.get("base_url", options.get("baseUrl"))
        else:
            base_url = getattr(options, "base_url", None)

        if not isinstance(base_url, str) or not base_url.strip():
            raise ConfigurationError("LinkSanitizer options.base_url must be a non-empty string")
        return base_url

    @staticmethod
    def _top_level_base_domain_from_base_url(base_url: str) -> str:
        try:
            hostname = urlparse(base_url).hostname
        except ValueError as e:
            raise ConfigurationError(f"LinkSanitizer: invalid base_url {base_url!r}: {e}") from e

        if hostname == "localhost":
            return "localhost"

        domain = top_level_domain(hostname or "")
        if not domain:
            raise ConfigurationError(
                f"LinkSanitizer: could not determine top level base domain from base_url hostname: {hostname}"
            )
        return domain

    def sanitize_link(self, url: str, url_title: str) -> Optional[str]:
        """Return the normalized URL when safe, ``None`` when rejected."""
        url = self.prepend_unknown_protocol_link(url)

        if self.phishing_list.looks_phishy(url):
            logger.warning(f"Phishing link detected (phishing list): {url}")
            return None

        if self.is_pseudo_local_url(url, url_title):
            logger.warning(f"Phishing link detected (pseudo local url): {url} titled {url_title!r}")
            return None

        return url

    @staticmethod
    def prepend_unknown_protocol_link(url: str) -> str:
        url = url.strip()
        if not KNOWN_PROTOCOL_RE.match(url):
            url = "https://" + url
        return url

    def is_pseudo_local_url(self, url: str, url_title: str) -> bool:
        try:
            if url.startswith("#"):
                return False
            url = url.lower()
            url_title = url_title.lower()
            title_contains_base_domain = self.top_level_base_domain in url_title
            url_contains_base_domain = self.top_level_base_domain in url
            return title_contains_base_domain and not url_contains_base_domain
        except (TypeError, AttributeError):
            # A heuristic that cannot be evaluated does not reject the link
            return False

    def is_internal(self, url: str) -> bool:
        """Same-site classification by top-level base domain."""
        if url.startswith("#") or (url.startswith("/") and not url.startswith("//")):
            return True
        try:
            hostname = urlparse(url).hostname
        except ValueError:
            return False
        if hostname == self.top_level_base_domain:
            return True
        return top_level_domain(hostname or "") == self.top_level_base_domain
