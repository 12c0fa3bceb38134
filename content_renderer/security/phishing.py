"""
Known phishing domains and URLs.

Lookups happen mid-render without locking; ``replace`` swaps the whole
list in a single reference assignment so readers see either the old or
the new entries, never a mix.
"""

import logging
from typing import Iterable
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_DOMAINS = (
    "steewit.com",
    "steemiit.com",
    "steemit.com-profile.ga",
    "steemitt.com",
    "staemit.com",
    "hive-blog.com",
    "hiveblog.net",
    "hivee.blog",
    "hive-signer.com",
    "hivesigner.org",
    "peakd.co",
    "peakdd.com",
    "ecency.net",
    "wallet-hive.com",
    "hive-wallet.io",
    "blocktrades.us",
    "blocktrades.to",
)

DEFAULT_URLS = ()


def _normalize_url(url: str) -> str:
    return url.strip().lower().rstrip("/")


class PhishingList:
    def __init__(self, domains: Iterable[str] = DEFAULT_DOMAINS, urls: Iterable[str] = DEFAULT_URLS):
        self._entries = self._build(domains, urls)

    @staticmethod
    def _build(domains, urls):
        return (
            frozenset(d.strip().lower() for d in domains if d and d.strip()),
            frozenset(_normalize_url(u) for u in urls if u and u.strip()),
        )

    @property
    def domains(self) -> frozenset:
        return self._entries[0]

    @property
    def urls(self) -> frozenset:
        return self._entries[1]

    def replace(self, domains: Iterable[str], urls: Iterable[str] = ()) -> None:
        """Atomically swap in a new list."""
        entries = self._build(domains, urls)
        self._entries = entries
        logger.info(f"Phishing list replaced: {len(entries[0])} domains, {len(entries[1])} urls")

    def looks_phishy(self, url: str) -> bool:
        domains, urls = self._entries

        if _normalize_url(url) in urls:
            return True

        try:
            hostname = urlparse(url).hostname
        except ValueError:
            # Unparseable URLs are never trusted
            return True

        if not hostname:
            return False

        hostname = hostname.rstrip(".")
        if hostname in domains:
            return True
        return any(hostname.endswith("." + domain) for domain in domains)


default_phishing_list = PhishingList()
