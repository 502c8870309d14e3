# File: site_mirror/utils.py
"""site_mirror.utils: URL helpers shared by the crawler: canonical form, link resolution and scope checks."""

from __future__ import annotations

from typing import List, Optional, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_mirror.crawler.models import CrawlTarget, InvalidURLError
from site_mirror.logger import logger

__all__: Sequence[str] = (
    "ALLOWED_SCHEMES",
    "canonical_url",
    "extract_host",
    "is_in_scope",
    "parse_seed",
    "remove_dot_segments",
    "resolve_link",
)

ALLOWED_SCHEMES = ("http", "https")


def remove_dot_segments(path: str) -> str:
    """Resolves ``.`` and ``..`` (RFC 3986, 5.2.4); empty segments such as ``a//b`` stay."""
    output: List[str] = []
    for segment in path.split("/"):
        if segment == ".":
            continue
        if segment == "..":
            # never pop the leading "" of an absolute path
            if len(output) > 1:
                output.pop()
            continue
        output.append(segment)
    resolved = "/".join(output)
    if path.endswith(("/.", "/..")):
        resolved += "/"
    return resolved


def canonical_url(url: str) -> str:
    """Canonical string used as the visited-set key and as the URL that is fetched.

    Lower-cases scheme and host, resolves dot segments, turns an empty path
    into ``/`` and drops the fragment. The query string is kept verbatim.
    Raises :class:`ValueError` on URLs :mod:`urllib.parse` cannot split.
    """
    parts = urlsplit(url)
    path = parts.path
    if parts.netloc:
        path = remove_dot_segments(path) or "/"
        if not path.startswith("/"):
            path = "/" + path
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def extract_host(url: str) -> str:
    """Returns the lower-cased hostname (no port, no credentials) or ``""``."""
    return urlsplit(url).hostname or ""


def is_in_scope(url: str, scope_host: str) -> bool:
    """True when *url* is http(s) and lives on *scope_host*."""
    parts = urlsplit(url)
    return parts.scheme in ALLOWED_SCHEMES and (parts.hostname or "") == scope_host


def resolve_link(base_url: str, raw: str) -> Optional[str]:
    """Resolves *raw* against *base_url*; ``None`` if the result cannot be parsed."""
    try:
        return canonical_url(urljoin(base_url, raw))
    except ValueError as exc:
        logger.debug("Unresolvable link %r on %s: %s", raw, base_url, exc)
        return None


def parse_seed(url: str) -> CrawlTarget:
    """Validates the starting URL and returns it as a :class:`CrawlTarget`."""
    try:
        canonical = canonical_url(url.strip())
        host = extract_host(canonical)
    except ValueError as exc:
        raise InvalidURLError(f"Invalid URL {url!r}: {exc}") from exc
    scheme = urlsplit(canonical).scheme
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"Invalid URL {url!r}: scheme must be http or https")
    if not host:
        raise InvalidURLError(f"Invalid URL {url!r}: missing host")
    return CrawlTarget(url=canonical, host=host)
