# site_mirror/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per URL, no retries.
"""
from __future__ import annotations

import asyncio
from typing import Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_mirror.config import MirrorConfig
from site_mirror.crawler.models import FetchError, PageData

_TEXT_MARKERS: Sequence[str] = ("html", "xml", "json", "javascript", "css")


def is_text_type(content_type: str) -> bool:
    """True for content types whose body should be decoded to ``str``."""
    mime = content_type.split(";", 1)[0].strip().lower()
    if not mime or mime.startswith("text/"):
        return True
    return any(marker in mime for marker in _TEXT_MARKERS)


def open_session(config: MirrorConfig) -> ClientSession:
    """Session with the fixed User-Agent and per-request timeout from *config*."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Downloads single URLs through a shared aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its body.

        Text responses come back as ``str``, everything else as ``bytes``.
        Raises FetchError on transport errors, timeouts and HTTP status >= 400.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                ctype = resp.headers.get("Content-Type", "")
                if is_text_type(ctype):
                    text = await resp.text(errors="replace")
                    return PageData(url, text, ctype)
                data = await resp.read()
                return PageData(url, data, ctype)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
