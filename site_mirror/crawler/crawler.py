# === FILE: site_mirror/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, List, Optional, Tuple

from aiohttp import ClientSession

from site_mirror.config import MirrorConfig
from site_mirror.crawler.fetcher import Fetcher, open_session
from site_mirror.crawler.link_extractor import TagAttr, extract_links
from site_mirror.crawler.models import (
    CrawlState,
    CrawlTarget,
    FailedDocument,
    FetchError,
    MirrorResult,
    PageData,
    SavedDocument,
)
from site_mirror.logger import LOGGER_NAME
from site_mirror.storage.content_store import ContentStore
from site_mirror.utils import extract_host, is_in_scope, parse_seed, resolve_link

__all__ = ("MirrorCrawler", "Extractor")

Extractor = Callable[[str], Iterable[Tuple[TagAttr, str]]]


class MirrorCrawler:
    """Depth-first single-host mirror: fetch, store, extract, repeat.

    Exactly one request is in flight at any time. Pass a ``fetcher`` (anything
    with ``async fetch(url) -> PageData``) to bypass the aiohttp session.
    """

    def __init__(
        self,
        config: MirrorConfig,
        fetcher: Optional[Fetcher] = None,
        store: Optional[ContentStore] = None,
        extractor: Extractor = extract_links,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.store = store or ContentStore(config.output_dir)
        self.extractor = extractor
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> MirrorCrawler:
        if self.fetcher is None:
            self.session = open_session(self.config)
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, state: Optional[CrawlState] = None) -> MirrorResult:
        """Mirror the seed URL (and, in recursive mode, everything it reaches on the same host).

        Raises InvalidURLError for a bad seed, FetchError/OSError when the seed
        itself cannot be fetched or stored. Failures of other URLs are only
        recorded in the result.
        """
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with MirrorCrawler(...)'")
        seed = parse_seed(str(self.config.seed_url))
        state = state if state is not None else CrawlState()
        result = MirrorResult()
        start = time.monotonic()

        stack: List[CrawlTarget] = [seed]
        while stack:
            target = stack.pop()
            if target.url in state.visited:
                self.logger.info("Already visited: %s", target.url)
                result.revisits += 1
                continue
            state.visited.add(target.url)

            try:
                page = await self._download(target, result)
            except (FetchError, OSError) as exc:
                if target is seed:
                    self.logger.error("Failed %s: %s", target.url, exc)
                    raise
                self.logger.warning("Failed %s: %s", target.url, exc)
                result.failed.append(FailedDocument(target.url, str(exc)))
                continue

            if not self.config.recursive:
                continue
            children = self._discover(target, page, seed.host, result)
            # reversed so the first link on the page is popped first
            stack.extend(reversed(children))

        self.logger.debug(
            "Crawl finished in %.2f s: %d saved, %d failed",
            time.monotonic() - start, len(result.saved), len(result.failed),
        )
        return result

    async def _download(self, target: CrawlTarget, result: MirrorResult) -> PageData:
        self.logger.info("Downloading: %s", target.url)
        page = await self.fetcher.fetch(target.url)  # type: ignore[union-attr]
        path = self.store.save(target.url, page.content)
        result.saved.append(SavedDocument(target.url, path))
        return page

    def _discover(
        self, target: CrawlTarget, page: PageData, scope_host: str, result: MirrorResult
    ) -> List[CrawlTarget]:
        if not isinstance(page.content, str):
            return []
        self.logger.info("Recursive mode is enabled, searching for links and resources...")
        try:
            candidates = list(self.extractor(page.content))
        except Exception as exc:
            # unparseable markup counts as a page without links
            self.logger.warning("Link extraction failed for %s: %s", target.url, exc)
            return []

        children: List[CrawlTarget] = []
        for _category, raw in candidates:
            link = resolve_link(target.url, raw)
            if link is None:
                continue
            if not is_in_scope(link, scope_host):
                self.logger.info("Skipping external resource: %s", link)
                result.out_of_scope.append(link)
                continue
            self.logger.info("Found resource link: %s", link)
            children.append(CrawlTarget(url=link, host=extract_host(link)))
        return children
