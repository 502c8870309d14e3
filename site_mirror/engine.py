# File: site_mirror/engine.py
"""site_mirror.engine: Orchestration layer для запуска зеркалирования."""

from __future__ import annotations

from typing import Optional

from site_mirror.config import MirrorConfig
from site_mirror.crawler.crawler import MirrorCrawler
from site_mirror.crawler.models import CrawlState, MirrorResult
from site_mirror.logger import logger

__all__ = ["start_mirror"]


async def start_mirror(config: MirrorConfig, state: Optional[CrawlState] = None) -> MirrorResult:
    """Готовит каталог вывода, запускает MirrorCrawler и возвращает итог обхода."""
    output_dir = config.output_dir
    logger.info("Starting download for: %s", config.seed_url)
    logger.info("Recursive mode: %s", config.recursive)
    logger.info("Output directory: %s", output_dir)

    if not output_dir.exists():
        logger.info("Creating output directory: %s", output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    async with MirrorCrawler(config) as crawler:
        result = await crawler.crawl(state)

    logger.info(
        "Download completed: %d saved, %d failed, %d skipped as external",
        len(result.saved), len(result.failed), len(result.out_of_scope),
    )
    return result
