# File: tests/conftest.py
import logging
from pathlib import Path
from typing import Dict, List, Union

import pytest

from site_mirror.config import MirrorConfig
from site_mirror.crawler.models import FetchError, PageData
from site_mirror.logger import LOGGER_NAME, init_logging


class FakeFetcher:
    """
    In-memory stand-in for the HTTP fetcher.
    *pages* maps URL -> body (str/bytes) or an exception to raise.
    """

    def __init__(self, pages: Dict[str, Union[str, bytes, Exception]]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        body = self.pages.get(url)
        if body is None:
            raise FetchError(url, "HTTP 404")
        if isinstance(body, Exception):
            raise body
        return PageData(url, body, "text/html" if isinstance(body, str) else "image/png")


@pytest.fixture()
def fake_fetcher():
    """Factory: fake_fetcher({url: body, ...})."""
    return FakeFetcher


@pytest.fixture()
def mirror_root(tmp_path) -> Path:
    return tmp_path / "mirror"


@pytest.fixture()
def make_config(mirror_root):
    """Factory for a MirrorConfig writing into *mirror_root*."""

    def _make(seed_url: str = "https://ex.com/index.html", recursive: bool = True, **kwargs) -> MirrorConfig:
        return MirrorConfig(seed_url=seed_url, output_dir=mirror_root, recursive=recursive, **kwargs)

    return _make


@pytest.fixture()
def mirror_log(caplog):
    """caplog wired to the project logger (it does not propagate to root)."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI swaps handlers onto its own streams; put a fresh console handler back."""
    yield
    init_logging()
