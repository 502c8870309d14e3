# site_mirror/storage/path_mapper.py
"""
Mapping of URLs onto the local mirror tree.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Union
from urllib.parse import urlsplit

from site_mirror.logger import logger

DEFAULT_FILENAME = "index.html"
DEFAULT_EXTENSION = ".html"

_SKIPPED_SEGMENTS = ("", ".", "..")


def _path_segments(url: str) -> List[str]:
    path = urlsplit(url).path
    segments = path.split("/")
    if segments and segments[0] == "":
        segments = segments[1:]
    return segments


def file_name_for(segment: str) -> str:
    """
    Filename for the last URL path segment.

    Empty segment -> ``index.html``; no ``.`` -> ``<segment>.html``;
    otherwise the segment up to the first ``?``.
    """
    if segment in _SKIPPED_SEGMENTS:
        return DEFAULT_FILENAME
    if "." not in segment:
        return segment + DEFAULT_EXTENSION
    return segment.split("?", 1)[0]


def mirror_path(url: str, output_root: Union[str, Path]) -> Path:
    """
    Local path for *url* under *output_root*.

    Every path segment but the last becomes a directory, the last one gives
    the filename. Pure: two URLs mapping to the same path simply overwrite
    each other.
    """
    segments = _path_segments(url) or [""]
    *directories, last = segments
    path = Path(output_root)
    for segment in directories:
        # keeps the file inside output_root
        if segment in _SKIPPED_SEGMENTS:
            continue
        path /= segment
    return path / file_name_for(last)


def ensure_parent_dir(path: Path) -> None:
    """Creates every missing ancestor of *path*; no-op when they exist."""
    parent = path.parent
    if not parent.exists():
        logger.info("Creating directory: %s", parent)
    parent.mkdir(parents=True, exist_ok=True)
