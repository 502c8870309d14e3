# site_mirror/storage/content_store.py
"""
Writes fetched documents into the mirror tree.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from site_mirror.logger import logger
from site_mirror.storage.path_mapper import ensure_parent_dir, mirror_path


class ContentStore:
    """Persists documents under *output_root*, overwriting existing files without warning."""

    def __init__(self, output_root: Union[str, Path]) -> None:
        self.output_root = Path(output_root)

    def path_for(self, url: str) -> Path:
        return mirror_path(url, self.output_root)

    def store(self, path: Path, content: Union[str, bytes]) -> Path:
        """
        Write *content* to *path*, creating parent directories first.

        Text is written as UTF-8, bytes verbatim. OSError propagates.
        """
        ensure_parent_dir(path)
        logger.info("Saving file to: %s", path)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    def save(self, url: str, content: Union[str, bytes]) -> Path:
        return self.store(self.path_for(url), content)
