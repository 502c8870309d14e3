# File: site_mirror/storage/__init__.py
"""site_mirror.storage: Раскладка URL по локальному дереву зеркала и запись файлов."""

from .content_store import ContentStore
from .path_mapper import DEFAULT_FILENAME, ensure_parent_dir, file_name_for, mirror_path

__all__ = ["ContentStore", "DEFAULT_FILENAME", "ensure_parent_dir", "file_name_for", "mirror_path"]
