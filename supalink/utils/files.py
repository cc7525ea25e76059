from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

log = logging.getLogger("supalink.files")


def read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _open_for_write(path: Path, mode: int | None):
    if mode is None:
        return open(path, "w", encoding="utf-8", newline="")
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    # os.open only applies ``mode`` when it creates the file
    os.chmod(path, mode)
    return os.fdopen(fd, "w", encoding="utf-8", newline="")


def write_text_file(path: Path, content: str, mode: int | None = None) -> Path:
    """Write ``content`` to ``path`` exactly as given, creating parent directories.

    With ``mode`` the file carries those permissions before any content is
    written. Errors from the filesystem (read-only volume, a file where a
    directory should be) propagate to the caller unchanged.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the bytes on disk identical to ``content`` on every platform
    with _open_for_write(path, mode) as f:
        f.write(content)
    log.debug("wrote %d bytes → %s", len(content), path)
    return path
