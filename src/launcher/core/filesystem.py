"""Filesystem utility helpers."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_text(path: Path, encoding: str = "utf-8") -> str:
    return path.read_text(encoding=encoding)


def write_text_atomic(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` via a ``.tmp`` sibling, then replace ``path``.

    Missing parent directories are created. Readers never see a half-written
    file; on failure the previous file (if any) is left in place.
    """
    ensure_dir(path.parent)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(content, encoding=encoding)
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    return path
