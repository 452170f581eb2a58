# streamprobe/common/path/safe.py
from __future__ import annotations

import os
from pathlib import Path


def normalize_path(path: Path | str) -> Path:
    """Absolute, lexically normalized path ('..' and '.' collapsed, symlinks kept)."""
    return Path(os.path.abspath(os.path.expanduser(str(path))))


def safe_join(root: Path | str, rel: Path | str) -> Path:
    """
    Join 'root' and a relative path safely, ensuring the result stays inside 'root'.
    Raises ValueError if traversal escapes the root.
    """
    r = normalize_path(root)
    p = normalize_path(r / str(rel))
    ensure_inside(p, r)
    return p


def ensure_inside(path: Path | str, root: Path | str) -> None:
    """Validate that 'path' is inside 'root'. Raises ValueError if not."""
    p = normalize_path(path)
    r = normalize_path(root)
    try:
        p.relative_to(r)
    except ValueError:
        raise ValueError(f"path {p} escapes root {r}") from None
