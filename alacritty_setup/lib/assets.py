from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(src: str, dst: str, *, dry_run: bool = False) -> None:
    """Copy `src` into `dst` recursively, keeping symlinks as links."""

    s = Path(src)
    d = Path(dst)
    if not s.exists():
        raise FileNotFoundError(src)

    if dry_run:
        logger.info("Would copy tree %s -> %s", str(s), str(d))
        return

    # Dangling links are copied as-is, like `cp -r`.
    shutil.copytree(s, d, symlinks=True, dirs_exist_ok=True)


def remove_tree(path: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would remove %s", str(p))
        return
    if p.is_dir() and not p.is_symlink():
        shutil.rmtree(p)
    elif p.exists() or p.is_symlink():
        p.unlink()


def move_tree(src: str, dst: str, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would move %s -> %s", src, dst)
        return
    # Same filesystem (both under ~/.config), so this is a rename.
    Path(src).rename(dst)
