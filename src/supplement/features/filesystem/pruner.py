"""src/supplement/features/filesystem/pruner.py
What: Destructive directory helpers: whole-tree deletion and empty-ancestor pruning.
Why: Cleanup code needs both "remove everything" and "remove what became empty".
Assumptions: - Callers serialize access to the trees they hand over.
Trade-offs: - No dry-run or trash; OS errors abort the operation mid-way.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import NoReturn

from supplement.platform.logging import logger
from supplement.shared import PathReference


def nuke(path: PathReference) -> None:
    """Delete the directory ``path``, all its contents and all subdirectories.

    WARNING! This can cause serious damage. There is no confirmation and no
    recovery: the first failure propagates and leaves the tree partially
    deleted. Symlinks inside the tree are removed, never followed.

    Raises:
        FileNotFoundError: ``path`` does not exist; nothing is deleted.
        NotADirectoryError: ``path`` is a file or a symlink; nothing is deleted.
        PermissionError: An entry could not be listed or removed.
    """
    root = Path(path)
    if root.is_symlink():
        raise NotADirectoryError(errno.ENOTDIR, "Refusing to nuke through a symlink", str(root))

    removed = 0
    try:
        for current, dirnames, filenames in os.walk(root, topdown=False, onerror=_reraise):
            for name in filenames:
                _remove(os.path.join(current, name), kind="file")
                removed += 1
            for name in dirnames:
                child = os.path.join(current, name)
                if os.path.islink(child):
                    _remove(child, kind="symlink")
                else:
                    _remove(child, kind="directory")
                removed += 1
        _remove(os.fspath(root), kind="directory")
    except OSError as exc:
        logger.error(
            "Failed to nuke %s: %s", root, exc, extra={"removed_path": str(root)}
        )
        raise

    logger.info("Nuked %s (%d entries)", root, removed + 1)


def prune_empty_ancestors(path: PathReference) -> None:
    """Delete ``path`` and its parents for as long as they are empty.

    The walk stops at the first non-empty directory, at a filesystem root,
    or at the current-directory marker. Reaching a stop marker is not an
    error.

    Raises:
        FileNotFoundError: A directory on the way up does not exist.
        PermissionError: A directory could not be listed or removed.
    """
    current = Path(path)
    pruned: list[Path] = []
    try:
        while not is_stop_marker(current):
            with os.scandir(current) as entries:
                if next(entries, None) is not None:
                    break
            _remove(os.fspath(current), kind="directory")
            pruned.append(current)
            current = current.parent
    except OSError as exc:
        logger.error(
            "Failed to prune %s: %s", current, exc, extra={"removed_path": str(current)}
        )
        raise

    if pruned:
        logger.info("Pruned %d empty directories up to %s", len(pruned), pruned[-1])


def is_stop_marker(path: Path) -> bool:
    """Return True for a filesystem root or the current-directory marker."""

    text = str(path)
    if text in ("", os.curdir):
        return True
    return text == path.anchor


def _remove(target: str, *, kind: str) -> None:
    if kind == "directory":
        os.rmdir(target)
    else:
        os.unlink(target)
    logger.debug("Removed %s", kind, extra={"removed_path": target, "entry_kind": kind})


def _reraise(error: OSError) -> NoReturn:
    raise error


__all__ = ["is_stop_marker", "nuke", "prune_empty_ancestors"]
