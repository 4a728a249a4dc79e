"""Filtered recursive copy that never overwrites existing files."""

import errno
import os
import shutil
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class CopyOutcome:
    """Relative paths handled by copy_tree, in walk order."""
    copied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def _relative(path, root):
    return os.path.relpath(path, root).replace(os.sep, "/")


def _raise(error):
    raise error


def _is_within(path, root):
    """Return True if *path* is *root* or lies beneath it, after resolving links."""
    path, root = os.path.realpath(path), os.path.realpath(root)
    return os.path.commonpath([path, root]) == root


def _copy_file_exclusive(src, dst):
    """Copy file contents to *dst*, raising FileExistsError if it exists."""
    with open(src, "rb") as fsrc, open(dst, "xb") as fdst:
        shutil.copyfileobj(fsrc, fdst)


def copy_tree(
    source: str,
    destination: str,
    *,
    exclude: Callable[[str], bool],
    on_copy: Optional[Callable[[str], None]] = None,
) -> CopyOutcome:
    """Copy every entry under *source* into *destination*.

    Entries for which ``exclude(relative_path)`` is true are left out;
    excluded directories are pruned with their whole subtree. Files that
    already exist at the destination are left untouched and recorded as
    skipped. Any other OSError, including a directory that cannot be listed,
    propagates and aborts the walk; files copied before the failure stay in
    place. Copying into a directory inside *source* and symbolic link loops
    are rejected with OSError.

    Args:
        source: Template directory to read from.
        destination: Directory to populate. Created if missing.
        exclude: Predicate over "/"-separated paths relative to *source*.
        on_copy: Called with each relative path as it is copied.

    Returns:
        CopyOutcome listing copied and skipped relative paths.
    """
    if _is_within(destination, source):
        raise OSError(
            errno.EINVAL, "Cannot copy a directory into itself", destination,
        )

    outcome = CopyOutcome()
    os.makedirs(destination, exist_ok=True)

    for dirpath, dirnames, filenames in os.walk(
        source, onerror=_raise, followlinks=True,
    ):
        rel_dir = _relative(dirpath, source)
        if rel_dir == ".":
            rel_dir = ""

        kept_dirs = []
        for name in sorted(dirnames):
            rel = f"{rel_dir}/{name}" if rel_dir else name
            if exclude(rel):
                continue
            full = os.path.join(dirpath, name)
            if os.path.islink(full) and _is_within(dirpath, full):
                raise OSError(errno.ELOOP, "Symbolic link loop in template", full)
            try:
                os.makedirs(os.path.join(destination, rel), exist_ok=True)
            except FileExistsError:
                # A non-directory already occupies this path
                outcome.skipped.append(rel)
                continue
            if on_copy:
                on_copy(rel)
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for name in sorted(filenames):
            rel = f"{rel_dir}/{name}" if rel_dir else name
            if exclude(rel):
                continue
            try:
                _copy_file_exclusive(
                    os.path.join(dirpath, name), os.path.join(destination, rel),
                )
            except FileExistsError:
                outcome.skipped.append(rel)
                continue
            outcome.copied.append(rel)
            if on_copy:
                on_copy(rel)

    return outcome
