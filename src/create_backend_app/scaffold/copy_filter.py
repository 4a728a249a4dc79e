"""Copy filter: decides which template entries never reach the target."""

import os

EXCLUDE_PATTERNS = frozenset({
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
    ".env",
    ".DS_Store",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
})


def _split_segments(relative_path: str) -> list[str]:
    normalized = relative_path.replace(os.sep, "/")
    return [part for part in normalized.split("/") if part]


def should_exclude(relative_path: str, patterns=EXCLUDE_PATTERNS) -> bool:
    """Return True when *relative_path* must not be copied.

    A path is excluded if any of its segments, or the whole path, equals one
    of *patterns* (exact, case-sensitive). The template root itself (an empty
    relative path) is never excluded.

    Args:
        relative_path: Path relative to the template source, using "/" or
            the platform separator.
        patterns: Names to exclude. Defaults to EXCLUDE_PATTERNS.
    """
    if not relative_path:
        return False
    if relative_path in patterns:
        return True
    return any(segment in patterns for segment in _split_segments(relative_path))
