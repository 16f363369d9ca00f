"""Path normalization helpers shared by the compiler and the matcher."""

import os
import posixpath

from ..constants import ROOT_PATH, SEPARATOR, WINDOWS_SEPARATOR


def normalize_separators(path: str) -> str:
    """Replace Windows separators with forward slashes."""
    return path.replace(WINDOWS_SEPARATOR, SEPARATOR)


def normalize_path(path: str | os.PathLike) -> str:
    """Normalize a query path to the form patterns are matched against.

    Separators become '/', '.' and '..' segments and repeated separators are
    cleaned, and a leading '/' is dropped since paths are relative to
    whatever root the caller has in mind.

    Args:
        path: Relative file path (string or path-like)

    Returns:
        The cleaned path, or "." for an empty or root path

    Raises:
        TypeError: If path is neither a string nor a path-like object
    """
    path = os.fspath(path)
    if isinstance(path, bytes):
        path = os.fsdecode(path)

    cleaned = posixpath.normpath(normalize_separators(path)).lstrip(SEPARATOR)
    return cleaned or ROOT_PATH


def split_segments(path: str) -> list[str]:
    """Split a normalized path into its segments."""
    return path.split(SEPARATOR)


def ancestor_prefixes(segments: list[str]) -> list[str]:
    """Return every proper ancestor of a path, shallowest first.

    Examples:
        >>> ancestor_prefixes(["a", "b", "c.txt"])
        ['a', 'a/b']
    """
    return [SEPARATOR.join(segments[:depth]) for depth in range(1, len(segments))]
