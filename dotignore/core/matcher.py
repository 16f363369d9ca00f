"""Ignore decisions over an ordered list of compiled patterns.

A PatternMatcher compiles its patterns once, at construction, and never
changes them afterwards, so one instance can be queried from any number of
threads without locking.

Rule precedence follows gitignore: every pattern is consulted in declared
order and the last one that matches decides. A negated pattern only un-ignores
paths it matches itself, and a pattern that matches a directory also matches
everything beneath it.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO, TextIO

from ..constants import ROOT_PATH
from .config import collect_patterns, load_config
from .errors import MatchEvaluationError, SourceReadError
from .paths import normalize_path, split_segments
from .patterns import CompiledPattern, compile_patterns
from .reader import read_lines

logger = logging.getLogger(__name__)


class PatternMatcher:
    """Decides whether relative paths are ignored by a list of patterns.

    Args:
        patterns: Raw pattern lines in gitignore syntax. Blank lines and
            comments are skipped.

    Raises:
        InvalidPatternError: If a line is exactly '!' or empty once its
            markers are removed
        PatternCompileError: If a line has malformed glob syntax

    Examples:
        >>> matcher = PatternMatcher(["*.log", "!important.log", "temp/"])
        >>> matcher.matches("debug.log")
        True
        >>> matcher.matches("important.log")
        False
    """

    def __init__(self, patterns: Iterable[str]):
        self._patterns: tuple[CompiledPattern, ...] = tuple(compile_patterns(patterns))

    @classmethod
    def from_reader(cls, reader: BinaryIO | TextIO) -> "PatternMatcher":
        """Create a PatternMatcher from newline-separated patterns in a stream.

        Raises:
            SourceReadError: If the stream cannot be read
        """
        try:
            lines = read_lines(reader)
        except SourceReadError as e:
            raise SourceReadError(f"failed to parse patterns: {e}") from e
        return cls(lines)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "PatternMatcher":
        """Create a PatternMatcher from a pattern file such as .gitignore.

        The file is closed before this returns, whether or not reading succeeds.

        Raises:
            SourceReadError: If the file cannot be opened or read
        """
        logger.debug("Loading patterns from %s", path)
        try:
            with open(path, 'rb') as f:
                return cls.from_reader(f)
        except OSError as e:
            raise SourceReadError(f"failed to open file {path!r}: {e}") from e

    @classmethod
    def from_config(cls, config_path: str | os.PathLike) -> "PatternMatcher":
        """Create a PatternMatcher from a .dotignore.yml configuration.

        Pattern files named in the configuration are resolved relative to the
        configuration file's directory.

        Raises:
            SourceReadError: If the configuration or a pattern file cannot be read
            ConfigError: If the configuration is invalid
        """
        config_path = Path(config_path)
        config = load_config(config_path)
        return cls(collect_patterns(config, config_path.parent))

    @property
    def patterns(self) -> tuple[CompiledPattern, ...]:
        """Compiled patterns in declared order."""
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(p) for p in self._patterns]!r})"

    def matches(self, path: str | os.PathLike) -> bool:
        """Check whether a relative path is ignored.

        Args:
            path: Relative file or directory path, with '/' or '\\' separators

        Returns:
            True if the last pattern matching the path (or one of its
            ancestor directories) is not negated. Empty and root paths are
            never ignored.

        Raises:
            TypeError: If path is neither a string nor a path-like object
            MatchEvaluationError: If a compiled pattern fails on the path
        """
        normalized = normalize_path(path)
        if normalized == ROOT_PATH:
            return False

        segments = split_segments(normalized)
        ignored = False
        for pattern in self._patterns:
            try:
                matched = pattern.matches(normalized, segments)
            except (TypeError, ValueError) as e:
                raise MatchEvaluationError(pattern.raw, normalized) from e
            if matched:
                ignored = not pattern.negate

        return ignored

    def filter_paths(self, paths: Iterable[str | os.PathLike]) -> list:
        """Return the paths that are not ignored, in their original order."""
        return [p for p in paths if not self.matches(p)]
