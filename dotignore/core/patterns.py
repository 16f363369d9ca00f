"""Pattern compilation for gitignore-style rules.

This module turns raw pattern lines into CompiledPattern objects. Each line is
trimmed, its negation and directory markers are recorded and removed, and its
glob syntax is translated into a regular expression where needed:

- '*' matches any run of characters within one path segment
- '?' matches one character other than '/'
- '**/' matches zero or more whole segments, a trailing '**' matches anything
- '[...]' is a character class, '[!...]' a negated one
- '\\X' matches X literally

How a pattern is tested is decided once, here, and recorded as its kind:
separator-free patterns match at any depth, patterns containing a separator
are anchored to the start of the path.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..constants import (
    COMMENT_PREFIX,
    ESCAPABLE_CHARS,
    NEGATION_PREFIX,
    SEPARATOR,
    WINDOWS_SEPARATOR,
    PatternKind,
)
from .errors import InvalidPatternError, PatternCompileError
from .paths import ancestor_prefixes

logger = logging.getLogger(__name__)

WILDCARD_CHARS = "*?"
CLASS_OPEN = "["
CLASS_CLOSE = "]"
CLASS_NEGATIONS = "!^"
DOUBLE_STAR = "**"


@dataclass(frozen=True)
class CompiledPattern:
    """A single compiled ignore rule.

    Attributes:
        raw: Pattern text after trimming and removal of '!' and trailing '/'
        kind: How the pattern is tested (see PatternKind)
        segments: The anchored pattern text split on '/'
        literal: Unescaped text for SEGMENT and PREFIX patterns
        regex: Compiled glob for FLOATING and ANCHORED patterns
        depth: Segment count an ANCHORED pattern always spans (None with '**')
        negate: True if the line began with '!'
        directory_only: True if the line ended with '/'
        has_wildcard: True if the pattern contains an unescaped '*' or '?'
        anchored: True if the pattern contains a separator
        line_number: 1-based index of the line in its source
    """

    raw: str
    kind: PatternKind
    segments: tuple[str, ...]
    literal: str | None = None
    regex: re.Pattern | None = field(default=None, repr=False, compare=False)
    depth: int | None = None
    negate: bool = False
    directory_only: bool = False
    has_wildcard: bool = False
    anchored: bool = False
    line_number: int = 1

    def matches(self, path: str, segments: list[str]) -> bool:
        """Test a normalized path, or any of its ancestor directories.

        Args:
            path: Normalized query path
            segments: The path split on '/'

        Returns:
            True if the path or one of its ancestors matches
        """
        if self.kind is PatternKind.SEGMENT:
            return self.literal in segments

        if self.kind is PatternKind.PREFIX:
            return path == self.literal or path.startswith(self.literal + SEPARATOR)

        if self.kind is PatternKind.FLOATING:
            return any(self.regex.fullmatch(segment) for segment in segments)

        if self.regex.fullmatch(path):
            return True
        if self.depth is not None:
            if self.depth >= len(segments):
                return False
            return self.regex.fullmatch(SEPARATOR.join(segments[:self.depth])) is not None
        return any(self.regex.fullmatch(prefix) for prefix in ancestor_prefixes(segments))

    def __str__(self) -> str:
        prefix = NEGATION_PREFIX if self.negate else ""
        suffix = SEPARATOR if self.directory_only else ""
        return f"{prefix}{self.raw}{suffix}"


def _iter_chars(text: str) -> Iterable[tuple[str, bool]]:
    """Yield (char, escaped) pairs, consuming backslash escapes."""
    i = 0
    while i < len(text):
        if text[i] == WINDOWS_SEPARATOR and i + 1 < len(text):
            i += 1
            yield text[i], True
        else:
            yield text[i], False
        i += 1


def _normalize_pattern_separators(text: str) -> str:
    """Turn backslash separators into '/' while keeping backslash escapes.

    Character classes are copied through unchanged; a backslash inside
    '[...]' is always an escape.
    """
    out = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == CLASS_OPEN:
            end = _class_end(text, i)
            if end >= 0:
                out.append(text[i:end + 1])
                i = end + 1
                continue
        elif char == WINDOWS_SEPARATOR:
            if i + 1 < len(text) and text[i + 1] in ESCAPABLE_CHARS:
                out.append(text[i:i + 2])
                i += 2
                continue
            char = SEPARATOR
        out.append(char)
        i += 1
    return "".join(out)


def _class_end(pattern: str, start: int) -> int:
    """Index of the ']' closing the class opened at start, or -1."""
    i = start + 1
    if i < len(pattern) and pattern[i] in CLASS_NEGATIONS:
        i += 1
    if i < len(pattern) and pattern[i] == CLASS_CLOSE:
        i += 1
    while i < len(pattern):
        if pattern[i] == WINDOWS_SEPARATOR:
            i += 2
            continue
        if pattern[i] == CLASS_CLOSE:
            return i
        i += 1
    return -1


def _translate_class(body: str) -> str:
    negated = body[:1] in tuple(CLASS_NEGATIONS)
    if negated:
        body = body[1:]

    chars = []
    for char, escaped in _iter_chars(body):
        if escaped:
            chars.append(re.escape(char))
        elif char in "\\[]&~|^":
            chars.append("\\" + char)
        else:
            # '-' stays bare so ranges keep working
            chars.append(char)

    inner = "".join(chars)
    # Neither class form matches the separator
    return f"[^/{inner}]" if negated else f"(?!/)[{inner}]"


def translate_glob(pattern: str) -> str:
    """Translate glob syntax into a regular expression source.

    The result is meant for re.fullmatch, so it carries no anchors.

    Args:
        pattern: Pattern text with '/' separators and backslash escapes

    Returns:
        Regular expression source

    Raises:
        ValueError: If a character class or escape sequence is unterminated

    Examples:
        >>> translate_glob("*.log")
        '[^/]*\\\\.log'
        >>> translate_glob("**/build")
        '(?:.*/)?build'
    """
    parts = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            if pattern.startswith(DOUBLE_STAR, i):
                i += 2
                if i < n and pattern[i] == SEPARATOR:
                    parts.append("(?:.*/)?")
                    i += 1
                elif i == n:
                    parts.append(".*")
                else:
                    parts.append("[^/]*")
                continue
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == CLASS_OPEN:
            end = _class_end(pattern, i)
            if end < 0:
                raise ValueError("unterminated character class")
            parts.append(_translate_class(pattern[i + 1:end]))
            i = end
        elif char == WINDOWS_SEPARATOR:
            if i + 1 == n:
                raise ValueError("unterminated escape sequence")
            i += 1
            parts.append(re.escape(pattern[i]))
        else:
            parts.append(re.escape(char))
        i += 1
    return "".join(parts)


def compile_pattern(line: str, line_number: int = 1) -> CompiledPattern | None:
    """Compile one raw pattern line.

    Args:
        line: Raw line from a pattern source
        line_number: 1-based index of the line, used in error reports

    Returns:
        The compiled pattern, or None for blank and comment lines

    Raises:
        InvalidPatternError: If the line is exactly '!' or empty once its
            markers are removed
        PatternCompileError: If the glob syntax is malformed
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_PREFIX):
        return None

    negate = trimmed.startswith(NEGATION_PREFIX)
    body = trimmed[1:] if negate else trimmed
    if not body:
        raise InvalidPatternError(line, line_number, "single '!' is not allowed")

    body = _normalize_pattern_separators(body)
    directory_only = body.endswith(SEPARATOR)
    raw = body.rstrip(SEPARATOR)
    if not raw:
        raise InvalidPatternError(line, line_number, "pattern is empty once its markers are removed")

    anchored = SEPARATOR in raw
    text = raw.lstrip(SEPARATOR)
    chars = list(_iter_chars(text))
    has_wildcard = any(c in WILDCARD_CHARS and not escaped for c, escaped in chars)
    is_glob = has_wildcard or any(c == CLASS_OPEN and not escaped for c, escaped in chars)
    segments = tuple(text.split(SEPARATOR))

    literal = None
    regex = None
    depth = None
    if is_glob:
        try:
            regex = re.compile(translate_glob(text), re.DOTALL)
        except (ValueError, re.error) as e:
            raise PatternCompileError(line, line_number, str(e)) from e
        kind = PatternKind.ANCHORED if anchored else PatternKind.FLOATING
        if anchored and DOUBLE_STAR not in text:
            depth = len(segments)
    else:
        literal = "".join(c for c, _ in chars)
        kind = PatternKind.PREFIX if anchored else PatternKind.SEGMENT

    return CompiledPattern(
        raw=raw,
        kind=kind,
        segments=segments,
        literal=literal,
        regex=regex,
        depth=depth,
        negate=negate,
        directory_only=directory_only,
        has_wildcard=has_wildcard,
        anchored=anchored,
        line_number=line_number,
    )


def compile_patterns(lines: Iterable[str]) -> list[CompiledPattern]:
    """Compile an ordered sequence of raw lines, skipping blanks and comments.

    Input order is kept; later patterns override earlier ones when matching.

    Raises:
        InvalidPatternError: If any line is an invalid pattern
        PatternCompileError: If any line has malformed glob syntax
    """
    compiled = []
    for line_number, line in enumerate(lines, start=1):
        pattern = compile_pattern(line, line_number)
        if pattern is not None:
            compiled.append(pattern)

    logger.debug("Compiled %d patterns", len(compiled))
    return compiled
