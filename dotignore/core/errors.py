"""Exception hierarchy for pattern compilation, source reading and matching.

Every failure is raised to the caller; nothing here is logged or retried.
Compilation is deterministic, so compiling the same lines again raises the
same error.
"""


class DotignoreError(Exception):
    """Base class for all dotignore errors."""


class PatternError(DotignoreError, ValueError):
    """A pattern line could not be turned into a compiled pattern.

    Attributes:
        pattern: The offending pattern line, as given
        line_number: 1-based index of the line in its source
        reason: Short description of what is wrong with the pattern
    """

    def __init__(self, pattern: str, line_number: int, reason: str):
        self.pattern = pattern
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r} at line {line_number}: {reason}")


class InvalidPatternError(PatternError):
    """A line is exactly '!', or nothing is left once its markers are removed."""


class PatternCompileError(PatternError):
    """The glob translation rejected a malformed token."""


class SourceReadError(DotignoreError):
    """A pattern stream, file or config file could not be read."""


class ConfigError(DotignoreError):
    """A configuration file is not valid YAML or does not fit the schema."""


class MatchEvaluationError(DotignoreError):
    """A compiled pattern failed while evaluating a query path.

    Attributes:
        pattern: Raw text of the pattern being evaluated
        path: Normalized query path
    """

    def __init__(self, pattern: str, path: str):
        self.pattern = pattern
        self.path = path
        super().__init__(f"pattern {pattern!r} failed to evaluate path {path!r}")
