"""Gitignore-style path matching.

Compile a list of ignore patterns once, then ask whether relative paths are
ignored:

    >>> from dotignore import PatternMatcher
    >>> matcher = PatternMatcher(["*.log", "!important.log", "build/"])
    >>> matcher.matches("build/out.js")
    True
"""

import logging

from .constants import PatternKind
from .core import (
    CompiledPattern,
    ConfigError,
    DotignoreError,
    InvalidPatternError,
    MatchEvaluationError,
    PatternCompileError,
    PatternError,
    PatternMatcher,
    SourceReadError,
    compile_pattern,
    compile_patterns,
    load_config,
    normalize_path,
    read_lines,
    translate_glob,
)
from .schemas import IgnoreConfig

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompiledPattern",
    "ConfigError",
    "DotignoreError",
    "IgnoreConfig",
    "InvalidPatternError",
    "MatchEvaluationError",
    "PatternCompileError",
    "PatternError",
    "PatternKind",
    "PatternMatcher",
    "SourceReadError",
    "compile_pattern",
    "compile_patterns",
    "load_config",
    "normalize_path",
    "read_lines",
    "translate_glob",
]
