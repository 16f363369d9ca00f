"""Core modules of the dotignore matcher.

This package contains focused modules:
- patterns: Pattern compilation (glob translation, anchoring)
- matcher: Ignore decisions over an ordered pattern list
- paths: Path normalization
- reader: Line reading for pattern streams
- config: Configuration file loading
- errors: Exception hierarchy
"""

# Configuration
from .config import collect_patterns, load_config

# Errors
from .errors import (
    ConfigError,
    DotignoreError,
    InvalidPatternError,
    MatchEvaluationError,
    PatternCompileError,
    PatternError,
    SourceReadError,
)

# Matching
from .matcher import PatternMatcher

# Path utilities
from .paths import normalize_path

# Pattern compilation
from .patterns import CompiledPattern, compile_pattern, compile_patterns, translate_glob

# Line reading
from .reader import read_lines

__all__ = [
    "CompiledPattern",
    "ConfigError",
    "DotignoreError",
    "InvalidPatternError",
    "MatchEvaluationError",
    "PatternCompileError",
    "PatternError",
    "PatternMatcher",
    "SourceReadError",
    "collect_patterns",
    "compile_pattern",
    "compile_patterns",
    "load_config",
    "normalize_path",
    "read_lines",
    "translate_glob",
]
