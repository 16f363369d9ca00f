"""Constants and enums for the dotignore pattern format."""

from enum import Enum

# Byte-order mark stripped from the first line of a pattern source
UTF8_BOM = b"\xef\xbb\xbf"
BOM_CHAR = "\ufeff"

# Line syntax
COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"
SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"

# Characters a backslash escapes in a pattern; before anything else a
# backslash is read as a Windows path separator
ESCAPABLE_CHARS = frozenset("*?[]\\!# ")

# Normalized form of an empty or root query path
ROOT_PATH = "."

# Conventional configuration file name
CONFIG_FILENAME = ".dotignore.yml"

# Version control directories prepended when a config sets include_defaults
DEFAULT_PATTERNS = [
    ".git/",
    ".svn/",
    ".hg/",
    ".bzr/",
]


class PatternKind(str, Enum):
    """How a compiled pattern is tested against a path."""
    SEGMENT = "segment"  # literal name, no separator
    PREFIX = "prefix"  # literal path, contains a separator
    FLOATING = "floating"  # glob, no separator
    ANCHORED = "anchored"  # glob, contains a separator
