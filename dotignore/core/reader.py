"""Line reading for pattern sources.

Pattern sources are newline-separated text. Lines are returned as they are,
blank lines and comments included; filtering is left to the compiler so
that line numbers in error reports match the source.
"""

import logging
from collections.abc import Iterable

from ..constants import BOM_CHAR, UTF8_BOM
from .errors import SourceReadError

logger = logging.getLogger(__name__)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_lines(stream: Iterable[bytes] | Iterable[str]) -> list[str]:
    """Read pattern lines from a binary or text stream.

    A UTF-8 byte-order mark at the start of the first line is dropped.
    Binary streams are decoded as UTF-8.

    Args:
        stream: Open file object or any iterable of lines

    Returns:
        Lines without their line endings

    Raises:
        SourceReadError: If the stream is missing, cannot be read, or is not
            valid UTF-8
    """
    if stream is None:
        raise SourceReadError("error reading lines: no stream given")

    lines = []
    try:
        for line_number, line in enumerate(stream):
            if isinstance(line, bytes):
                if line_number == 0 and line.startswith(UTF8_BOM):
                    line = line[len(UTF8_BOM):]
                line = line.decode("utf-8")
            elif line_number == 0 and line.startswith(BOM_CHAR):
                line = line[len(BOM_CHAR):]
            lines.append(_strip_line_ending(line))
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"error reading lines: {e}") from e

    logger.debug("Read %d pattern lines", len(lines))
    return lines
