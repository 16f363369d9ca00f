"""Configuration file loading.

This module loads .dotignore.yml configuration files and expands them into
the ordered list of pattern lines they describe.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..constants import DEFAULT_PATTERNS
from ..schemas.config import IgnoreConfig, validate_config
from .errors import ConfigError, SourceReadError
from .reader import read_lines

logger = logging.getLogger(__name__)


def load_config(config_path: str | os.PathLike) -> IgnoreConfig:
    """Load and validate a .dotignore.yml configuration.

    Args:
        config_path: Path to the configuration file

    Returns:
        Validated IgnoreConfig model

    Raises:
        SourceReadError: If the file cannot be opened or read
        ConfigError: If the file is not valid YAML or does not fit the schema
    """
    config_path = Path(config_path)
    try:
        with open(config_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"failed to open config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

    try:
        return validate_config(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {config_path}: {e}") from e


def collect_patterns(config: IgnoreConfig, base_dir: str | os.PathLike = ".") -> list[str]:
    """Expand a configuration into its ordered pattern lines.

    Order: default patterns (if enabled), then each pattern file in the order
    listed, then the inline patterns.

    Args:
        config: Validated configuration
        base_dir: Directory relative pattern files are resolved against

    Returns:
        Raw pattern lines, blank lines and comments included

    Raises:
        SourceReadError: If a pattern file cannot be opened or read
    """
    base_dir = Path(base_dir)
    lines = list(DEFAULT_PATTERNS) if config.include_defaults else []

    for name in config.files:
        pattern_file = base_dir / name
        logger.debug("Loading patterns from %s", pattern_file)
        try:
            with open(pattern_file, 'rb') as f:
                lines.extend(read_lines(f))
        except OSError as e:
            raise SourceReadError(f"failed to open file {pattern_file}: {e}") from e

    lines.extend(config.patterns)
    return lines
