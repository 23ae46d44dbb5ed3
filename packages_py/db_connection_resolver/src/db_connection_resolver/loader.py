"""Load and validate the database blocks of the legacy and modern config files."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from .constants import DATABASE_SECTION, ENV_LEGACY_CONFIG_PATH, ENV_MODERN_CONFIG_PATH
from .exceptions import ConfigurationError, FileReadError
from .types import LegacyDatabaseConfig, ModernDatabaseConfig

logger = logging.getLogger(__name__)

_legacy_adapter: TypeAdapter = TypeAdapter(LegacyDatabaseConfig)
_modern_adapter: TypeAdapter = TypeAdapter(ModernDatabaseConfig)

PathLike = Union[str, Path]


def parse_legacy_config(block: Optional[Dict[str, Any]]) -> Optional[LegacyDatabaseConfig]:
    """Validate the legacy database block. Returns None when the block is absent."""
    if block is None:
        return None
    try:
        return _legacy_adapter.validate_python(block)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid legacy database config: {e}") from e


def parse_modern_config(block: Optional[Dict[str, Any]]) -> ModernDatabaseConfig:
    """Validate the modern database block. An absent block means all defaults."""
    try:
        return _modern_adapter.validate_python(block or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid modern database config: {e}") from e


def _resolve_path(path: Optional[PathLike], env_key: str) -> str:
    # 1. Argument
    if path:
        return str(path)
    # 2. Env var
    env_path = os.getenv(env_key)
    if env_path:
        return env_path
    raise ConfigurationError(f"No config file given and {env_key} is not set")


def _read_database_section(path: str) -> Optional[Dict[str, Any]]:
    logger.debug(f"Loading database config from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(document, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")

    section = document.get(DATABASE_SECTION)
    if section is not None and not isinstance(section, dict):
        raise ConfigurationError(f"'{DATABASE_SECTION}' in {path} must be a mapping")
    return section


def load_legacy_config(path: Optional[PathLike] = None) -> Optional[LegacyDatabaseConfig]:
    """Load the legacy database block.

    Path precedence:
    1. path argument
    2. LEGACY_CONFIG_PATH env var
    """
    resolved = _resolve_path(path, ENV_LEGACY_CONFIG_PATH)
    section = _read_database_section(resolved)
    if section is None:
        logger.warning(f"No '{DATABASE_SECTION}' section in legacy config {resolved}")
    return parse_legacy_config(section)


def load_modern_config(path: Optional[PathLike] = None) -> ModernDatabaseConfig:
    """Load the modern database block.

    Path precedence:
    1. path argument
    2. MODERN_CONFIG_PATH env var
    """
    resolved = _resolve_path(path, ENV_MODERN_CONFIG_PATH)
    return parse_modern_config(_read_database_section(resolved))
