"""Importer configuration management."""

import logging
from functools import lru_cache
from pathlib import Path

from .schemas import GroupOption, ImportConfig
from .utils import load_json

logger = logging.getLogger('cssbattle.config')

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'import_config.json'


@lru_cache(maxsize=1)
def get_config() -> ImportConfig:
    """
    Load importer configuration from data/import_config.json.

    Configuration is cached after first load. When the file is absent the
    built-in cohort list is used.

    Returns:
        ImportConfig object with validated settings

    Raises:
        json.JSONDecodeError: If the config file is malformed
        ValidationError: If config file has invalid structure
    """
    if not DEFAULT_CONFIG_PATH.exists():
        logger.debug(f'No config at {DEFAULT_CONFIG_PATH}, using defaults')
        return ImportConfig()
    return load_json(DEFAULT_CONFIG_PATH, schema=ImportConfig)


def get_groups() -> list[GroupOption]:
    """Get the configured competition cohorts."""
    return get_config().groups


def get_valid_groups() -> list[str]:
    """Get the group names players may be assigned to."""
    return [group.value for group in get_config().groups]


def get_log_dir() -> Path:
    """Get the directory log files are written to."""
    return Path(get_config().log_dir)


def get_state_file() -> Path:
    """Get the path of the persistent client state file."""
    return Path(get_config().state_file)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
