"""
Configuration Loader

Loads the YAML clone settings: rate-limit budget and pagination defaults.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_RATE_LIMIT_BUCKET_SIZE,
    DEFAULT_RATE_LIMIT_CALLS,
    DEFAULT_RATE_LIMIT_INTERVAL,
    PUBLISHED,
)

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "clone.yaml"


@dataclass
class CloneSettings:
    """Rate-limit budget and listing defaults for a clone run."""
    rate_limit_interval: float = DEFAULT_RATE_LIMIT_INTERVAL
    rate_limit_bucket_size: int = DEFAULT_RATE_LIMIT_BUCKET_SIZE
    rate_limit_calls: int = DEFAULT_RATE_LIMIT_CALLS
    page_size: int = DEFAULT_PAGE_SIZE
    published_status: str = PUBLISHED

    def list_params(self) -> Dict[str, Any]:
        """Initial query parameters for a listing traversal."""
        return {"limit": self.page_size, "published_status": self.published_status}

    def count_params(self) -> Dict[str, Any]:
        """Query parameters for the pre-traversal count."""
        return {"published_status": self.published_status}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'clone.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_clone_settings(path: Optional[Path] = None) -> CloneSettings:
    """
    Load clone settings.

    Args:
        path: Explicit settings file. If None, looks up 'clone.yaml' in the
            config directory and falls back to built-in defaults when absent.

    Returns:
        CloneSettings populated from the file, defaults for missing keys
    """
    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    else:
        try:
            config = load_config(SETTINGS_FILENAME)
        except FileNotFoundError:
            logger.debug("No %s found, using default clone settings", SETTINGS_FILENAME)
            return CloneSettings()

    rate_limit = config.get('rate_limit', {}) or {}
    pagination = config.get('pagination', {}) or {}
    defaults = CloneSettings()

    return CloneSettings(
        rate_limit_interval=float(rate_limit.get('interval_seconds', defaults.rate_limit_interval)),
        rate_limit_bucket_size=int(rate_limit.get('bucket_size', defaults.rate_limit_bucket_size)),
        rate_limit_calls=int(rate_limit.get('calls', defaults.rate_limit_calls)),
        page_size=int(pagination.get('page_size', defaults.page_size)),
        published_status=pagination.get('published_status', defaults.published_status),
    )
