"""
Centralized path resolution for the groupconf data directory.

The data directory (~/.groupconf/) holds the config.toml that supplies
default parser options. GROUPCONF_HOME overrides it for testing and
custom installs.
"""

import os
from pathlib import Path


def get_data_dir() -> Path:
    """Return the groupconf data directory path.

    Checks GROUPCONF_HOME env var first, then falls back to ~/.groupconf/.
    """
    env_dir = os.environ.get("GROUPCONF_HOME")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".groupconf"


def get_options_path() -> Path:
    """Return the path to the options TOML file."""
    return get_data_dir() / "config.toml"
