"""
Version information for groupconf.

This file is the canonical source for version numbers.
To bump version: edit MAJOR, MINOR, PATCH below.
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "groupconf"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_version():
    """Return the full version string."""
    return __version__


__version__ = get_base_version()
VERSION = __version__
