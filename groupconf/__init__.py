"""
groupconf - Grouped key/value configuration files for Python.

Parses INI-like text into a read-only Document of groups and items,
with typed accessors and configurable string strictness.

Usage:
    import groupconf

    doc = groupconf.read("app.conf")
    port = doc.get("server", "port").as_u32()
    host = doc.get_or("server", "host", "localhost")
"""

from ._version import __version__, get_version, get_base_version, VERSION
from .errors import (
    GroupConfError,
    ConfigReadError,
    ConfigFileNotFoundError,
    ParseError,
    MalformedLineError,
    ValueOutsideGroupError,
    StrictnessViolationError,
    CastError,
    InvalidBoolValue,
)
from .model import Document, Group, Item
from .options import Options, StringStrictness, StringStrictnessBehavior, load_options
from .parser import parse
from .reader import read

__all__ = [
    "__version__",
    "get_version",
    "get_base_version",
    "VERSION",
    "parse",
    "read",
    "Document",
    "Group",
    "Item",
    "Options",
    "StringStrictness",
    "StringStrictnessBehavior",
    "load_options",
    "GroupConfError",
    "ConfigReadError",
    "ConfigFileNotFoundError",
    "ParseError",
    "MalformedLineError",
    "ValueOutsideGroupError",
    "StrictnessViolationError",
    "CastError",
    "InvalidBoolValue",
]
