"""
Parser options for groupconf.

Options is a plain immutable value passed into parse(). Defaults can be
stored in ~/.groupconf/config.toml (or GROUPCONF_HOME/config.toml) under
a [parser] section, and CLI flags override them via
Options.with_overrides().
"""

import dataclasses
import enum
import sys
import tomllib
from pathlib import Path
from typing import Optional

from ._paths import get_options_path


class StringStrictness(enum.Enum):
    """How strictly unquoted values are checked."""

    LOOSE = "loose"              # anything goes
    FORGIVABLE = "forgivable"    # unquoted values must not contain whitespace
    VERY = "very"                # every value must be double-quoted


class StringStrictnessBehavior(enum.Enum):
    """What happens to a value that breaks the active strictness."""

    IGNORE = "ignore"    # drop the item, keep parsing
    PANIC = "panic"      # abort the whole parse


# Keys recognised in the [parser] section of config.toml
_DEFAULTS = {
    "string_strictness": StringStrictness.LOOSE.value,
    "string_strictness_behavior": StringStrictnessBehavior.IGNORE.value,
}


@dataclasses.dataclass(frozen=True)
class Options:
    """Immutable parser options.

    Enum fields also accept their lowercase names ("forgivable",
    "panic", ...), which is how they appear in config files and on the
    command line.
    """

    string_strictness: StringStrictness = StringStrictness.LOOSE
    string_strictness_behavior: StringStrictnessBehavior = StringStrictnessBehavior.IGNORE

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(
            self, "string_strictness",
            _coerce(StringStrictness, self.string_strictness),
        )
        object.__setattr__(
            self, "string_strictness_behavior",
            _coerce(StringStrictnessBehavior, self.string_strictness_behavior),
        )

    def with_overrides(self, **kwargs) -> "Options":
        """Return new Options with specified fields overridden.

        Only applies overrides for non-None values, so CLI flags
        that weren't specified don't clobber config file values.
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return dataclasses.replace(self, **updates) if updates else self


def _coerce(enum_type, value):
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(member.value for member in enum_type)
    raise ValueError(
        f"invalid {enum_type.__name__} {value!r} (expected one of: {choices})"
    )


def load_options(options_path: Optional[Path] = None) -> Options:
    """Load default parser options from TOML, falling back to defaults.

    Args:
        options_path: Explicit path to the options file. If None, uses
                      GROUPCONF_HOME/config.toml or ~/.groupconf/config.toml.

    Returns:
        Options with the file's [parser] values applied.
    """
    path = options_path or get_options_path()

    if not path.is_file():
        return Options()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _warn(f"Could not read options file {path}: {e}")
        return Options()

    try:
        parsed = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        _warn(f"Could not parse options file {path}: {e}")
        return Options()

    try:
        return _build_options(parsed)
    except ValueError as e:
        _warn(f"Ignoring options file {path}: {e}")
        return Options()


def _build_options(parsed: dict) -> Options:
    """Build Options from a parsed TOML dict, using defaults for missing keys."""
    section = parsed.get("parser", {})
    if not isinstance(section, dict):
        raise ValueError("[parser] must be a table")

    def _get(key: str) -> str:
        val = section.get(key, _DEFAULTS[key])
        if not isinstance(val, str):
            raise ValueError(f"{key} must be a string, got {val!r}")
        return val

    return Options(
        string_strictness=_get("string_strictness"),
        string_strictness_behavior=_get("string_strictness_behavior"),
    )


def format_options(options: Options, options_path: Optional[Path] = None) -> str:
    """Format options for display (used by --options flag)."""
    path = options_path or get_options_path()
    lines = [
        f"Options file: {path}",
        f"  exists: {'yes' if path.is_file() else 'no'}",
        "",
        "[parser]",
        f"  string_strictness = {options.string_strictness.value}",
        f"  string_strictness_behavior = {options.string_strictness_behavior.value}",
    ]
    return "\n".join(lines)


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    print(f"groupconf: options: {msg}", file=sys.stderr)
