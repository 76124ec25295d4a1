"""
Value normalization under the active string strictness.

A double-quoted value is always accepted and loses its quotes. Unquoted
values are checked against Options.string_strictness; what happens on a
violation is decided by Options.string_strictness_behavior.
"""

from typing import Optional

from .errors import StrictnessViolationError
from .lexer import QUOTE
from .options import Options, StringStrictness, StringStrictnessBehavior


def is_quoted(raw_value: str) -> bool:
    """True if ``raw_value`` is wrapped in a matching pair of double quotes."""
    return len(raw_value) >= 2 and raw_value[0] == QUOTE and raw_value[-1] == QUOTE


def is_allowed(raw_value: str, strictness: StringStrictness) -> bool:
    """Check an unquoted or quoted raw value against ``strictness``."""
    if is_quoted(raw_value):
        return True
    if strictness is StringStrictness.LOOSE:
        return True
    if strictness is StringStrictness.FORGIVABLE:
        return not any(ch.isspace() for ch in raw_value)
    return False


def normalize_value(
    raw_value: str,
    options: Options,
    line_number: int = 0,
    raw_text: Optional[str] = None,
) -> Optional[str]:
    """Return the stored form of ``raw_value``.

    Returns None when the value violates the strictness and the item
    should be dropped (IGNORE).

    Raises:
        StrictnessViolationError: on a violation under PANIC.
    """
    if is_quoted(raw_value):
        return raw_value[1:-1]

    if is_allowed(raw_value, options.string_strictness):
        return raw_value

    if options.string_strictness_behavior is StringStrictnessBehavior.PANIC:
        raise StrictnessViolationError(
            line_number,
            raw_text if raw_text is not None else raw_value,
            options.string_strictness,
        )
    return None
