"""
Document builder: turns configuration text into a Document.

Single synchronous pass over the classified lines. A structural error
or a PANIC strictness violation aborts the parse; no partial Document
is ever returned.
"""

import logging
from typing import Dict, Optional

from .errors import MalformedLineError, ValueOutsideGroupError
from .lexer import LineKind, iter_lines
from .model import Document
from .normalizer import normalize_value
from .options import Options

log = logging.getLogger(__name__)


def parse(source, options: Optional[Options] = None) -> Document:
    """Parse configuration text into a Document.

    Args:
        source: The complete configuration text, or a text stream
                (anything with a ``read()`` method).
        options: Parser options. Defaults to ``Options()`` (loose
                 strictness, violations ignored).

    Returns:
        The finished, read-only Document.

    Raises:
        MalformedLineError: a line that is not blank, a comment, a
            group header or a key/value pair.
        ValueOutsideGroupError: a key/value pair before any group.
        StrictnessViolationError: a value breaking the strictness
            when the behavior is PANIC.
    """
    options = options or Options()
    text = source.read() if hasattr(source, "read") else source

    groups: Dict[str, Dict[str, str]] = {}
    current: Optional[Dict[str, str]] = None

    for line in iter_lines(text):
        if line.kind is LineKind.MALFORMED:
            raise MalformedLineError(line.number, line.raw, line.error)

        if line.kind is LineKind.GROUP:
            # repeated headers reopen the existing group
            current = groups.setdefault(line.name, {})
            continue

        if current is None:
            raise ValueOutsideGroupError(line.number, line.raw)

        value = normalize_value(line.value, options, line.number, line.raw)
        if value is None:
            log.debug(
                "line %d: dropped %r (%s string strictness)",
                line.number, line.key, options.string_strictness.value,
            )
            continue
        current[line.key] = value

    return Document(groups)
