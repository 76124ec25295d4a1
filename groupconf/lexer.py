"""
Line classifier for the groupconf text format.

Each physical line is trimmed and sorted into one of:
- blank / comment lines (dropped by iter_lines)
- [group] headers
- key = value pairs
- malformed lines, kept with their line number for error reporting

Values are left raw here; quote handling depends on the parser options
and happens in the normalizer.
"""

import enum
from typing import Iterator, NamedTuple, Optional

COMMENT_MARKERS = ("#", ";")
SEPARATOR = "="
QUOTE = '"'


class LineKind(enum.Enum):
    BLANK = "blank"
    COMMENT = "comment"
    GROUP = "group"
    PAIR = "pair"
    MALFORMED = "malformed"


class Line(NamedTuple):
    """A classified source line.

    ``name`` is set for GROUP lines, ``key`` and ``value`` for PAIR lines,
    ``error`` for MALFORMED lines. ``raw`` is the trimmed line text.
    """

    kind: LineKind
    number: int
    raw: str
    name: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    error: Optional[str] = None


def classify_line(text: str, number: int) -> Line:
    """Classify a single line of source text (1-based ``number``)."""
    stripped = text.strip()

    if not stripped:
        return Line(LineKind.BLANK, number, stripped)

    if stripped.startswith(COMMENT_MARKERS):
        return Line(LineKind.COMMENT, number, stripped)

    if stripped.startswith("["):
        return _classify_header(stripped, number)

    sep = find_separator(stripped)
    if sep < 0:
        return _malformed(stripped, number, "missing '=' separator")

    key = stripped[:sep].strip()
    if not key:
        return _malformed(stripped, number, "empty key")

    value = stripped[sep + 1:].strip()
    return Line(LineKind.PAIR, number, stripped, key=key, value=value)


def iter_lines(text: str) -> Iterator[Line]:
    """Yield the significant lines of ``text`` in source order.

    Lines end at LF only and a trailing CR is dropped, so form feeds
    and Unicode line separators stay inside values. Blank and comment
    lines are skipped. The generator is lazy and single-pass.
    """
    for number, physical in enumerate(text.split("\n"), start=1):
        physical = physical.rstrip("\r")
        line = classify_line(physical, number)
        if line.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue
        yield line


def find_separator(text: str) -> int:
    """Return the index of the first '=' outside double quotes, or -1."""
    in_quote = False
    for i, ch in enumerate(text):
        if ch == QUOTE:
            in_quote = not in_quote
        elif ch == SEPARATOR and not in_quote:
            return i
    return -1


def _classify_header(stripped: str, number: int) -> Line:
    if not stripped.endswith("]"):
        return _malformed(stripped, number, "unbalanced group header")

    name = stripped[1:-1].strip()
    if not name:
        return _malformed(stripped, number, "empty group name")
    if "[" in name or "]" in name:
        return _malformed(stripped, number, "unbalanced group header")

    return Line(LineKind.GROUP, number, stripped, name=name)


def _malformed(stripped: str, number: int, error: str) -> Line:
    return Line(LineKind.MALFORMED, number, stripped, error=error)
