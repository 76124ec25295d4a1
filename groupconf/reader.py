"""
File front-end for the parser.

Turns a path into text and hands it to parse(). Read failures raise
ConfigReadError, which is kept apart from ParseError so callers can
tell a missing file from a broken one.
"""

import logging
from pathlib import Path
from typing import Optional

import chardet

from .errors import ConfigFileNotFoundError, ConfigReadError
from .model import Document
from .options import Options
from .parser import parse

log = logging.getLogger(__name__)

_MIN_CONFIDENCE = 0.8


def read(path, options: Optional[Options] = None, encoding: Optional[str] = None) -> Document:
    """Read and parse the configuration file at ``path``.

    Args:
        path: File to read.
        options: Parser options, see parse().
        encoding: Text encoding. Defaults to UTF-8 with an optional
                  BOM; if decoding fails the encoding is guessed with
                  chardet.

    Raises:
        ConfigFileNotFoundError: ``path`` does not exist.
        ConfigReadError: ``path`` exists but cannot be read.
        ParseError: the content is not valid (see parse()).
    """
    return parse(read_text(path, encoding), options)


def read_text(path, encoding: Optional[str] = None) -> str:
    """Return the decoded content of ``path``."""
    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e

    try:
        return raw.decode(encoding or "utf-8-sig")
    except UnicodeDecodeError:
        return _decode_guess(path, raw)


def _decode_guess(path: Path, raw: bytes) -> str:
    guess = chardet.detect(raw)
    codec = guess.get("encoding")
    if not codec or (guess.get("confidence") or 0) < _MIN_CONFIDENCE:
        log.info("%s: unknown encoding, decoding as UTF-8 with replacement", path)
        return raw.decode("utf-8-sig", errors="replace")

    log.info("%s: decoding as %s (confidence %.2f)", path, codec, guess["confidence"])
    try:
        return raw.decode(codec)
    except (UnicodeDecodeError, LookupError):
        return raw.decode("utf-8-sig", errors="replace")
