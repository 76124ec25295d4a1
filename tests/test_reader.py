"""Tests for reading configuration files from disk."""

import pytest

from groupconf import (
    ConfigFileNotFoundError,
    ConfigReadError,
    MalformedLineError,
    Options,
    ParseError,
    read,
)
from groupconf.reader import read_text


def test_read_file(sample_file):
    doc = read(sample_file)
    assert doc.get("server", "motd").value == "Hello world"


def test_read_accepts_str_path(sample_file):
    assert read(str(sample_file)).has_group("flags")


def test_missing_file(tmp_path):
    with pytest.raises(ConfigFileNotFoundError) as exc_info:
        read(tmp_path / "doesnt-exist.conf")
    assert exc_info.value.path == tmp_path / "doesnt-exist.conf"


def test_read_error_is_not_parse_error(tmp_path):
    with pytest.raises(ConfigReadError) as exc_info:
        read(tmp_path / "nope.conf")
    assert not isinstance(exc_info.value, ParseError)


def test_directory_is_read_error(tmp_path):
    with pytest.raises(ConfigReadError):
        read(tmp_path)


def test_parse_error_propagates(config_file):
    path = config_file("[a]\nbroken\n")
    with pytest.raises(MalformedLineError):
        read(path)


def test_options_passed_through(config_file):
    path = config_file("[a]\nk = two words\n")
    doc = read(path, Options(string_strictness="forgivable"))
    assert not doc.group("a").has("k")


def test_explicit_encoding(config_file):
    path = config_file("[a]\nname = café\n", encoding="latin-1")
    assert read(path, encoding="latin-1").get("a", "name").value == "café"


def test_undecodable_utf8_falls_back(config_file):
    path = config_file("[a]\nname = café\n", encoding="latin-1")
    text = read_text(path)
    assert text.startswith("[a]\nname = caf")
    assert read(path).has_group("a")


def test_utf8_bom_is_dropped(config_file):
    """Files saved with a UTF-8 byte order mark parse normally."""
    path = config_file("\ufeff[a]\nk = v\n")
    assert read_text(path) == "[a]\nk = v\n"
    doc = read(path)
    assert doc.groups() == ["a"]
    assert doc.get("a", "k").value == "v"
