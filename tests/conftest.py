"""Shared test fixtures for groupconf."""

import os
import subprocess
import sys

import pytest


SAMPLE_CONFIG = """\
# sample configuration
[server]
host = localhost
port = 8080
motd = "Hello world"

[flags]
debug = on
verbose = No
ratio = 0.75
"""


@pytest.fixture
def groupconf_home(tmp_path, monkeypatch):
    """Provide an isolated ~/.groupconf/ directory for testing.

    Sets GROUPCONF_HOME env var so option loading uses tmp_path.
    Does NOT create the directory.
    """
    home = tmp_path / ".groupconf"
    monkeypatch.setenv("GROUPCONF_HOME", str(home))
    return home


@pytest.fixture
def options_file(groupconf_home):
    """Write arbitrary TOML content to the test options file.

    Returns a helper function. Call it with a TOML string.
    """
    def _write(content: str):
        groupconf_home.mkdir(parents=True, exist_ok=True)
        path = groupconf_home / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config_file(tmp_path):
    """Write configuration text to a file under tmp_path.

    Returns a helper function: config_file(text, name="app.conf", encoding="utf-8").
    """
    def _write(content: str, name: str = "app.conf", encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path
    return _write


@pytest.fixture
def sample_file(config_file):
    """A config file holding SAMPLE_CONFIG."""
    return config_file(SAMPLE_CONFIG)


@pytest.fixture
def run_groupconf(tmp_path):
    """Run groupconf as a subprocess with isolated GROUPCONF_HOME.

    Returns a callable: run_groupconf(args, input_data=None)
    The callable has a .home attribute pointing to the groupconf data dir.
    """
    home = tmp_path / ".groupconf"

    def _run(args, input_data=None):
        env = os.environ.copy()
        env["GROUPCONF_HOME"] = str(home)
        cmd = [sys.executable, "-m", "groupconf"] + [str(a) for a in args]
        return subprocess.run(
            cmd,
            input=input_data,
            capture_output=True,
            text=True,
            env=env,
            timeout=30,
        )

    _run.home = home
    return _run


@pytest.fixture
def sample_text():
    """The text of SAMPLE_CONFIG."""
    return SAMPLE_CONFIG
