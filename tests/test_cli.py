"""Tests for groupconf CLI."""

from groupconf.cli import build_parser, main


def test_version_flag(run_groupconf):
    """groupconf --version should print version string and exit 0."""
    result = run_groupconf(["--version"])
    assert result.returncode == 0
    assert "groupconf" in result.stdout
    assert "0." in result.stdout


def test_help_flag(run_groupconf):
    """groupconf --help should print usage and exit 0."""
    result = run_groupconf(["--help"])
    assert result.returncode == 0
    assert "FILE" in result.stdout
    assert "--strictness" in result.stdout


def test_list_values(run_groupconf, sample_file):
    """Default mode lists every value in source order."""
    result = run_groupconf([sample_file])
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "server.host = localhost"
    assert "server.motd = Hello world" in lines
    assert lines[-1] == "flags.ratio = 0.75"


def test_get_value(run_groupconf, sample_file):
    result = run_groupconf([sample_file, "--get", "server.port"])
    assert result.returncode == 0
    assert result.stdout == "8080\n"


def test_get_with_type(run_groupconf, sample_file):
    result = run_groupconf([sample_file, "--get", "flags.debug", "--type", "bool"])
    assert result.stdout == "true\n"


def test_get_bad_cast(run_groupconf, sample_file):
    result = run_groupconf([sample_file, "--get", "server.host", "--type", "u32"])
    assert result.returncode == 1
    assert "cannot convert 'localhost' to u32" in result.stderr


def test_get_missing_uses_default(run_groupconf, sample_file):
    result = run_groupconf([sample_file, "--get", "server.missing", "--default", "8080"])
    assert result.returncode == 0
    assert result.stdout == "8080\n"


def test_get_missing_without_default(run_groupconf, sample_file):
    result = run_groupconf([sample_file, "--get", "nope.key"])
    assert result.returncode == 1
    assert "no value for nope.key" in result.stderr


def test_missing_file(run_groupconf, tmp_path):
    result = run_groupconf([tmp_path / "nope.conf"])
    assert result.returncode == 1
    assert "file not found" in result.stderr


def test_parse_error_reports_line(run_groupconf, config_file):
    path = config_file("[a]\nk = v\nbroken\n")
    result = run_groupconf([path])
    assert result.returncode == 1
    assert "line 3" in result.stderr


def test_strictness_flags(run_groupconf, config_file):
    path = config_file("[a]\nk = two words\nj = one\n")
    result = run_groupconf([path, "--strictness", "forgivable"])
    assert result.returncode == 0
    assert result.stdout == "a.j = one\n"

    result = run_groupconf([path, "--strictness", "forgivable", "--on-violation", "panic"])
    assert result.returncode == 1
    assert "line 2" in result.stderr


def test_options_file_applies(run_groupconf, config_file):
    run_groupconf.home.mkdir(parents=True)
    (run_groupconf.home / "config.toml").write_text(
        '[parser]\nstring_strictness = "very"\n', encoding="utf-8"
    )
    path = config_file('[a]\nk = v\nq = "v"\n')
    result = run_groupconf([path])
    assert result.stdout == "a.q = v\n"


def test_show_options(groupconf_home, capsys):
    main(["--options", "--strictness", "very"])
    output = capsys.readouterr().out
    assert "string_strictness = very" in output


def test_file_required():
    parser = build_parser()
    args = parser.parse_args([])
    assert args.file is None


def test_get_f32_prints_single_precision_value(run_groupconf, config_file):
    path = config_file("[a]\nx = 0.1\nbig = 1e40\n")
    result = run_groupconf([path, "--get", "a.x", "--type", "f32"])
    assert result.returncode == 0
    assert result.stdout == "0.1\n"

    result = run_groupconf([path, "--get", "a.big", "--type", "f32"])
    assert result.returncode == 1
    assert "out of range" in result.stderr
