"""Tests for the vergen command-line interface."""

import importlib
import re

from typer.testing import CliRunner

from vergen import __version__
from vergen.cli import app
from vergen.utils import CommandError

runner = CliRunner()


def _stub_git(monkeypatch, diff="", fail=()):
    outputs = {"describe": "v1.2.3", "rev-parse": "abc123", "diff-index": diff}

    def fake_run(args, timeout):
        if args[1] in fail:
            raise CommandError(args, "exit status 128", returncode=128)
        return outputs[args[1]]

    monkeypatch.setattr("vergen.git_helpers.run_command", fake_run)


def test_version_flag_prints_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_generate_writes_default_file(tmp_path, monkeypatch):
    _stub_git(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 0
    content = (tmp_path / "version" / "version.go").read_text(encoding="utf-8")
    assert 'VgVersion = "v1.2.3"' in content


def test_generate_with_options(tmp_path, monkeypatch):
    _stub_git(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(
        app,
        ["generate", "out/info.py", "--language", "python", "--package-name", "myapp", "--timeout", "5"],
    )

    assert result.exit_code == 0
    content = (tmp_path / "out" / "info.py").read_text(encoding="utf-8")
    assert "myapp" in content
    assert 'VG_HASH = "abc123"' in content


def test_generate_fails_when_hash_lookup_fails(tmp_path, monkeypatch):
    _stub_git(monkeypatch, fail=("rev-parse",))
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 1
    assert "FATAL" in result.output
    assert not (tmp_path / "version").exists()


def test_generate_rejects_unknown_language(tmp_path, monkeypatch):
    _stub_git(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--language", "rust"])

    assert result.exit_code == 2
    assert re.search(r"Invalid language", result.output)


def test_extra_ignore_keeps_output_file_ignored(tmp_path, monkeypatch):
    """--ignore adds to the ignore list; a rewritten version file alone stays clean."""
    _stub_git(monkeypatch, diff=":100644 100644 1111111 0000000 M\tversion/version.go\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--ignore", "CHANGELOG.md"])

    assert result.exit_code == 0
    content = (tmp_path / "version" / "version.go").read_text(encoding="utf-8")
    assert 'VgVersion = "v1.2.3"' in content
    assert "VgClean   = true" in content


def test_extra_ignore_applies_to_listed_files(tmp_path, monkeypatch):
    _stub_git(monkeypatch, diff="version/version.go\nCHANGELOG.md\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--ignore", "CHANGELOG.md", "--ignore", "NOTES"])

    assert result.exit_code == 0
    assert "VgClean   = true" in (tmp_path / "version" / "version.go").read_text(encoding="utf-8")


def test_extra_ignore_does_not_hide_other_changes(tmp_path, monkeypatch):
    _stub_git(monkeypatch, diff="version/version.go\nmain.go\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--ignore", "CHANGELOG.md"])

    assert result.exit_code == 0
    content = (tmp_path / "version" / "version.go").read_text(encoding="utf-8")
    assert 'VgVersion = "v1.2.3+"' in content
    assert "VgClean   = false" in content


def test_generate_rejects_non_identifier_package_name(tmp_path, monkeypatch):
    _stub_git(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--package-name", "my-pkg"])

    assert result.exit_code == 2
    assert not (tmp_path / "my-pkg").exists()


def test_importing_main_module_does_not_run_app():
    module = importlib.import_module("vergen.__main__")
    assert module.app is app
