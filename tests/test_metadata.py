"""Metadata stories: package constants and the info block."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from greeter import __init__conf__

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.mark.os_agnostic
def test_print_info_lists_every_field(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info shows name, version, and the shell command."""
    __init__conf__.print_info()

    out = capsys.readouterr().out
    assert out.startswith("Info for greeter:")
    for label in ("name", "title", "version", "homepage", "author", "author_email", "shell_command"):
        assert f"    {label}" in out


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    """Name, version, and script name agree with pyproject.toml."""
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]

    assert project["name"] == __init__conf__.name
    assert project["version"] == __init__conf__.version
    assert __init__conf__.shell_command in project["scripts"]


@pytest.mark.os_agnostic
def test_env_prefix_matches_app_name() -> None:
    """Environment overrides use the upper-cased app name as prefix."""
    assert __init__conf__.ENV_PREFIX == __init__conf__.CONFIG_APP_NAME.upper() + "_"
