"""Shared test fixtures and helpers for toolkata tests.

Provides:
- CliRunner fixtures: cli_runner, invoke_cli()
- JSON validation helpers: parse_json_output(), assert_json_envelope()
- isolated_project: a temp project root with no config and a clean env
"""

from __future__ import annotations

import json
import os

import pytest
from click.testing import CliRunner

# ===========================================================================
# CliRunner helpers
# ===========================================================================


@pytest.fixture
def cli_runner():
    """Provide a Click CliRunner for in-process CLI testing."""
    return CliRunner()


def invoke_cli(runner, args, cwd=None, json_mode=False):
    """Invoke the toolkata CLI via CliRunner.

    Args:
        runner: CliRunner instance
        args: list of CLI arguments (e.g. ["list"])
        cwd: directory to run in
        json_mode: if True, prepend --json flag
    Returns:
        click.testing.Result
    """
    from toolkata.cli import cli

    full_args = []
    if json_mode:
        full_args.append("--json")
    full_args.extend(args)

    old_cwd = os.getcwd()
    try:
        if cwd:
            os.chdir(str(cwd))
        result = runner.invoke(cli, full_args, catch_exceptions=False)
    finally:
        os.chdir(old_cwd)

    return result


# ===========================================================================
# JSON validation helpers
# ===========================================================================


def parse_json_output(result, command=None):
    """Parse JSON from a CliRunner result, failing with context on error."""
    assert result.exit_code == 0, f"Command {command or '?'} failed (exit {result.exit_code}):\n{result.output}"
    try:
        return json.loads(result.output)
    except json.JSONDecodeError as e:
        pytest.fail(f"Invalid JSON from {command or '?'}: {e}\nOutput was:\n{result.output[:500]}")


def assert_json_envelope(data, command=None):
    """Validate that a parsed JSON dict follows the toolkata envelope contract."""
    assert isinstance(data, dict), f"Expected dict, got {type(data)}"
    assert "command" in data, "Missing 'command' key in envelope"
    assert "version" in data, "Missing 'version' key in envelope"
    assert "summary" in data, "Missing 'summary' key in envelope"
    assert "timestamp" in data.get("_meta", {}), "Missing 'timestamp' in _meta"
    if command:
        assert data["command"] == command, f"Expected command={command}, got {data['command']}"
    assert isinstance(data["summary"], dict), f"summary should be dict, got {type(data['summary'])}"


# ===========================================================================
# Project fixtures
# ===========================================================================


@pytest.fixture
def isolated_project(tmp_path, monkeypatch):
    """An empty project root (marked by .git) with toolkata env vars cleared."""
    root = tmp_path / "project"
    root.mkdir()
    (root / ".git").mkdir()
    monkeypatch.delenv("TOOLKATA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOOLKATA_SEARCH_LIMIT", raising=False)
    return root


def write_config(root, data):
    """Write .toolkata/config.json under *root*."""
    cfg_dir = root / ".toolkata"
    cfg_dir.mkdir(exist_ok=True)
    path = cfg_dir / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path
