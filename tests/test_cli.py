"""Tests for CLI commands."""

import json
import os
import subprocess
import sys

import pytest


@pytest.fixture
def cli_env(mock_boxmenu_dir):
    """Environment for CLI subprocesses."""
    env = os.environ.copy()
    env["BOXMENU_DIR"] = str(mock_boxmenu_dir)
    env.pop("FORCE_COLOR", None)
    return env


def run_cli(*args, env=None, input_text=None):
    """Run boxmenu CLI command and return result."""
    cmd = [sys.executable, "-m", "boxmenu.cli"] + list(args)
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        env=env,
        input=input_text,
    )


class TestPreview:
    def test_preview_draws_menu(self, cli_env):
        result = run_cli("preview", "--width", "60", env=cli_env)

        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "+" + "-" * 57 + "+"
        assert "Main Menu" in lines[1]
        assert all(len(line) == 60 for line in lines if line.startswith("|"))
        assert lines[-1] == "Enter an option: "

    def test_preview_keeps_overflowing_line_whole(self, cli_env):
        result = run_cli("preview", "--width", "40", env=cli_env)

        assert result.returncode == 0
        long_line = "| This is a much longer, much more AWESOME, third line!|"
        assert long_line in result.stdout.splitlines()
        fitting = [line for line in result.stdout.splitlines() if "test line" in line]
        assert [len(line) for line in fitting] == [40, 40]

    def test_preview_uses_fallback_width(self, cli_env):
        cli_env["BOXMENU_FALLBACK_WIDTH"] = "50"
        result = run_cli("preview", env=cli_env)

        assert result.returncode == 0
        assert result.stdout.splitlines()[0] == "+" + "-" * 47 + "+"


class TestDemo:
    def test_demo_reports_invalid_then_success(self, cli_env):
        result = run_cli("demo", "--width", "60", env=cli_env, input_text="z\na\nx\n")

        assert result.returncode == 0
        assert '[ERROR]: Invalid choice: "z"' in result.stdout
        assert "[SUCCESS]: You chose Awesomesauce!" in result.stdout

    def test_demo_exits_on_eof(self, cli_env):
        result = run_cli("demo", "--width", "60", env=cli_env, input_text="")

        assert result.returncode == 0
        assert "Main Menu" in result.stdout


class TestDebugCommand:
    def test_debug_on_persists(self, cli_env, mock_boxmenu_dir):
        result = run_cli("debug", "on", env=cli_env)

        assert result.returncode == 0
        data = json.loads((mock_boxmenu_dir / "config.json").read_text())
        assert data["debug"] is True

    def test_debug_rejects_other_values(self, cli_env):
        result = run_cli("debug", "maybe", env=cli_env)

        assert result.returncode == 2
        assert "maybe" in result.stdout
