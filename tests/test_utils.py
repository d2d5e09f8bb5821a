"""Unit tests for utility functions (ocp_opal_wizard.utils).

Tests cover:
- run_command (success, failure, cwd, timeout, missing executable)
- command_exists
- get_git_user (both values, missing values)
- Rich output helpers
- setup_logging levels
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from rich.logging import RichHandler

from ocp_opal_wizard.utils import (
    GitIdentity,
    command_exists,
    get_git_user,
    print_cancel,
    print_dry_run,
    print_info,
    print_note,
    print_success,
    print_warning,
    run_command,
    setup_logging,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command([sys.executable, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_command(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]
        )
        assert returncode == 3
        assert stderr == "boom"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=0.5
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_executable(self):
        returncode, stdout, stderr = await run_command(["definitely-not-a-real-binary-xyz"])
        assert returncode == 1
        assert stdout == ""
        assert stderr


class TestCommandExists:
    @pytest.mark.unit
    def test_existing(self):
        with patch("ocp_opal_wizard.utils.shutil.which", return_value="/usr/bin/git"):
            assert command_exists("git") is True

    @pytest.mark.unit
    def test_missing(self):
        with patch("ocp_opal_wizard.utils.shutil.which", return_value=None):
            assert command_exists("git") is False


# ---------------------------------------------------------------------------
# get_git_user
# ---------------------------------------------------------------------------


class TestGetGitUser:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reads_name_and_email(self):
        async def fake_run(cmd, cwd=None, timeout=30.0):
            return (0, "Jane Dev", "") if cmd[-1] == "user.name" else (0, "jane@example.com", "")

        with patch("ocp_opal_wizard.utils.run_command", side_effect=fake_run) as run:
            identity = await get_git_user(timeout=2.0)

        assert identity == GitIdentity(name="Jane Dev", email="jane@example.com")
        assert run.call_count == 2
        for call in run.call_args_list:
            assert call.kwargs["timeout"] == 2.0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unset_values_are_empty(self):
        with patch(
            "ocp_opal_wizard.utils.run_command",
            new=AsyncMock(return_value=(1, "", "")),
        ):
            identity = await get_git_user()
        assert identity == GitIdentity(name="", email="")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_messages_are_printed(self, capsys):
        print_success("all good")
        print_warning("careful")
        print_info("fyi")
        print_cancel()
        print_dry_run("Would do it")
        out = capsys.readouterr().out
        assert "all good" in out
        assert "careful" in out
        assert "fyi" in out
        assert "Operation cancelled." in out
        assert "[dry-run] Would do it" in out

    @pytest.mark.unit
    def test_note(self, capsys):
        print_note("body text", title="Heading")
        out = capsys.readouterr().out
        assert "Heading" in out
        assert "body text" in out


# ---------------------------------------------------------------------------
# setup_logging
# ---------------------------------------------------------------------------


class TestSetupLogging:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "verbose, debug, level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_levels(self, verbose: bool, debug: bool, level: int):
        setup_logging(verbose=verbose, debug=debug)
        package_logger = logging.getLogger("ocp_opal_wizard")
        assert package_logger.level == level
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], RichHandler)

    @pytest.mark.unit
    def test_debug_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OCP_OPAL_WIZARD_DEBUG", "1")
        setup_logging()
        assert logging.getLogger("ocp_opal_wizard").level == logging.DEBUG
