"""Shared pytest fixtures for the ocp-opal-wizard test suite.

Provides reusable fixtures for:
- Temporary target directories (empty and non-empty)
- Context construction with test settings
- Scripted answers for rich prompts
- Mocked git subprocesses
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import pytest

from ocp_opal_wizard.config import Settings
from ocp_opal_wizard.context import Context
from ocp_opal_wizard.utils import GitIdentity, console


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's package manager and wizard settings out of tests."""
    for name in (
        "npm_config_user_agent",
        "OCP_OPAL_WIZARD_SHELL_TIMEOUT",
        "OCP_OPAL_WIZARD_TEMPLATE_DIR",
        "OCP_OPAL_WIZARD_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop Rich from wrapping long temporary paths in captured output."""
    monkeypatch.setattr(console, "width", 400)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An existing, empty target directory."""
    target = tmp_path / "my-tool"
    target.mkdir()
    return target


@pytest.fixture
def non_empty_dir(tmp_path: Path) -> Path:
    """A target directory that already holds a file."""
    target = tmp_path / "occupied"
    target.mkdir()
    (target / "existing.txt").write_text("keep me\n", encoding="utf-8")
    return target


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return Settings(shell_timeout=5.0)


@pytest.fixture
def make_context(settings: Settings) -> Callable[..., Context]:
    """Factory building a ``Context`` with test settings."""

    def _make(**fields: Any) -> Context:
        fields.setdefault("settings", settings)
        return Context(**fields)

    return _make


@pytest.fixture
def filled_context(make_context: Callable[..., Context], empty_dir: Path) -> Context:
    """A context as it looks after the app-details and tracker-id steps."""
    return make_context(
        cwd=str(empty_dir),
        project_name="my-tool",
        app_id="my-tool",
        app_display_name="My Tool",
        app_description="Does useful things",
        app_summary="A useful tool",
        tool_description="Answers questions",
        tracker_id="TRK-123",
        github_username="octocat",
        repo_name="my-tool-repo",
        contact_email="dev@example.com",
    )


# ---------------------------------------------------------------------------
# Prompts and subprocesses
# ---------------------------------------------------------------------------


@pytest.fixture
def answers():
    """Patch ``Prompt.ask`` to return scripted answers in order.

    An exception instance in the list is raised instead of returned.
    """

    def _script(*values: Any):
        return patch("ocp_opal_wizard.prompts.Prompt.ask", side_effect=list(values))

    return _script


@pytest.fixture
def git_identity():
    """Patch the git identity lookup used by the app-details step."""
    with patch(
        "ocp_opal_wizard.steps.app_details.get_git_user",
        new=AsyncMock(return_value=GitIdentity(name="Jane Dev", email="jane@example.com")),
    ) as mock:
        yield mock


@pytest.fixture
def mock_git():
    """Pretend git is installed and every git command succeeds."""
    with patch("ocp_opal_wizard.steps.git.command_exists", return_value=True), patch(
        "ocp_opal_wizard.steps.git.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as run:
        yield run
