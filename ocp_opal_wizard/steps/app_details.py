"""App details step: collect the OCP app configuration.

Values passed on the command line are used without prompting when they are
valid.  The remaining fields are asked in two groups; cancelling inside a
group ends the wizard before any of that group's answers are stored.
"""

from __future__ import annotations

import logging
from typing import Callable

from rich.markup import escape

from .. import prompts
from ..context import Context
from ..errors import PromptCancelled
from ..utils import (
    GitIdentity,
    get_git_user,
    print_cancel,
    print_dry_run,
    print_step,
    print_warning,
)
from ..validation import (
    is_valid_email,
    is_valid_github_username,
    to_display_name,
    to_valid_app_id,
)

logger = logging.getLogger(__name__)

DEFAULT_APP_ID = "my-ocp-opal-tool"
DEFAULT_DESCRIPTION = "An OCP Opal Tool"
DEFAULT_SUMMARY = "Extends Opal with custom functionality"
DEFAULT_TOOL_DESCRIPTION = "A custom tool for Opal"
DEFAULT_GITHUB_USERNAME = "your-username"
DEFAULT_CONTACT_EMAIL = "your-email@example.com"

MAX_DISPLAY_NAME_LENGTH = 50


async def app_details(ctx: Context) -> None:
    git_user = await _lookup_git_user(ctx)
    _discard_invalid_presets(ctx)

    if ctx.yes:
        _apply_defaults(ctx, git_user)
        return

    print_step("App Configuration")
    try:
        app_config = prompts.ask_group(
            {
                "app_id": lambda results: _preset_or_ask(
                    _normalize_app_id(ctx.app_id) if ctx.app_id else "",
                    lambda: prompts.ask_text(
                        "App ID (unique identifier for OCP)",
                        default=ctx.project_name,
                        validate=validate_app_id,
                    ),
                ),
                "app_display_name": lambda results: _preset_or_ask(
                    ctx.app_display_name,
                    lambda: prompts.ask_text(
                        "Display name (shown in OCP)",
                        default=to_display_name(
                            to_valid_app_id(results["app_id"]) or ctx.project_name
                        ),
                        validate=validate_display_name,
                    ),
                ),
                "app_description": lambda results: _preset_or_ask(
                    ctx.app_description,
                    lambda: prompts.ask_text(
                        "Description (what does your tool do?)",
                        default=DEFAULT_DESCRIPTION,
                        validate=validate_description,
                    ),
                ),
                "app_summary": lambda results: _preset_or_ask(
                    ctx.app_summary,
                    lambda: prompts.ask_text(
                        "Summary (brief one-liner for app listing)",
                        default=DEFAULT_SUMMARY,
                    ),
                ),
                "tool_description": lambda results: _preset_or_ask(
                    ctx.tool_description,
                    lambda: prompts.ask_text(
                        "Tool description (what will Opal see?)",
                        default=DEFAULT_TOOL_DESCRIPTION,
                    ),
                ),
            }
        )
    except PromptCancelled:
        print_cancel()
        ctx.exit(0)

    ctx.app_id = _normalize_app_id(app_config["app_id"]) or ctx.project_name
    ctx.app_display_name = app_config["app_display_name"].strip()
    ctx.app_description = app_config["app_description"].strip()
    ctx.app_summary = app_config["app_summary"].strip() or DEFAULT_SUMMARY
    ctx.tool_description = app_config["tool_description"].strip() or DEFAULT_TOOL_DESCRIPTION

    print_step("Repository & Contact")
    try:
        repo_config = prompts.ask_group(
            {
                "github_username": lambda results: _preset_or_ask(
                    ctx.github_username,
                    lambda: prompts.ask_text(
                        "GitHub username (for repository URL)",
                        placeholder=DEFAULT_GITHUB_USERNAME,
                        validate=validate_github_username,
                    ),
                ),
                "repo_name": lambda results: _preset_or_ask(
                    ctx.repo_name,
                    lambda: prompts.ask_text("Repository name", default=ctx.app_id),
                ),
                "contact_email": lambda results: _preset_or_ask(
                    ctx.contact_email,
                    lambda: prompts.ask_text(
                        "Contact email (for support)",
                        default=git_user.email,
                        placeholder=DEFAULT_CONTACT_EMAIL,
                        validate=validate_contact_email,
                    ),
                ),
            }
        )
    except PromptCancelled:
        print_cancel()
        ctx.exit(0)

    ctx.github_username = repo_config["github_username"].strip() or DEFAULT_GITHUB_USERNAME
    ctx.repo_name = repo_config["repo_name"].strip() or ctx.app_id
    ctx.contact_email = repo_config["contact_email"].strip()

    if ctx.dry_run:
        print_dry_run("Collected app details")


# ---------------------------------------------------------------------------
# Field validators (return an error message, or None when valid)
# ---------------------------------------------------------------------------


def validate_app_id(value: str) -> str | None:
    if not to_valid_app_id(value):
        return "App ID is required"
    return None


def validate_display_name(value: str) -> str | None:
    if not value.strip():
        return "Display name is required"
    if len(value) > MAX_DISPLAY_NAME_LENGTH:
        return f"Display name should be {MAX_DISPLAY_NAME_LENGTH} characters or less"
    return None


def validate_description(value: str) -> str | None:
    if not value.strip():
        return "Description is required"
    return None


def validate_github_username(value: str) -> str | None:
    # optional
    if not value.strip():
        return None
    if not is_valid_github_username(value):
        return "Invalid GitHub username format"
    return None


def validate_contact_email(value: str) -> str | None:
    if not value.strip():
        return "Contact email is required"
    if not is_valid_email(value):
        return "Invalid email format"
    return None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _lookup_git_user(ctx: Context) -> GitIdentity:
    if ctx.dry_run:
        logger.debug("Dry run: skipping git identity lookup")
        return GitIdentity(name="", email="")
    return await get_git_user(timeout=ctx.settings.shell_timeout)


def _preset_or_ask(preset: str, ask: Callable[[], str]) -> str:
    """Use a value given on the command line, or fall back to prompting."""
    if preset:
        return preset
    return ask()


def _normalize_app_id(value: str) -> str:
    normalized = to_valid_app_id(value)
    if normalized != value.strip():
        print_warning(f"App ID normalized to: [bold]{normalized}[/bold]")
    return normalized


_PRESET_CHECKS = (
    ("app_id", "--app-id", validate_app_id),
    ("app_display_name", "--display-name", validate_display_name),
    ("app_description", "--description", validate_description),
    ("github_username", "--github-user", validate_github_username),
    ("contact_email", "--email", validate_contact_email),
)


def _discard_invalid_presets(ctx: Context) -> None:
    """Clear command line values that fail validation so they get a default."""
    for field, flag, validator in _PRESET_CHECKS:
        value = getattr(ctx, field)
        if not value:
            continue
        error = validator(value)
        if error is not None:
            print_warning(f"Ignoring {flag} {escape(repr(value))}: {error}")
            setattr(ctx, field, "")


def _apply_defaults(ctx: Context, git_user: GitIdentity) -> None:
    """Fill every unset field with its non-interactive default."""
    app_id = _normalize_app_id(ctx.app_id) if ctx.app_id else ""
    ctx.app_id = app_id or ctx.project_name or DEFAULT_APP_ID
    ctx.app_display_name = ctx.app_display_name.strip() or to_display_name(ctx.app_id)
    ctx.app_description = ctx.app_description.strip() or DEFAULT_DESCRIPTION
    ctx.app_summary = ctx.app_summary.strip() or DEFAULT_SUMMARY
    ctx.tool_description = ctx.tool_description.strip() or DEFAULT_TOOL_DESCRIPTION
    ctx.github_username = ctx.github_username.strip() or DEFAULT_GITHUB_USERNAME
    ctx.repo_name = ctx.repo_name.strip() or ctx.app_id
    ctx.contact_email = ctx.contact_email.strip() or git_user.email or DEFAULT_CONTACT_EMAIL
