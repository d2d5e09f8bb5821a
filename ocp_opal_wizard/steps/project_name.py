"""Project name step: choose the target directory."""

from __future__ import annotations

import random
from pathlib import Path

from rich.markup import escape

from .. import prompts
from ..context import Context
from ..errors import PromptCancelled
from ..utils import print_cancel, print_dry_run, print_info, print_warning
from ..validation import has_non_printable_chars, is_empty, to_valid_app_id

DEFAULT_DIRECTORY = "./my-ocp-opal-tool"

_ADJECTIVES = ("smart", "fast", "clever", "bright", "swift", "agile")
_NOUNS = ("tool", "helper", "assistant", "agent", "bot", "service")


async def project_name(ctx: Context) -> None:
    """Resolve ``ctx.cwd`` and ``ctx.project_name``.

    A directory given on the command line is used as-is when it is empty.
    A non-empty one only produces a warning; the wizard then picks a fresh
    directory (random in ``--yes`` mode, prompted otherwise).
    """
    if ctx.cwd and is_empty(ctx.cwd):
        ctx.project_name = extract_project_name(ctx.cwd)
        print_info(f"[cyan]Directory:[/cyan] Using [bold]{escape(ctx.cwd)}[/bold] as project directory")
        return

    if ctx.cwd:
        print_warning(f'[yellow]"{escape(ctx.cwd)}"[/yellow] is not empty!')

    if ctx.yes:
        ctx.project_name = generate_project_name()
        ctx.cwd = f"./{ctx.project_name}"
        print_info(f"[cyan]Directory:[/cyan] Creating project at [bold]{escape(ctx.cwd)}[/bold]")
        return

    try:
        answer = prompts.ask_text(
            "Where should we create your OCP Opal Tool?",
            default=DEFAULT_DIRECTORY,
            validate=_validate_directory,
        )
    except PromptCancelled:
        print_cancel()
        ctx.exit(0)

    ctx.cwd = answer.strip()
    ctx.project_name = extract_project_name(ctx.cwd)

    if ctx.dry_run:
        print_dry_run(f"Would create project at {escape(ctx.cwd)}")


def _validate_directory(value: str) -> str | None:
    if not value.strip():
        return "Please enter a directory name"
    if has_non_printable_chars(value):
        return "Invalid characters in directory name"
    if not is_empty(value.strip()):
        return "Directory is not empty!"
    return None


def extract_project_name(cwd: str) -> str:
    """Derive a normalised project name from the last path segment.

    ``.`` and ``./`` refer to the current working directory.
    """
    if cwd in (".", "./"):
        name = Path.cwd().name
    else:
        name = Path(cwd).name
    return to_valid_app_id(name)


def generate_project_name() -> str:
    """Return a random name like ``ocp-opal-swift-agent-42``."""
    adjective = random.choice(_ADJECTIVES)
    noun = random.choice(_NOUNS)
    return f"ocp-opal-{adjective}-{noun}-{random.randint(0, 999)}"
