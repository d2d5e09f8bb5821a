"""Scaffold step: write the template into ``ctx.cwd``."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from ..context import Context
from ..scaffolder import ProjectScaffolder, TemplateTokens
from ..utils import console, print_dry_run, print_error, print_success, spinner


async def scaffold(ctx: Context, scaffolder: ProjectScaffolder | None = None) -> None:
    """Copy the template, or in dry-run mode list the token values instead.

    A :class:`~ocp_opal_wizard.errors.ScaffoldError` is not caught here; it
    ends the run with exit code 1.
    """
    scaffolder = scaffolder or ProjectScaffolder(ctx.settings.template_dir)
    tokens = TemplateTokens.from_context(ctx)
    target = Path(ctx.cwd).resolve()

    if ctx.dry_run:
        print_dry_run(f"Would scaffold to {escape(str(target))}")
        console.print("[dim]Token replacements:[/dim]")
        for token, value in tokens.as_mapping().items():
            console.print(f"[dim]  {escape(token)} → {escape(value)}[/dim]")
        return

    try:
        with spinner("Scaffolding project..."):
            await scaffolder.scaffold(target, tokens)
    except Exception:
        print_error("Failed to scaffold project")
        raise

    print_success("Project scaffolded!")
