"""Next steps: OCP CLI setup notes and the closing instructions."""

from __future__ import annotations

import os
from pathlib import Path

from rich.markup import escape

from ..context import Context
from ..templates import TemplateRenderer
from ..utils import console, print_note
from .help import DOCS_URL, REPO_URL
from .tracker_id import PLACEHOLDER_TRACKER_ID

SETUP_DOCS_URL = (
    "https://docs.developers.optimizely.com/optimizely-connect-platform/docs/"
    "configure-your-development-environment-ocp2"
)
ISSUES_URL = f"{REPO_URL}/issues"


async def next_steps(ctx: Context, renderer: TemplateRenderer | None = None) -> None:
    renderer = renderer or TemplateRenderer()

    print_note(
        renderer.render("cli_setup.txt.j2", {"setup_docs_url": SETUP_DOCS_URL}),
        title="OCP CLI Setup",
    )
    print_note(
        renderer.render(
            "next_steps.txt.j2",
            {
                "display_name": escape(ctx.app_display_name),
                "project_dir": escape(project_dir(ctx.cwd)),
                "tracker_id": install_tracker_id(ctx.tracker_id),
                "git_initialized": bool(ctx.git),
                "package_manager": ctx.package_manager.value,
                "docs_url": DOCS_URL,
            },
        ),
        title="Success!",
        border_style="green",
    )
    console.print(f"[dim]Problems?[/dim] [underline cyan]{ISSUES_URL}[/underline cyan]")
    console.print()


def project_dir(cwd: str) -> str:
    """Path to ``cd`` into, relative to the current directory when possible."""
    if not cwd or cwd in (".", "./"):
        return "."
    target = Path(cwd).resolve()
    try:
        relative = os.path.relpath(target, Path.cwd())
    except ValueError:
        return str(target)
    if relative.startswith(".."):
        return str(target)
    return relative


def install_tracker_id(tracker_id: str) -> str:
    """Tracker ID for the ``ocp directory install`` hint, or ``<TRACKER_ID>`` if unset."""
    if not tracker_id or tracker_id == PLACEHOLDER_TRACKER_ID:
        return "<TRACKER_ID>"
    return escape(tracker_id)
