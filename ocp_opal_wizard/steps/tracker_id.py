"""Tracker ID step: optional OCP deployment identifier."""

from __future__ import annotations

from rich.markup import escape

from .. import prompts
from ..context import Context
from ..errors import PromptCancelled
from ..utils import print_cancel, print_dry_run, print_info, print_step, print_warning
from ..validation import is_valid_tracker_id

PLACEHOLDER_TRACKER_ID = "YOUR_TRACKER_ID"


async def tracker_id(ctx: Context) -> None:
    if ctx.tracker_id:
        if is_valid_tracker_id(ctx.tracker_id):
            ctx.tracker_id = ctx.tracker_id.strip()
            return
        print_warning(f"Ignoring --tracker-id {escape(repr(ctx.tracker_id))}: {_INVALID_MESSAGE}")
        ctx.tracker_id = ""

    if ctx.yes:
        ctx.tracker_id = PLACEHOLDER_TRACKER_ID
        print_info("[dim]Tracker ID:[/dim] Using placeholder - update later in app.yml")
        return

    print_step("OCP Deployment Configuration")
    print_info("[dim]The Tracker ID is used when installing your app to an OCP account.[/dim]")

    try:
        answer = prompts.ask_text(
            "OCP Tracker ID (optional, can set later)",
            placeholder=PLACEHOLDER_TRACKER_ID,
            validate=validate_tracker_id,
        )
    except PromptCancelled:
        print_cancel()
        ctx.exit(0)

    ctx.tracker_id = answer.strip() or PLACEHOLDER_TRACKER_ID

    if ctx.dry_run:
        print_dry_run(f"Tracker ID: {escape(ctx.tracker_id)}")


_INVALID_MESSAGE = "Tracker ID should only contain letters, numbers, hyphens, and underscores"


def validate_tracker_id(value: str) -> str | None:
    if value.strip() and not is_valid_tracker_id(value):
        return _INVALID_MESSAGE
    return None
