"""Wizard driver and command line entry point.

Runs the fixed step sequence against one :class:`~ocp_opal_wizard.context.Context`:

1. intro         -- welcome banner
2. project-name  -- choose the target directory
3. app-details   -- OCP app configuration and contact details
4. tracker-id    -- optional deployment tracker ID
5. scaffold      -- copy the template with token substitution
6. dependencies  -- always leaves installation to the user
7. git           -- optional ``git init`` plus initial commit
8. next-steps    -- setup and deployment instructions

Usage::

    ocp-opal-wizard create my-tool
    ocp-opal-wizard create my-tool --yes --app-id my-app --tracker-id ABC123
    python -m ocp_opal_wizard create --dry-run
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
import traceback
from typing import Awaitable, Callable, Sequence

from rich.markup import escape

from ._version import __version__
from .context import Context, get_context
from .errors import UsageError, WizardExit
from .steps import (
    app_details,
    dependencies,
    git,
    intro,
    next_steps,
    project_name,
    scaffold,
    show_help,
    tracker_id,
)
from .utils import console, print_cancel, print_error, setup_logging

logger = logging.getLogger(__name__)

Step = Callable[[Context], Awaitable[None]]

# Order matters: dependencies runs before git so an install would be part of
# the initial commit.
STEPS: list[tuple[str, Step]] = [
    ("intro", intro),
    ("project-name", project_name),
    ("app-details", app_details),
    ("tracker-id", tracker_id),
    ("scaffold", scaffold),
    ("dependencies", dependencies),
    ("git", git),
    ("next-steps", next_steps),
]


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


class Wizard:
    """Runs each step in turn and turns the outcome into an exit code.

    Attributes:
        ctx: The shared context every step reads and writes.
        steps: ``(name, coroutine function)`` pairs, in execution order.
    """

    def __init__(self, ctx: Context, steps: Sequence[tuple[str, Step]] | None = None) -> None:
        self.ctx = ctx
        self.steps = list(steps if steps is not None else STEPS)

    async def run(self) -> int:
        """Execute every step.

        Returns:
            ``0`` when all steps finish, the code passed to ``ctx.exit`` when a
            step stops early, and ``1`` for any other error.
        """
        for name, step in self.steps:
            logger.debug("Running step %s", name)
            try:
                await step(self.ctx)
            except WizardExit as exc:
                logger.debug("Step %s exited with code %d", name, exc.exit_code)
                return exc.exit_code
            except Exception as exc:
                print_cancel("An error occurred.")
                print_error(escape(str(exc)))
                if self.ctx.settings.debug:
                    console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
                return 1
        return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _raise_keyboard_interrupt(signum: int, frame: object) -> None:
    raise KeyboardInterrupt


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``ocp-opal-wizard``.

    Returns the process exit code: ``0`` on success or cancellation, ``1`` on
    a usage error or a failed step.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        ctx = get_context(argv)
    except UsageError as exc:
        print_error(escape(exc.message))
        return exc.exit_code

    if ctx.version:
        console.print(__version__, markup=False, highlight=False)
        return 0

    if ctx.help:
        show_help()
        return 0

    setup_logging(verbose=ctx.verbose, debug=ctx.settings.debug)
    previous_handler = signal.signal(signal.SIGTERM, _raise_keyboard_interrupt)

    try:
        return asyncio.run(Wizard(ctx).run())
    except KeyboardInterrupt:
        console.print()
        print_cancel()
        return 0
    finally:
        signal.signal(signal.SIGTERM, previous_handler)


if __name__ == "__main__":
    sys.exit(main())
