"""Dependencies step.

OCP builds require Yarn 1.x (Classic), which cannot be guaranteed when the
wizard runs under another package manager, so installation is always left to
the user.  The step still runs after scaffold and before git so that a future
install would land in the initial commit.
"""

from __future__ import annotations

from ..context import Context
from ..utils import print_info


async def dependencies(ctx: Context) -> None:
    if ctx.install:
        print_info("Skipping dependency install: OCP requires Yarn 1.x, run [bold]yarn install[/bold] yourself.")
    ctx.install = False
