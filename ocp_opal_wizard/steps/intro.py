"""Intro step: welcome banner."""

from __future__ import annotations

from .._version import __version__
from ..context import PROG, Context
from ..utils import console, print_info


async def intro(ctx: Context) -> None:
    console.print()
    console.print(
        f"[black on cyan] {PROG} [/black on cyan] [dim]v{__version__}[/dim]"
    )
    print_info("[cyan]Welcome![/cyan] Let's create your [bold]OCP Opal Tool[/bold] project.")
    print_info(
        "[dim]Build tools hosted on Optimizely Connect Platform (OCP) "
        "that extend Opal's capabilities.[/dim]"
    )
