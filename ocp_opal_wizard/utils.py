"""Shared utility functions for the wizard.

Provides async command execution, host tool lookups, git identity lookup,
Rich-based console output and logging setup.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NamedTuple

from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.panel import Panel
from rich.spinner import Spinner

from .config import DEFAULT_SHELL_TIMEOUT, ENV_PREFIX, TRUTHY_VALUES

console = Console()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float = DEFAULT_SHELL_TIMEOUT,
) -> tuple[int, str, str]:
    """Run a command asynchronously and collect its output.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A process that cannot be
        spawned reports ``1`` and a process killed on timeout reports ``-1``.
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", cmd[0], exc)
        return (1, "", str(exc))

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    returncode = process.returncode or 0
    logger.debug("%s exited with %d", cmd[0], returncode)
    return (returncode, stdout_str, stderr_str)


def command_exists(command: str) -> bool:
    """Return ``True`` if *command* resolves to an executable on ``PATH``."""
    return shutil.which(command) is not None


class GitIdentity(NamedTuple):
    name: str
    email: str


async def get_git_user(timeout: float = DEFAULT_SHELL_TIMEOUT) -> GitIdentity:
    """Read ``user.name`` and ``user.email`` from the git configuration.

    Both lookups run concurrently.  Missing values (or a missing git binary)
    come back as empty strings.
    """
    (name_code, name, _), (email_code, email, _) = await asyncio.gather(
        run_command(["git", "config", "user.name"], timeout=timeout),
        run_command(["git", "config", "user.email"], timeout=timeout),
    )
    return GitIdentity(
        name=name if name_code == 0 else "",
        email=email if email_code == 0 else "",
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]![/bold yellow] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]i[/blue] {message}")


def print_step(title: str) -> None:
    """Print a section heading inside a step."""
    console.print()
    console.print(f"[bold cyan]◆ {title}[/bold cyan]")


def print_dry_run(message: str) -> None:
    console.print(f"[dim]\\[dry-run] {message}[/dim]")


def print_cancel(message: str = "Operation cancelled.") -> None:
    console.print(f"[red]■[/red] {message}")


def print_note(body: str, title: str, border_style: str = "cyan") -> None:
    """Print *body* inside a titled panel."""
    console.print(
        Panel(
            body.rstrip("\n"),
            title=f"[bold]{title}[/bold]",
            title_align="left",
            border_style=border_style,
            expand=False,
        )
    )


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a transient spinner while the body runs."""
    with Live(
        Spinner("dots", text=message),
        console=console,
        refresh_per_second=8,
        transient=True,
    ):
        yield


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(verbose: bool = False, debug: bool | None = None) -> None:
    """Configure the ``ocp_opal_wizard`` logger.

    Log levels:
    - Normal: only warnings/errors
    - Verbose (``--verbose``): INFO
    - Debug (``OCP_OPAL_WIZARD_DEBUG=1``): DEBUG, with source locations
    """
    if debug is None:
        debug = os.environ.get(f"{ENV_PREFIX}DEBUG", "").strip().lower() in TRUTHY_VALUES

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose or debug,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("ocp_opal_wizard")
    package_logger.setLevel(level)
    package_logger.handlers = [handler]
    package_logger.propagate = False
