"""Git step: optionally initialise a repository with an initial commit."""

from __future__ import annotations

import logging

from .. import prompts
from ..context import Context
from ..errors import GitError, PromptCancelled
from ..utils import (
    command_exists,
    print_cancel,
    print_dry_run,
    print_error,
    print_success,
    print_warning,
    run_command,
    spinner,
)

logger = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "Initial commit from create-ocp-opal-tool"


async def git(ctx: Context) -> None:
    """Decide whether to initialise git, then do it.

    A ``--git``/``--no-git`` decision is honoured without prompting; ``--yes``
    defaults to initialising.  Git failures are reported as a warning and the
    wizard carries on.
    """
    if not command_exists("git"):
        print_warning("Git is not installed. Skipping repository initialization.")
        ctx.git = False
        return

    if ctx.git is None:
        if ctx.yes:
            ctx.git = True
        else:
            try:
                ctx.git = prompts.ask_confirm("Initialize a git repository?", default=True)
            except PromptCancelled:
                print_cancel()
                ctx.exit(0)

    if ctx.git:
        await _init_git(ctx)


async def _init_git(ctx: Context) -> None:
    if ctx.dry_run:
        print_dry_run("Would initialize git repository")
        return

    try:
        with spinner("Initializing git repository..."):
            for args in (
                ["init"],
                ["add", "-A"],
                ["commit", "-m", INITIAL_COMMIT_MESSAGE],
            ):
                await _git(args, ctx)
    except GitError as exc:
        logger.info("%s", exc)
        print_error("Failed to initialize git repository")
        print_warning("Git initialization failed. You can initialize it manually later.")
        return

    print_success("Git repository initialized!")


async def _git(args: list[str], ctx: Context) -> str:
    cmd = ["git", *args]
    returncode, stdout, stderr = await run_command(
        cmd, cwd=ctx.cwd, timeout=ctx.settings.shell_timeout
    )
    if returncode != 0:
        raise GitError(cmd, returncode, stderr)
    return stdout
