"""Command line parsing and the shared wizard context.

``get_context`` turns raw arguments into a :class:`Context`; every step of the
pipeline then reads and writes fields on that single object.
"""

from __future__ import annotations

import argparse
from typing import NoReturn, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import Settings
from .errors import UsageError, WizardExit
from .package_manager import PackageManager, detect_package_manager

PROG = "ocp-opal-wizard"


class Context(BaseModel):
    """State threaded through every wizard step.

    ``install`` and ``git`` are tri-state: ``None`` means the user has not
    decided yet.  OCP string fields use ``""`` for "unset".
    """

    model_config = ConfigDict(validate_assignment=True)

    help: bool = False
    version: bool = False
    verbose: bool = False

    cwd: str = ""
    project_name: str = ""
    package_manager: PackageManager = PackageManager.NPM
    yes: bool = False
    dry_run: bool = False
    install: bool | None = None
    git: bool | None = None

    # OCP app configuration
    app_id: str = ""
    app_display_name: str = ""
    app_description: str = ""
    app_summary: str = ""
    tool_description: str = ""
    tracker_id: str = ""
    github_username: str = ""
    repo_name: str = ""
    contact_email: str = ""

    settings: Settings = Field(default_factory=Settings)

    def exit(self, code: int = 0) -> NoReturn:
        """Stop the wizard.  Never returns."""
        raise WizardExit(code)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, exit_code=1)


def build_parser() -> argparse.ArgumentParser:
    """Build the option parser for ``ocp-opal-wizard create [directory]``.

    Only options are declared here; the ``create`` command and the directory
    are picked out of the remaining tokens by :func:`_split_positionals`.
    Usage text is rendered by the help step, so argparse's own help is off.
    """
    parser = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("-y", "--yes", action="store_true")
    parser.add_argument("-n", "--no", action="store_true")
    parser.add_argument("--install", action="store_const", const=True, default=None)
    parser.add_argument("--no-install", action="store_true")
    parser.add_argument("--git", action="store_const", const=True, default=None)
    parser.add_argument("--no-git", action="store_true")
    parser.add_argument("--dry-run", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--app-id", default="")
    parser.add_argument("--display-name", default="")
    parser.add_argument("--description", default="")
    parser.add_argument("--summary", default="")
    parser.add_argument("--tracker-id", default="")
    parser.add_argument("--email", default="")
    parser.add_argument("--github-user", default="")
    return parser


def _split_positionals(extras: list[str]) -> tuple[str | None, str]:
    """Return ``(command, directory)`` from the tokens argparse left over."""
    unknown = [token for token in extras if token.startswith("-")]
    if unknown:
        raise UsageError(f"Unknown argument(s): {', '.join(unknown)}")

    if not extras:
        return None, ""

    command, *rest = extras
    if command != "create":
        raise UsageError(f"Unknown command: {command}. Try: {PROG} create")
    if len(rest) > 1:
        raise UsageError(f"Unexpected argument(s): {' '.join(rest[1:])}")
    return command, rest[0] if rest else ""


def get_context(argv: Sequence[str], settings: Settings | None = None) -> Context:
    """Parse *argv* (without the program name) into a :class:`Context`.

    Flag precedence is applied in a fixed order so the position of flags on
    the command line never matters:

    1. ``--install`` / ``--git`` set the baseline (absent means undecided).
    2. ``--no`` turns off ``--yes`` and defaults undecided install/git to off.
    3. ``--no-install`` always wins for install.
    4. ``--no-git`` always wins for git.

    Raises:
        UsageError: On unknown flags, a missing or unknown command, or
            invalid environment settings.
    """
    args, extras = build_parser().parse_known_args([arg for arg in argv if arg != "--"])

    if args.help or args.version:
        return Context(help=args.help, version=args.version)

    command, directory = _split_positionals(extras)
    if command is None:
        raise UsageError(f"You need to specify a command. Try: {PROG} create")

    if settings is None:
        try:
            settings = Settings.from_env()
        except ValidationError as exc:
            raise UsageError(f"Invalid environment settings: {exc}") from exc

    yes: bool = args.yes
    install: bool | None = args.install
    git: bool | None = args.git

    if args.no:
        yes = False
        install = False if install is None else install
        git = False if git is None else git

    if args.no_install:
        install = False

    if args.no_git:
        git = False

    return Context(
        verbose=args.verbose,
        cwd=directory,
        package_manager=detect_package_manager(),
        yes=yes,
        dry_run=args.dry_run,
        install=install,
        git=git,
        app_id=args.app_id or "",
        app_display_name=args.display_name or "",
        app_description=args.description or "",
        app_summary=args.summary or "",
        tracker_id=args.tracker_id or "",
        github_username=args.github_user or "",
        contact_email=args.email or "",
        settings=settings,
    )
