"""Usage text printed for ``-h`` / ``--help``."""

from __future__ import annotations

from ..context import PROG
from ..package_manager import PackageManager, get_exec_command
from ..templates import TemplateRenderer
from ..utils import console

DOCS_URL = "https://docs.developers.optimizely.com/"
REPO_URL = "https://github.com/kunalshetye/opal-ocp-template"


def show_help(renderer: TemplateRenderer | None = None) -> None:
    """Render and print the usage text."""
    renderer = renderer or TemplateRenderer()
    console.print(
        renderer.render(
            "help.txt.j2",
            {
                "prog": PROG,
                "exec_command": get_exec_command(PackageManager.NPM),
                "docs_url": DOCS_URL,
                "repo_url": REPO_URL,
            },
        )
    )
