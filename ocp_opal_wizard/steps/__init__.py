"""Wizard steps, one module each.

Every step is ``async def step(ctx: Context) -> None``.  A step reads the
fields earlier steps wrote, writes its own, and ends the run early only
through ``ctx.exit``.
"""

from ocp_opal_wizard.steps.app_details import app_details
from ocp_opal_wizard.steps.dependencies import dependencies
from ocp_opal_wizard.steps.git import git
from ocp_opal_wizard.steps.help import show_help
from ocp_opal_wizard.steps.intro import intro
from ocp_opal_wizard.steps.next_steps import next_steps
from ocp_opal_wizard.steps.project_name import project_name
from ocp_opal_wizard.steps.scaffold import scaffold
from ocp_opal_wizard.steps.tracker_id import tracker_id

__all__ = [
    "app_details",
    "dependencies",
    "git",
    "intro",
    "next_steps",
    "project_name",
    "scaffold",
    "show_help",
    "tracker_id",
]
