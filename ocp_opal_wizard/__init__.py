"""ocp-opal-wizard: scaffold Optimizely Connect Platform (OCP) Opal Tool projects.

The wizard parses the command line into a :class:`Context`, runs a fixed
sequence of interactive steps against it, copies the bundled template with
``{{TOKEN}}`` substitution and optionally initialises a git repository.
"""

from ocp_opal_wizard._version import __version__
from ocp_opal_wizard.context import Context, get_context
from ocp_opal_wizard.pipeline import Wizard, main

__all__ = [
    "Context",
    "Wizard",
    "__version__",
    "get_context",
    "main",
]
