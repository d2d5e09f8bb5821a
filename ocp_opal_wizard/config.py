"""Runtime settings for the wizard.

Settings are a Pydantic v2 model so values coming from the environment are
validated at construction time.  They hold knobs that are not part of the
command line surface: subprocess timeout, template override and debug mode.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, Field

DEFAULT_SHELL_TIMEOUT = 30.0

ENV_PREFIX = "OCP_OPAL_WIZARD_"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    """Environment-driven settings shared by every step."""

    shell_timeout: float = Field(
        default=DEFAULT_SHELL_TIMEOUT,
        gt=0,
        description="Seconds before a child process is killed",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Use this directory instead of the bundled project template",
    )
    debug: bool = Field(default=False, description="Enable DEBUG logging")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            OCP_OPAL_WIZARD_SHELL_TIMEOUT, OCP_OPAL_WIZARD_TEMPLATE_DIR,
            OCP_OPAL_WIZARD_DEBUG.
        """
        environ = os.environ if env is None else env
        kwargs: dict[str, Any] = {}
        if environ.get(f"{ENV_PREFIX}SHELL_TIMEOUT"):
            kwargs["shell_timeout"] = environ[f"{ENV_PREFIX}SHELL_TIMEOUT"]
        if environ.get(f"{ENV_PREFIX}TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(environ[f"{ENV_PREFIX}TEMPLATE_DIR"])
        if environ.get(f"{ENV_PREFIX}DEBUG"):
            kwargs["debug"] = environ[f"{ENV_PREFIX}DEBUG"].strip().lower() in TRUTHY_VALUES
        return cls(**kwargs)
