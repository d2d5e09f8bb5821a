"""Detect the package manager that launched the wizard.

npm-compatible tools export ``npm_config_user_agent`` (for example
``yarn/1.22.19 npm/? node/v18.17.0 darwin arm64``); the first token names the
invoking tool.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Mapping


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
    CNPM = "cnpm"


_USER_AGENT_NAMES: dict[str, PackageManager] = {
    "yarn": PackageManager.YARN,
    "pnpm": PackageManager.PNPM,
    "bun": PackageManager.BUN,
    "npminstall": PackageManager.CNPM,
}

_RUN_COMMANDS: dict[PackageManager, str] = {
    PackageManager.YARN: "yarn",
    PackageManager.PNPM: "pnpm",
    PackageManager.BUN: "bun run",
}

_INSTALL_COMMANDS: dict[PackageManager, str] = {
    PackageManager.YARN: "yarn",
    PackageManager.PNPM: "pnpm install",
    PackageManager.BUN: "bun install",
}

_EXEC_COMMANDS: dict[PackageManager, str] = {
    PackageManager.YARN: "yarn dlx",
    PackageManager.PNPM: "pnpm dlx",
    PackageManager.BUN: "bunx",
}


def detect_package_manager(env: Mapping[str, str] | None = None) -> PackageManager:
    """Classify the invoking tool from ``npm_config_user_agent``.

    Falls back to npm when the variable is missing or unrecognised.
    """
    environ = os.environ if env is None else env
    user_agent = environ.get("npm_config_user_agent")
    if not user_agent:
        return PackageManager.NPM

    specifier = user_agent.split(" ")[0]
    name = specifier.rpartition("/")[0]
    return _USER_AGENT_NAMES.get(name, PackageManager.NPM)


def get_run_command(pm: PackageManager | str) -> str:
    """Command prefix used to run a ``package.json`` script."""
    return _RUN_COMMANDS.get(PackageManager(pm), "npm run")


def get_install_command(pm: PackageManager | str) -> str:
    """Command used to install a project's dependencies."""
    return _INSTALL_COMMANDS.get(PackageManager(pm), "npm install")


def get_exec_command(pm: PackageManager | str) -> str:
    """Command prefix used to execute a package binary (``npx`` and friends)."""
    return _EXEC_COMMANDS.get(PackageManager(pm), "npx")
