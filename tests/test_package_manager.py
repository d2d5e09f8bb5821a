"""Unit tests for package manager detection (ocp_opal_wizard.package_manager)."""

from __future__ import annotations

import pytest

from ocp_opal_wizard.package_manager import (
    PackageManager,
    detect_package_manager,
    get_exec_command,
    get_install_command,
    get_run_command,
)


class TestDetectPackageManager:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "user_agent, expected",
        [
            ("yarn/1.22.19 npm/? node/v18.17.0 darwin arm64", PackageManager.YARN),
            ("pnpm/8.6.0 npm/? node/v20.5.0 linux x64", PackageManager.PNPM),
            ("bun/1.0.0 npm/? node/v21.0.0 linux x64", PackageManager.BUN),
            ("npminstall/7.0.0 npm/? node/v18.0.0 linux x64", PackageManager.CNPM),
            ("npm/10.2.0 node/v20.9.0 darwin arm64 workspaces/false", PackageManager.NPM),
        ],
    )
    def test_user_agents(self, user_agent: str, expected: PackageManager):
        assert detect_package_manager({"npm_config_user_agent": user_agent}) is expected

    @pytest.mark.unit
    def test_missing_variable_falls_back_to_npm(self):
        assert detect_package_manager({}) is PackageManager.NPM

    @pytest.mark.unit
    def test_unknown_tool_falls_back_to_npm(self):
        env = {"npm_config_user_agent": "deno/1.40 node/v20"}
        assert detect_package_manager(env) is PackageManager.NPM

    @pytest.mark.unit
    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("npm_config_user_agent", "pnpm/9.0.0 npm/? node/v20")
        assert detect_package_manager() is PackageManager.PNPM


class TestCommandMapping:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "pm, run, install, exec_",
        [
            (PackageManager.NPM, "npm run", "npm install", "npx"),
            (PackageManager.YARN, "yarn", "yarn", "yarn dlx"),
            (PackageManager.PNPM, "pnpm", "pnpm install", "pnpm dlx"),
            (PackageManager.BUN, "bun run", "bun install", "bunx"),
            (PackageManager.CNPM, "npm run", "npm install", "npx"),
        ],
    )
    def test_commands(self, pm: PackageManager, run: str, install: str, exec_: str):
        assert get_run_command(pm) == run
        assert get_install_command(pm) == install
        assert get_exec_command(pm) == exec_

    @pytest.mark.unit
    def test_accepts_plain_strings(self):
        assert get_exec_command("bun") == "bunx"
