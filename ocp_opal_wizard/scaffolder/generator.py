"""Copy the bundled OCP Opal Tool template into a target directory.

Every file in :data:`TEMPLATE_FILES` is read as text, has its ``{{TOKEN}}``
placeholders replaced with values from :class:`TemplateTokens`, and is
written to the same relative path under the target directory.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import BaseModel

from ..context import Context
from ..errors import ScaffoldError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"

# ---------------------------------------------------------------------------
# Manifest (relative to the template directory)
# ---------------------------------------------------------------------------

TEMPLATE_FILES: tuple[str, ...] = (
    "app.yml",
    "package.json",
    "tsconfig.json",
    ".gitignore",
    "README.md",
    "AGENTS.md",
    "src/index.ts",
    "src/functions/OpalToolFunction.ts",
    "src/lifecycle/Lifecycle.ts",
    "forms/settings.yml",
    "assets/icon.svg",
    "assets/logo.svg",
    "assets/directory/overview.md",
)


# ---------------------------------------------------------------------------
# Token model
# ---------------------------------------------------------------------------


class TemplateTokens(BaseModel):
    """Values substituted for the nine ``{{TOKEN}}`` placeholders."""

    app_id: str
    app_display_name: str
    app_description: str
    app_summary: str
    tracker_id: str
    github_username: str
    repo_name: str
    contact_email: str
    tool_description: str

    @classmethod
    def from_context(cls, ctx: Context) -> TemplateTokens:
        return cls(
            app_id=ctx.app_id,
            app_display_name=ctx.app_display_name,
            app_description=ctx.app_description,
            app_summary=ctx.app_summary,
            tracker_id=ctx.tracker_id,
            github_username=ctx.github_username,
            repo_name=ctx.repo_name,
            contact_email=ctx.contact_email,
            tool_description=ctx.tool_description,
        )

    def as_mapping(self) -> dict[str, str]:
        """Return ``{"{{APP_ID}}": "...", ...}`` in declaration order."""
        return {
            "{{" + field.upper() + "}}": value
            for field, value in self.model_dump().items()
        }


def replace_tokens(content: str, mapping: dict[str, str]) -> str:
    """Replace every literal occurrence of each placeholder in *content*.

    Values are inserted verbatim; unrecognised ``{{...}}`` text is left alone.
    """
    for token, value in mapping.items():
        content = content.replace(token, value)
    return content


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Copies the template manifest with token substitution."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR

    async def scaffold(self, target: str | Path, tokens: TemplateTokens) -> list[Path]:
        """Write the template into *target*.

        Args:
            target: Destination directory; created if missing.
            tokens: Placeholder values.

        Returns:
            Paths of the files written.

        Raises:
            ScaffoldError: If a file cannot be read or written.  Files
                already written are left in place.
        """
        target_dir = Path(target)
        mapping = tokens.as_mapping()
        written: list[Path] = []

        try:
            await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
            for relative in TEMPLATE_FILES:
                source = self.template_dir / relative
                if not source.is_file():
                    logger.debug("Template file %s not found, skipping", relative)
                    continue
                destination = target_dir / relative
                await asyncio.to_thread(_copy_with_tokens, source, destination, mapping)
                written.append(destination)
        except OSError as exc:
            raise ScaffoldError(f"Failed to scaffold {target_dir}: {exc}") from exc

        logger.info("Wrote %d files to %s", len(written), target_dir)
        return written


def _copy_with_tokens(source: Path, destination: Path, mapping: dict[str, str]) -> None:
    content = source.read_text(encoding="utf-8")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(replace_tokens(content, mapping), encoding="utf-8")
