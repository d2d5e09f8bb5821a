"""Jinja2 rendering for the wizard's own console text.

Help and next-steps text live as ``.j2`` files under ``messages/`` and may
contain Rich markup.  This renderer is unrelated to the project template,
which uses literal ``{{TOKEN}}`` substitution (see
:mod:`ocp_opal_wizard.scaffolder`).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_DEFAULT_MESSAGES_DIR = Path(__file__).parent / "messages"


class TemplateRenderer:
    """Renders message templates with a context dictionary."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_MESSAGES_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, context: dict[str, Any] | None = None) -> str:
        """Render ``template_name`` (relative to the messages directory)."""
        template = self.env.get_template(template_name)
        return template.render(**(context or {}))
