"""Project scaffolder: bundled OCP Opal Tool template plus token substitution.

Quick usage::

    from ocp_opal_wizard.scaffolder import ProjectScaffolder, TemplateTokens

    tokens = TemplateTokens.from_context(ctx)
    written = await ProjectScaffolder().scaffold("./my-tool", tokens)
"""

from ocp_opal_wizard.scaffolder.generator import (
    TEMPLATE_FILES,
    ProjectScaffolder,
    TemplateTokens,
    replace_tokens,
)

__all__ = [
    "TEMPLATE_FILES",
    "ProjectScaffolder",
    "TemplateTokens",
    "replace_tokens",
]
