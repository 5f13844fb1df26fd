"""Jinja2 template rendering for the support files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``clean_scaffold/scaffolder/templates/`` directory and renders them with
project-specific context data.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the generated solution.

    Templates are plain-text ``.j2`` files; the rendered output must match
    them byte for byte apart from the substituted variables, so trailing
    newlines are preserved and undefined variables are an error.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"Dockerfile.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist. Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write content with Unix line endings."""
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)
