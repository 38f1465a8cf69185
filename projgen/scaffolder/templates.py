"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``projgen/scaffolder/templates/`` directory and renders them with
project-specific context data.  Output is kept in memory; writing to disk is
the emitter's job.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Autoescaping is off: the project name is embedded
    verbatim, exactly as the user typed it.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"vanilla/index.html.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_tree(
        self,
        template_prefix: str,
        context: dict[str, Any],
    ) -> dict[str, str]:
        """Render every ``*.j2`` file under *template_prefix*.

        Returns:
            Mapping of output path (relative to the prefix, ``.j2`` stripped)
            to rendered content, e.g. ``{"index.html": "<!DOCTYPE html>..."}``.
        """
        prefix_path = self.template_dir / template_prefix
        if not prefix_path.is_dir():
            return {}

        rendered: dict[str, str] = {}
        for template_file in sorted(prefix_path.rglob("*.j2")):
            rel = template_file.relative_to(prefix_path).as_posix()
            output_name = rel[: -len(".j2")]
            rendered[output_name] = self.render(f"{template_prefix}/{rel}", context)
        return rendered

