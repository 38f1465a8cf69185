"""projgen scaffolder -- renders and writes the local project recipes.

Quick usage::

    from projgen.scaffolder import TemplateEmitter, TemplateRenderer

    renderer = TemplateRenderer()
    files = renderer.render_tree("vanilla", {"project_name": "site"})
    await TemplateEmitter().emit(Path.cwd() / "site", files)
"""

from projgen.scaffolder.emitter import FilesystemError, TemplateEmitter
from projgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "FilesystemError",
    "TemplateEmitter",
    "TemplateRenderer",
]
