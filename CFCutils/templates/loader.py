"""Jinja2 template loader."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from ..exceptions import TemplateError
from ..settings import get_template_dir

PACKAGE_TEMPLATE_DIR = str(Path(__file__).parent)


class TemplateLoader:
    """Loads templates from an optional override directory, then the package.

    A file in the override directory (argument or CFC_TEMPLATE_DIR) with the
    same relative name as a packaged template replaces it.
    """

    def __init__(self, template_dir: str | None = None):
        search_path: List[str] = []
        override = template_dir or get_template_dir()
        if override:
            search_path.append(override)
        search_path.append(PACKAGE_TEMPLATE_DIR)
        self.search_path = search_path
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def load(self, template_name: str):
        """Return a compiled template by name."""
        try:
            return self.env.get_template(template_name)
        except TemplateNotFound as exc:
            raise TemplateError(
                f"Template not found: {template_name} (searched {', '.join(self.search_path)})"
            ) from exc
