"""Jinja2 templates for CLI text output."""

from .context import ContextBuilder
from .loader import TemplateLoader
from .renderer import TemplateRenderer

__all__ = ["ContextBuilder", "TemplateLoader", "TemplateRenderer"]
