"""Render parameter descriptions from Jinja2 templates."""

from __future__ import annotations

from typing import Dict, Optional, Type

from jinja2 import TemplateError as JinjaTemplateError
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import TemplateError, ValidationError
from .context import DescribeContext

DESCRIBE_TEMPLATE = "text/describe.j2"


class TemplateRenderer:
    """Render templates, validating the context against a model first."""

    def __init__(self, loader):
        self.loader = loader

    def render(
        self,
        template_name: str,
        context: Dict,
        schema: Optional[Type[BaseModel]] = None,
    ) -> str:
        """Render a template to a string."""
        if schema:
            try:
                schema(**context)
            except PydanticValidationError as exc:
                raise ValidationError(f"Bad context for {template_name}: {exc}") from exc

        template = self.loader.load(template_name)
        try:
            return template.render(**context)
        except JinjaTemplateError as exc:
            raise TemplateError(f"{template_name}: {exc}") from exc

    def render_describe(self, context: Dict) -> str:
        """Render the parameter description listing used by describe-param."""
        return self.render(DESCRIBE_TEMPLATE, context, schema=DescribeContext)
