"""Render templates into generated source text.

Helpers are collected into an immutable HelperSet once per run and
installed as Jinja2 filters on the renderer's environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping

import jinja2

from . import naming, type_mapping

TEMPLATE_DIR = Path(__file__).parent / "templates"

SCHEMA_TEMPLATE = "schema.ts.j2"
ROUTES_TEMPLATE = "routes.ts.j2"
HANDLERS_TEMPLATE = "handlers.ts.j2"


@dataclass(frozen=True)
class HelperSet:
    """Named template helpers, installed as filters."""

    filters: Mapping[str, Callable[..., Any]]


def default_helpers() -> HelperSet:
    """The helper set used by every generated file."""
    return HelperSet(
        MappingProxyType(
            {
                "camel_case": naming.camel_case,
                "pascal_case": naming.pascal_case,
                "snake_case": naming.snake_case,
                "lowercase": naming.lowercase,
                # Replaces jinja's builtin, which lower-cases the tail
                "capitalize": naming.capitalize,
                "ts_identifier": naming.ts_identifier,
                "property_key": naming.property_key,
                "destructure_binding": naming.destructure_binding,
                "drizzle_type": type_mapping.drizzle_type,
                "zod_type": type_mapping.zod_type,
                "status_code_constant": type_mapping.status_code_constant,
                "status_code_key": type_mapping.status_code_key,
            }
        )
    )


class TemplateRenderer:
    """Jinja2 environment bound to one HelperSet."""

    def __init__(self, helpers: HelperSet, template_dir: Path = TEMPLATE_DIR):
        self.helpers = helpers
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(helpers.filters)

    def render(self, body: str, context: dict[str, Any]) -> str:
        """Render a template body given as a string."""
        return self.env.from_string(body).render(**context)

    def render_template(self, name: str, context: dict[str, Any]) -> str:
        """Render a template from the template directory."""
        return self.env.get_template(name).render(**context)
