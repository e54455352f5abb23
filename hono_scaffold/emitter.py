"""Scaffold a Hono application from an OpenAPI spec.

Sequence for one run:
  validate inputs -> load + normalize -> copy app template tree
  -> render db schema -> per tag: render routes, render handlers

Every file goes through a writer callable. Files already written are
left in place when a later step fails.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from .codegen import (
    HANDLERS_TEMPLATE,
    ROUTES_TEMPLATE,
    SCHEMA_TEMPLATE,
    TEMPLATE_DIR,
    TemplateRenderer,
    default_helpers,
)
from .context_builder import (
    build_app_context,
    build_handlers_context,
    build_routes_context,
    build_schema_context,
    check_tag_names,
    partition_by_tag,
)
from .errors import MissingInputError
from .models import ParsedSpec
from .naming import file_stem, validate_app_name
from .normalizer import parse_spec

logger = logging.getLogger(__name__)

APP_TEMPLATE_DIR = TEMPLATE_DIR / "app"
TEMPLATE_SUFFIX = ".j2"

SCHEMA_FILE = Path("src") / "db" / "schema.ts"
ROUTES_DIR = Path("src") / "routes"

Writer = Callable[[Path, str], None]


class ScaffoldOptions(BaseModel):
    """Inputs for one scaffolding run."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    spec_path: Path
    cors: bool = False
    auth: bool = False


def write_file(path: Path, content: str) -> None:
    """Write content to a file, creating parent dirs as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def routes_file(tag: str) -> Path:
    return ROUTES_DIR / f"{file_stem(tag)}.routes.ts"


def handlers_file(tag: str) -> Path:
    return ROUTES_DIR / f"{file_stem(tag)}.handlers.ts"


def emit(
    spec: ParsedSpec,
    target: Path,
    renderer: TemplateRenderer,
    writer: Writer = write_file,
) -> list[Path]:
    """Render and write the schema file and per-tag routes/handlers files."""
    if not spec.endpoints:
        raise MissingInputError("No endpoints found in OpenAPI spec")
    groups = partition_by_tag(spec.endpoints)
    check_tag_names(list(groups))

    written: list[Path] = []

    def _write(relative: Path, content: str) -> None:
        destination = target / relative
        writer(destination, content)
        logger.info("Wrote %s", destination)
        written.append(destination)

    _write(
        SCHEMA_FILE,
        renderer.render_template(SCHEMA_TEMPLATE, build_schema_context(spec)),
    )

    for tag, endpoints in groups.items():
        _write(
            routes_file(tag),
            renderer.render_template(
                ROUTES_TEMPLATE, build_routes_context(spec, tag, endpoints),
            ),
        )
        _write(
            handlers_file(tag),
            renderer.render_template(
                HANDLERS_TEMPLATE, build_handlers_context(tag, endpoints),
            ),
        )

    return written


def copy_app_template(
    target: Path,
    renderer: TemplateRenderer,
    context: dict[str, Any],
    writer: Writer = write_file,
) -> list[Path]:
    """Copy the static app tree, rendering ``.j2`` files on the way."""
    written: list[Path] = []
    for src in sorted(APP_TEMPLATE_DIR.rglob("*")):
        if not src.is_file():
            continue
        relative = src.relative_to(APP_TEMPLATE_DIR)
        if src.name.endswith(TEMPLATE_SUFFIX):
            name = src.relative_to(TEMPLATE_DIR).as_posix()
            content = renderer.render_template(name, context)
            relative = relative.with_name(src.name[: -len(TEMPLATE_SUFFIX)])
        else:
            content = src.read_text(encoding="utf-8")
        destination = target / relative
        writer(destination, content)
        logger.debug("Copied %s -> %s", src, destination)
        written.append(destination)
    return written


def scaffold(
    options: ScaffoldOptions,
    cwd: Path | None = None,
    writer: Writer = write_file,
) -> Path:
    """Run one full generation and return the target directory."""
    validate_app_name(options.app_name)

    target = (cwd or Path.cwd()) / options.app_name
    if target.exists():
        raise MissingInputError(
            f'Folder "{options.app_name}" already exists.', {"target": str(target)},
        )
    if not options.spec_path.is_file():
        raise MissingInputError(
            f"OpenAPI spec file not found: {options.spec_path}",
            {"spec_path": str(options.spec_path)},
        )

    spec = parse_spec(options.spec_path)
    if not spec.endpoints:
        raise MissingInputError("No endpoints found in OpenAPI spec")
    check_tag_names(list(partition_by_tag(spec.endpoints)))

    renderer = TemplateRenderer(default_helpers())

    app_context = build_app_context(spec, options.app_name, options.cors, options.auth)
    copy_app_template(target, renderer, app_context, writer)
    emit(spec, target, renderer, writer)

    logger.info("Generated %s with %d endpoints", target, len(spec.endpoints))
    return target
