"""Build Jinja2 template contexts from a ParsedSpec.

Groups endpoints by primary tag and assembles the context dicts for
schema.ts.j2, routes.ts.j2, handlers.ts.j2 and the app template tree.
"""

from __future__ import annotations

from typing import Any

from .models import Endpoint, ParsedSpec, Response, find_schema
from .errors import MissingInputError
from .naming import file_stem, module_alias, pascal_case, table_identifier
from .type_mapping import media_schema, reference_name, zod_type

# Body validator prefix per method; anything else gets the insert shape
_BODY_SCHEMA_PREFIXES: dict[str, str] = {
    "POST": "insert",
    "PUT": "insert",
    "PATCH": "patch",
}


def partition_by_tag(endpoints: list[Endpoint]) -> dict[str, list[Endpoint]]:
    """Group endpoints by their first tag, keeping document order."""
    groups: dict[str, list[Endpoint]] = {}
    for endpoint in endpoints:
        groups.setdefault(endpoint.primary_tag, []).append(endpoint)
    return groups


def check_tag_names(tags: list[str]) -> None:
    """Reject tags that would share generated files or module names.

    "Pets" and "pets" both map to pets.routes.ts; without this check the
    second group silently overwrites the first.
    """
    seen: dict[tuple[str, str], str] = {}
    for tag in tags:
        for key in (("file", file_stem(tag)), ("module", module_alias(tag))):
            other = seen.setdefault(key, tag)
            if other != tag:
                raise MissingInputError(
                    f'Tags "{other}" and "{tag}" map to the same {key[0]} name "{key[1]}"',
                    {"tags": [other, tag]},
                )


def _known_reference(spec: ParsedSpec, schema: Any) -> str | None:
    """Return the referenced schema name if the IR kept that schema."""
    name = reference_name(schema)
    if name is not None and find_schema(spec, name) is not None:
        return name
    return None


def body_validator(spec: ParsedSpec, endpoint: Endpoint) -> str | None:
    """Validator expression for an endpoint's JSON request body."""
    if endpoint.request_body is None:
        return None
    schema = media_schema(endpoint.request_body.content)
    name = _known_reference(spec, schema)
    if name is not None:
        prefix = _BODY_SCHEMA_PREFIXES.get(endpoint.method, "insert")
        return f"{prefix}{pascal_case(name)}Schema"
    return zod_type(schema)


def response_validator(spec: ParsedSpec, response: Response) -> str | None:
    """Validator expression for a response, or None when it has no content."""
    if not response.content:
        return None
    schema = media_schema(response.content)
    name = _known_reference(spec, schema)
    if name is not None:
        return f"select{pascal_case(name)}Schema"
    if isinstance(schema, dict) and schema.get("type") == "array":
        item_name = _known_reference(spec, schema.get("items"))
        if item_name is not None:
            return f"z.array(select{pascal_case(item_name)}Schema)"
    return zod_type(schema)


def _route_entry(spec: ParsedSpec, endpoint: Endpoint) -> dict[str, Any]:
    responses = [
        {
            "status_code": response.status_code,
            "description": response.description,
            "validator": response_validator(spec, response),
        }
        for response in endpoint.responses
    ]
    return {
        "endpoint": endpoint,
        "path_params": endpoint.path_params,
        "query_params": endpoint.query_params,
        "header_params": endpoint.header_params,
        "has_request": bool(endpoint.parameters or endpoint.request_body),
        "body_validator": body_validator(spec, endpoint),
        "responses": responses,
    }


def _schema_imports(routes: list[dict[str, Any]]) -> list[str]:
    """Collect the db/schema exports referenced by a group of routes."""
    names: set[str] = set()
    candidates = [route["body_validator"] for route in routes]
    for route in routes:
        candidates.extend(r["validator"] for r in route["responses"])
    for expr in candidates:
        if not expr:
            continue
        if expr.startswith("z.array(") and expr.endswith("Schema)"):
            expr = expr[len("z.array("):-1]
        if not expr.startswith("z."):
            names.add(expr)
    return sorted(names)


def build_schema_context(spec: ParsedSpec) -> dict[str, Any]:
    """Context for the db schema file."""
    return {"schemas": spec.schemas, "info": spec.info}


def build_routes_context(
    spec: ParsedSpec, tag: str, endpoints: list[Endpoint],
) -> dict[str, Any]:
    """Context for one tag's routes file."""
    routes = [_route_entry(spec, endpoint) for endpoint in endpoints]
    return {
        "tag": tag,
        "routes": routes,
        "schema_imports": _schema_imports(routes),
    }


def build_handlers_context(tag: str, endpoints: list[Endpoint]) -> dict[str, Any]:
    """Context for one tag's handlers file."""
    return {
        "tag": tag,
        "file_stem": file_stem(tag),
        "table_name": table_identifier(tag),
        "endpoints": endpoints,
    }


def build_app_context(
    spec: ParsedSpec, app_name: str, cors: bool, auth: bool,
) -> dict[str, Any]:
    """Context for the static application template tree."""
    groups = [
        {
            "tag": tag,
            "file_stem": file_stem(tag),
            "module": module_alias(tag),
            "endpoints": endpoints,
        }
        for tag, endpoints in partition_by_tag(spec.endpoints).items()
    ]
    return {
        "name": app_name,
        "cors": cors,
        "auth": auth,
        "info": spec.info,
        "groups": groups,
        "schemas": spec.schemas,
        "endpoint_count": len(spec.endpoints),
    }
