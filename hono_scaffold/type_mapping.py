"""Map OpenAPI schemas to generated TypeScript expressions.

Handles:
- Column types for drizzle sqlite tables
- zod validators for params, bodies and responses (arrays recurse on items)
- HTTP status codes to stoker constants
- Naming local #/components/schemas/ references (never resolved)
"""

from __future__ import annotations

import json
from typing import Any

SCHEMA_REF_PREFIX = "#/components/schemas/"

DEFAULT_DRIZZLE_TYPE = "text()"
DEFAULT_ZOD_TYPE = "z.unknown()"

_DRIZZLE_TYPES: dict[str, str] = {
    "string": "text()",
    "integer": "integer()",
    "number": "real()",
    "boolean": 'integer({ mode: "boolean" })',
}

_ZOD_TYPES: dict[str, str] = {
    "string": "z.string()",
    "number": "z.number()",
    "integer": "z.number().int()",
    "boolean": "z.boolean()",
}

_STATUS_CONSTANTS: dict[str, str] = {
    "200": "OK",
    "201": "CREATED",
    "204": "NO_CONTENT",
    "400": "BAD_REQUEST",
    "401": "UNAUTHORIZED",
    "404": "NOT_FOUND",
    "422": "UNPROCESSABLE_ENTITY",
    "500": "INTERNAL_SERVER_ERROR",
}

# Preferred media types when picking a body/response schema
_JSON_MEDIA_TYPES = ("application/json", "text/json")


def _schema_type(schema: Any) -> str | None:
    if not isinstance(schema, dict):
        return None
    schema_type = schema.get("type")
    # OpenAPI 3.1 allows a list of types; those fall back like unknown types
    return schema_type if isinstance(schema_type, str) else None


def drizzle_type(schema: Any) -> str:
    """Resolve a property schema to a drizzle column builder."""
    return _DRIZZLE_TYPES.get(_schema_type(schema), DEFAULT_DRIZZLE_TYPE)


def zod_type(schema: Any) -> str:
    """Resolve a schema to a zod validator expression."""
    schema_type = _schema_type(schema)
    if schema_type == "array":
        return f"z.array({zod_type(schema.get('items'))})"
    return _ZOD_TYPES.get(schema_type, DEFAULT_ZOD_TYPE)


def status_code_constant(code: Any) -> str:
    """Symbolic stoker constant for a status code, or the code itself."""
    code = str(code)
    return _STATUS_CONSTANTS.get(code, code)


def status_code_key(code: Any) -> str:
    """Object key for a status code inside a createRoute responses map."""
    code = str(code)
    constant = status_code_constant(code)
    if constant != code:
        return f"[HttpStatusCodes.{constant}]"
    if code.isdigit():
        return code
    return json.dumps(code)


def reference_name(schema: Any) -> str | None:
    """Name of the component a local schema $ref points at."""
    if not isinstance(schema, dict):
        return None
    ref = schema.get("$ref")
    if isinstance(ref, str) and ref.startswith(SCHEMA_REF_PREFIX):
        return ref[len(SCHEMA_REF_PREFIX):]
    return None


def media_schema(content: dict[str, Any] | None) -> dict[str, Any] | None:
    """Pick the schema of the JSON media type, else of the first one."""
    if not content:
        return None
    for media_type in _JSON_MEDIA_TYPES:
        if media_type in content:
            return (content[media_type] or {}).get("schema")
    for media in content.values():
        return (media or {}).get("schema")
    return None
