"""Normalize a decoded OpenAPI document into a ParsedSpec.

Handles:
- Operation discovery under HTTP method keys, in document order
- operationId synthesis from method + path
- Default tag assignment
- Parameter / response $ref rejection (fails the whole document)
- Request body $ref soft skip (treated as no body)
- Object schema extraction from components/schemas
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .errors import UnsupportedReferenceError
from .loader import get_paths, get_schemas, is_reference, load_spec
from .models import (
    DEFAULT_TAG,
    Endpoint,
    Parameter,
    ParsedSpec,
    RequestBody,
    Response,
    SchemaDefinition,
    SpecInfo,
)
from .naming import build_operation_id

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _parse_parameters(
    params: list[dict[str, Any]], method: str, path: str,
) -> list[Parameter]:
    result = []
    for param in params:
        if is_reference(param):
            raise UnsupportedReferenceError("Parameter", method, path, param["$ref"])
        result.append(
            Parameter(
                name=param["name"],
                location=param["in"],
                required=bool(param.get("required", False)),
                param_schema=param.get("schema"),
            )
        )
    return result


def _parse_request_body(body: dict[str, Any] | None) -> RequestBody | None:
    # A referenced body is dropped rather than rejected
    if not body or is_reference(body):
        return None
    return RequestBody(
        required=bool(body.get("required", False)),
        content=body.get("content") or {},
    )


def _parse_responses(
    responses: dict[Any, Any], method: str, path: str,
) -> list[Response]:
    result = []
    for status_code, response in responses.items():
        if is_reference(response):
            raise UnsupportedReferenceError("Response", method, path, response["$ref"])
        response = response or {}
        result.append(
            Response(
                status_code=str(status_code),
                description=response.get("description") or "",
                content=response.get("content"),
            )
        )
    return result


def _parse_endpoint(path: str, method: str, operation: dict[str, Any]) -> Endpoint:
    method = method.upper()
    tags = operation.get("tags") or [DEFAULT_TAG]
    return Endpoint(
        path=path,
        method=method,
        operation_id=operation.get("operationId") or build_operation_id(method, path),
        summary=operation.get("summary"),
        description=operation.get("description"),
        tags=[str(tag) for tag in tags],
        parameters=_parse_parameters(operation.get("parameters") or [], method, path),
        request_body=_parse_request_body(operation.get("requestBody")),
        responses=_parse_responses(operation.get("responses") or {}, method, path),
    )


def parse_endpoints(spec: dict[str, Any]) -> list[Endpoint]:
    """Build one Endpoint per operation, preserving document order."""
    endpoints: list[Endpoint] = []
    for path, path_item in get_paths(spec).items():
        if not path_item:
            continue
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            endpoints.append(_parse_endpoint(path, method, operation))
    return endpoints


def parse_schemas(spec: dict[str, Any]) -> list[SchemaDefinition]:
    """Keep only component schemas shaped like objects (have properties)."""
    schemas: list[SchemaDefinition] = []
    for name, schema in get_schemas(spec).items():
        if not isinstance(schema, dict) or "properties" not in schema:
            logger.debug("Skipping non-object schema %s", name)
            continue
        schemas.append(
            SchemaDefinition(
                name=name,
                properties=schema.get("properties") or {},
                required=schema.get("required") or [],
            )
        )
    return schemas


def parse_info(spec: dict[str, Any]) -> SpecInfo:
    info = spec.get("info") or {}
    description = info.get("description")
    return SpecInfo(
        title=str(info.get("title", "")),
        version=str(info.get("version", "")),
        description=str(description) if description is not None else None,
    )


def normalize(spec: dict[str, Any]) -> ParsedSpec:
    """Normalize a decoded document into a ParsedSpec."""
    parsed = ParsedSpec(
        endpoints=parse_endpoints(spec),
        schemas=parse_schemas(spec),
        info=parse_info(spec),
    )
    logger.debug(
        "Normalized %d endpoints and %d schemas",
        len(parsed.endpoints),
        len(parsed.schemas),
    )
    return parsed


def parse_spec(path: Path) -> ParsedSpec:
    """Load a spec file and normalize it."""
    return normalize(load_spec(path))
