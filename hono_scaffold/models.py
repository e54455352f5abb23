"""Normalized description of an OpenAPI document.

The normalizer converts a decoded document into these models; every
template is rendered from them and nothing else. All models are frozen.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

DEFAULT_TAG = "default"


class Parameter(BaseModel):
    """A single operation parameter (path, query, or header)."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # path / query / header
    required: bool = False
    param_schema: dict[str, Any] | None = None


class RequestBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool = False
    content: dict[str, Any] = {}  # media type -> media object


class Response(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: str
    description: str = ""
    content: dict[str, Any] | None = None


class Endpoint(BaseModel):
    """One HTTP operation."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: str  # upper-case
    operation_id: str
    summary: str | None = None
    description: str | None = None
    tags: list[str] = [DEFAULT_TAG]
    parameters: list[Parameter] = []
    request_body: RequestBody | None = None
    responses: list[Response] = []

    @property
    def primary_tag(self) -> str:
        """The tag that decides which output files this endpoint lands in."""
        return self.tags[0] if self.tags else DEFAULT_TAG

    @property
    def path_params(self) -> list[Parameter]:
        return [p for p in self.parameters if p.location == "path"]

    @property
    def query_params(self) -> list[Parameter]:
        return [p for p in self.parameters if p.location == "query"]

    @property
    def header_params(self) -> list[Parameter]:
        return [p for p in self.parameters if p.location == "header"]


class SchemaDefinition(BaseModel):
    """A named object schema from components/schemas."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: dict[str, Any] = {}
    required: list[str] = []


class SpecInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    version: str = ""
    description: str | None = None


class ParsedSpec(BaseModel):
    """Endpoints, schemas and metadata of one document."""

    model_config = ConfigDict(frozen=True)

    endpoints: list[Endpoint]
    schemas: list[SchemaDefinition]
    info: SpecInfo


def find_schema(spec: ParsedSpec, name: str) -> SchemaDefinition | None:
    """Return the schema declared under ``name``, if it was kept."""
    for schema in spec.schemas:
        if schema.name == name:
            return schema
    return None
