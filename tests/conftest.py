"""Shared fixtures for the scaffolder tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from hono_scaffold.codegen import TemplateRenderer, default_helpers
from hono_scaffold.models import ParsedSpec
from hono_scaffold.normalizer import normalize

FIXTURES = Path(__file__).parent / "fixtures"
PETSTORE = FIXTURES / "petstore.yaml"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@pytest.fixture
def petstore_doc() -> dict[str, Any]:
    """The petstore fixture decoded into a fresh dict."""
    return yaml.safe_load(PETSTORE.read_text(encoding="utf-8"))


@pytest.fixture
def petstore(petstore_doc) -> ParsedSpec:
    return normalize(petstore_doc)


@pytest.fixture
def minimal_pets_doc() -> dict[str, Any]:
    """One tag holding a GET-by-id and a GET-list operation."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Pets", "version": "1.0.0"},
        "paths": {
            "/pets": {
                "get": {
                    "operationId": "listPets",
                    "tags": ["Pets"],
                    "responses": {"200": {"description": "All pets"}},
                },
            },
            "/pets/{id}": {
                "get": {
                    "operationId": "getPet",
                    "tags": ["Pets"],
                    "parameters": [
                        {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}},
                    ],
                    "responses": {"200": {"description": "One pet"}},
                },
            },
        },
        "components": {
            "schemas": {
                "Pet": {"type": "object", "properties": {"name": {"type": "string"}}},
            },
        },
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer(default_helpers())


@pytest.fixture
def recorded_writes():
    """A writer that records files instead of touching disk.

    Returns (writer, files) where files maps path -> content.
    """
    files: dict[Path, str] = {}

    def _writer(path: Path, content: str) -> None:
        files[path] = content

    return _writer, files
