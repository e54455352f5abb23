"""Load an OpenAPI document from disk.

Decodes spec files into plain dicts and extracts paths and schemas.
References are detected but never resolved.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import DecodeError

YAML_SUFFIXES = (".yaml", ".yml")


def load_spec(path: Path) -> dict[str, Any]:
    """Load the OpenAPI document, choosing the decoder by file extension."""
    spec_file = Path(path)
    try:
        raw = spec_file.read_text(encoding="utf-8")
        if spec_file.suffix.lower() in YAML_SUFFIXES:
            doc = yaml.safe_load(raw)
        else:
            doc = json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(str(spec_file), str(exc)) from exc
    except OSError as exc:
        raise DecodeError(str(spec_file), exc.strerror or str(exc)) from exc

    if not isinstance(doc, dict):
        raise DecodeError(str(spec_file), "top level is not a mapping")
    return doc


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the document."""
    return spec.get("paths") or {}


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the document."""
    components = spec.get("components") or {}
    return components.get("schemas") or {}


def is_reference(node: Any) -> bool:
    """Check whether a node is a $ref object."""
    return isinstance(node, dict) and "$ref" in node
