"""Naming helpers for generated identifiers and file names.

The case helpers are shallow; generated table, file and export names
depend on exactly this output:

  camel_case("GetPets")  -> "getPets"     (first character only)
  pascal_case("getPets") -> "GetPets"     (first character only)
  snake_case("PetOwner") -> "_pet_owner"  (underscore before each capital)
  snake_case("pet-owner") -> "pet-owner"  (existing delimiters untouched)

Operation ids missing from the document are built from method + path:

  GET /pets/{petId} -> GETpetspetId

Names taken from the document that end up in TypeScript source go
through ts_identifier / property_key / destructure_binding:

  ts_identifier("page-size")       -> "page_size"
  property_key("page-size")        -> '"page-size"'
  destructure_binding("page-size") -> '"page-size": page_size'
"""

from __future__ import annotations

import json
import re

from .errors import MissingInputError

_APP_NAME_RE = re.compile(r"[a-zA-Z0-9_-]+")
_TS_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

# Words that cannot be used as a binding name in a TypeScript module
TS_RESERVED_WORDS = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "implements", "import", "in",
    "instanceof", "interface", "let", "new", "null", "package", "private",
    "protected", "public", "return", "static", "super", "switch", "this",
    "throw", "true", "try", "typeof", "var", "void", "while", "with", "yield",
    "await",
})


def camel_case(name: str) -> str:
    """Lower-case the first character."""
    return name[:1].lower() + name[1:]


def pascal_case(name: str) -> str:
    """Upper-case the first character."""
    return name[:1].upper() + name[1:]


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest as is."""
    return name[:1].upper() + name[1:]


def lowercase(name: str) -> str:
    return name.lower()


def snake_case(name: str) -> str:
    """Insert an underscore before every capital letter and lower-case it."""
    return re.sub(r"[A-Z]", lambda m: "_" + m.group(0).lower(), name)


def build_operation_id(method: str, path: str) -> str:
    """Build an operation id from HTTP method and path.

    Returns a name like 'GETpetspetId'. Two paths differing only in
    punctuation produce the same id.
    """
    return method.upper() + re.sub(r"[^a-zA-Z0-9]", "", path)


def file_stem(tag: str) -> str:
    """File name stem for a tag's routes/handlers files."""
    return tag.lower()


def module_alias(tag: str) -> str:
    """A TypeScript identifier for importing a tag's modules."""
    alias = re.sub(r"[^a-z0-9_]", "_", tag.lower())
    if alias[:1].isdigit():
        alias = f"_{alias}"
    return alias or "_"


def table_identifier(tag: str) -> str:
    """The binding a tag's handlers use for its drizzle table."""
    alias = module_alias(tag)
    if alias in TS_RESERVED_WORDS:
        alias = f"{alias}_"
    return alias


def is_ts_identifier(name: str) -> bool:
    return bool(_TS_IDENTIFIER_RE.fullmatch(name)) and name not in TS_RESERVED_WORDS


def ts_identifier(name: str) -> str:
    """Turn a document name into a usable TypeScript binding."""
    if is_ts_identifier(name):
        return name
    ident = re.sub(r"[^A-Za-z0-9_$]", "_", name)
    if not ident or ident[0].isdigit() or ident in TS_RESERVED_WORDS:
        ident = f"_{ident}"
    return ident


def property_key(name: str) -> str:
    """Object literal key, quoted when the name is not a bare identifier."""
    if _TS_IDENTIFIER_RE.fullmatch(name):
        return name
    return json.dumps(name)


def destructure_binding(name: str) -> str:
    """One entry of a destructuring pattern, aliased when needed."""
    if is_ts_identifier(name):
        return name
    return f"{json.dumps(name)}: {ts_identifier(name)}"


def validate_app_name(app_name: str) -> None:
    """Reject empty app names and names with unsafe characters."""
    if not app_name or not app_name.strip():
        raise MissingInputError("App name cannot be empty")
    if not _APP_NAME_RE.fullmatch(app_name):
        raise MissingInputError(
            "App name can only contain letters, numbers, hyphens, and underscores",
            {"app_name": app_name},
        )
