"""Map OpenAPI schemas to type expressions of the generated code.

Handles:
- primitive types and formats (binary strings become Blob)
- arrays and string-keyed maps (additionalProperties)
- $ref to a named component schema (rendered by name)
- allOf / oneOf / anyOf composition
- enums (rendered as literal unions)
- nullable
"""

from __future__ import annotations

import json
from typing import Any

from .loader import is_ref
from .naming import type_name

_PRIMITIVES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
}

_SCHEMA_PREFIX = "#/components/schemas/"


def _literal(value: Any) -> str:
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    return json.dumps(value)


def _union(types: list[str]) -> str:
    unique = list(dict.fromkeys(types))
    return " | ".join(unique) if unique else "any"


def resolve_schema_type(schema: dict[str, Any] | None) -> str:
    """Resolve a schema to a type expression string."""
    if not schema:
        return "any"

    if is_ref(schema):
        ref = schema["$ref"]
        if ref.startswith(_SCHEMA_PREFIX):
            return type_name(ref[len(_SCHEMA_PREFIX):])
        return "any"

    if "allOf" in schema:
        parts = [resolve_schema_type(s) for s in schema["allOf"]]
        return " & ".join(f"({p})" if " | " in p else p for p in parts) or "any"

    for key in ("oneOf", "anyOf"):
        if key in schema:
            result = _union([resolve_schema_type(s) for s in schema[key]])
            break
    else:
        result = _resolve_plain(schema)

    if schema.get("nullable") and result != "any":
        result = f"{result} | null"
    return result


def _resolve_plain(schema: dict[str, Any]) -> str:
    if "enum" in schema:
        return _union([_literal(v) for v in schema["enum"]])

    schema_type = schema.get("type")
    if schema_type == "string" and schema.get("format") == "binary":
        return "Blob"
    if schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]
    if schema_type == "array":
        item_type = resolve_schema_type(schema.get("items", {}))
        if " " in item_type:
            item_type = f"({item_type})"
        return f"Array<{item_type}>"
    if schema_type == "object" or "properties" in schema or "additionalProperties" in schema:
        return _object_type(schema)
    return "any"


def _object_type(schema: dict[str, Any]) -> str:
    properties = schema.get("properties") or {}
    required = set(schema.get("required") or [])
    members = []
    for name, prop in properties.items():
        key = name if name.isidentifier() else _literal(name)
        optional = "" if name in required else "?"
        members.append(f"{key}{optional}: {resolve_schema_type(prop)}")

    additional = schema.get("additionalProperties")
    if additional:
        value_type = "any" if additional is True else resolve_schema_type(additional)
        members.append(f"[key: string]: {value_type}")

    if not members:
        return "{}"
    return "{ " + "; ".join(members) + " }"
