"""Load an OpenAPI document and resolve ``$ref`` pointers inside it.

JSON and YAML documents are both accepted. References are resolved lazily,
one pointer at a time, when the collectors meet them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .exceptions import RefResolutionError, SpecLoadError


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    spec_file = Path(path)
    try:
        with open(spec_file, encoding="utf-8") as f:
            if spec_file.suffix in (".yaml", ".yml"):
                spec = yaml.safe_load(f)
            else:
                spec = json.load(f)
    except OSError as exc:
        raise SpecLoadError(f"Cannot read {spec_file}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"Cannot parse {spec_file}: {exc}") from exc
    if not isinstance(spec, dict):
        raise SpecLoadError(f"{spec_file} does not contain an OpenAPI object")
    return spec


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def is_ref(obj: Any) -> bool:
    """Return True if *obj* is a ``{"$ref": ...}`` object."""
    return isinstance(obj, dict) and isinstance(obj.get("$ref"), str)


def _follow_pointer(spec: dict[str, Any], ref: str) -> Any:
    if not ref.startswith("#/"):
        raise RefResolutionError(ref, "only local references (#/...) are supported")

    node: Any = spec
    for segment in ref[2:].split("/"):
        segment = segment.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict):
            if segment not in node:
                raise RefResolutionError(ref, f"key '{segment}' not found")
            node = node[segment]
        elif isinstance(node, list):
            try:
                node = node[int(segment)]
            except (ValueError, IndexError) as exc:
                raise RefResolutionError(ref, f"invalid array index '{segment}'") from exc
        else:
            raise RefResolutionError(ref, f"cannot navigate into {type(node).__name__}")
    return node


def resolve_ref(spec: dict[str, Any], ref: str) -> Any:
    """Resolve a $ref pointer in the spec.

    A target that is itself a ``$ref`` object is followed in turn. Seeing the
    same pointer twice on one chain raises :class:`RefResolutionError`.
    """
    seen = {ref}
    node = _follow_pointer(spec, ref)
    while is_ref(node):
        ref = node["$ref"]
        if ref in seen:
            raise RefResolutionError(ref, "circular reference")
        seen.add(ref)
        node = _follow_pointer(spec, ref)
    return node


def deref(spec: dict[str, Any], obj: Any) -> Any:
    """Return *obj*, or the object it points to if it is a $ref."""
    if is_ref(obj):
        return resolve_ref(spec, obj["$ref"])
    return obj
