"""Turn OpenAPI names into identifiers usable in generated code.

  - type_name("hal+json")           -> "HalJson"
  - method_name("list-pets")        -> "listPets"
  - operation_id("get", "/pets/{id}") -> "getPetsId"
  - escape_id("class")              -> "class_"
  - escape_id("X-Request-Id")       -> "XRequestId"
  - snake_case("findPetsByTag$Json") -> "find_pets_by_tag_json"
"""

from __future__ import annotations

import re

# Reserved words of the generated language, plus a few common globals
_RESERVED: set[str] = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "implements", "import", "in",
    "instanceof", "interface", "let", "new", "null", "package", "private",
    "protected", "public", "return", "static", "super", "switch", "this",
    "throw", "true", "try", "typeof", "var", "void", "while", "with", "yield",
    "any", "boolean", "number", "string", "symbol", "type", "params",
}


def _words(name: str) -> list[str]:
    """Split a name into words on separators and camelCase boundaries."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1 \2", s1)
    return [w for w in re.split(r"[^A-Za-z0-9]+", s2) if w]


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def method_name(name: str) -> str:
    """Return a lowerCamelCase identifier for *name*."""
    words = _words(name)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(w.capitalize() for w in rest)


def type_name(name: str) -> str:
    """Return an UpperCamelCase identifier for *name*."""
    return upper_first(method_name(name))


def snake_case(name: str) -> str:
    """Convert camelCase, PascalCase or $-joined names to snake_case."""
    return "_".join(w.lower() for w in _words(name))


def escape_id(name: str) -> str:
    """Return an identifier for *name* that is safe in generated code."""
    if re.fullmatch(r"[A-Za-z_$][\w$]*", name):
        ident = name
    else:
        ident = method_name(name) or "_"
        if ident[0].isdigit():
            ident = "_" + ident
    if ident in _RESERVED:
        ident += "_"
    return ident


def operation_id(method: str, path: str) -> str:
    """Build an operation id from HTTP method and path.

    Used for operations that do not declare an ``operationId``.
    """
    parts = [p.strip("{}") for p in path.split("/") if p]
    return method_name(" ".join([method.lower(), *parts])) or method.lower()
