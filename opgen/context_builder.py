"""Build Jinja2 template models from normalized operations.

The global model describes the whole API and is shared by every render; the
local model describes one operation variant.
"""

from __future__ import annotations

from typing import Any, Optional

from . import __version__
from .model import Content, OperationVariant
from .naming import snake_case, upper_first
from .operation import Operation
from .options import Options


def operation_tag(operation: Operation, options: Options) -> str:
    """The tag an operation is filed under: its first tag, else the default."""
    return operation.tags[0] if operation.tags else options.default_tag


def response_reader(content: Optional[Content]) -> str:
    """How a response body of this content is read: json, text, blob or none."""
    if content is None:
        return "none"
    media_type = content.media_type.lower()
    subtype = media_type.split("/")[-1]
    if subtype == "json" or subtype.endswith("+json"):
        return "json"
    if media_type.startswith("text/") or subtype == "xml" or subtype.endswith("+xml"):
        return "text"
    return "blob"


def variant_module(variant: OperationVariant, options: Options) -> str:
    """Module path of a variant, relative to the output dir, without extension."""
    tag = snake_case(operation_tag(variant.operation, options)) or "api"
    return f"fn/{tag}/{snake_case(variant.method_name)}"


def build_globals(
    spec: dict[str, Any],
    operations: list[Operation],
    options: Options,
) -> dict[str, Any]:
    """Model values available to every template."""
    operations_by_tag: dict[str, list[str]] = {}
    for operation in operations:
        tag = operation_tag(operation, options)
        operations_by_tag.setdefault(tag, []).append(operation.id)

    info = spec.get("info", {})
    return {
        "api_title": info.get("title", ""),
        "api_version": info.get("version", "unknown"),
        "generator_version": __version__,
        "operation_count": len(operations),
        "variant_count": sum(len(op.variants) for op in operations),
        "operations_by_tag": operations_by_tag,
    }


def variant_context(variant: OperationVariant, options: Options) -> dict[str, Any]:
    """Model for rendering one operation variant."""
    operation = variant.operation
    request_content = variant.request_content
    response_content = variant.response_content

    return {
        "operation": operation,
        "variant": variant,
        "tag": operation_tag(operation, options),
        "function_name": variant.method_name,
        "params_type": upper_first(variant.method_name) + "$Params",
        "path_var": operation.path_var,
        "query_params": [p for p in operation.parameters if p.location == "query"],
        "header_params": [p for p in operation.parameters if p.location == "header"],
        "request_content": request_content,
        "response_content": response_content,
        "response_type": response_content.type if response_content else "void",
        "response_reader": response_reader(response_content),
        "accept": variant.accept,
    }
