"""The normalized record of one OpenAPI operation, and their enumeration."""

from __future__ import annotations

from typing import Any, Optional

from .collectors import (
    collect_content,
    collect_parameters,
    collect_responses,
    collect_security,
    to_path_expression,
)
from .loader import deref, get_paths
from .log import Logger
from .model import OperationVariant, Parameter, RequestBody, Response, Security
from .naming import operation_id, upper_first
from .options import Options
from .variants import calculate_variants

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class Operation:
    """An operation descriptor.

    Construction resolves parameters, security, request body and responses,
    builds the path expression and expands the variants.
    """

    def __init__(
        self,
        spec: dict[str, Any],
        path: str,
        path_spec: dict[str, Any],
        method: str,
        id: str,
        operation_spec: dict[str, Any],
        options: Options,
    ) -> None:
        self.spec = spec
        self.method = method
        self.id = id
        self.operation_spec = operation_spec
        self.options = options
        self.logger = Logger(options.silent)

        self.path = path.replace("'", "\\'")
        self.tags: list[str] = list(operation_spec.get("tags") or [])
        self.summary: str = operation_spec.get("summary") or ""
        self.description: str = operation_spec.get("description") or ""
        self.path_var = f"{upper_first(id)}Path"
        self.method_name: str = operation_spec.get("x-operation-name") or id
        self.deprecated = bool(operation_spec.get("deprecated", False))

        # Path-level parameters first, then the operation's own
        self.parameters: list[Parameter] = [
            *collect_parameters(spec, path_spec.get("parameters"), id, options, self.logger),
            *collect_parameters(spec, operation_spec.get("parameters"), id, options, self.logger),
        ]
        self.parameters_required = any(p.required for p in self.parameters)
        self.has_parameters = bool(self.parameters)

        requirements = operation_spec.get("security")
        if requirements is None:
            requirements = spec.get("security")
        self.security: list[list[Security]] = collect_security(spec, requirements)

        self.request_body: Optional[RequestBody] = None
        body = operation_spec.get("requestBody")
        if body:
            body = deref(spec, body)
            self.request_body = RequestBody(
                content=collect_content(spec, body.get("content")),
                required=bool(body.get("required", False)),
                description=body.get("description") or "",
            )
            if self.request_body.required:
                self.parameters_required = True

        success, all_responses = collect_responses(spec, operation_spec.get("responses"))
        self.success_response: Optional[Response] = success
        self.all_responses: list[Response] = all_responses
        self.path_expression = to_path_expression(self.path, self.parameters)

        self.variants: list[OperationVariant] = calculate_variants(self, options)

    def __repr__(self) -> str:
        return f"Operation({self.method.upper()} {self.path} id={self.id!r})"


def collect_operations(spec: dict[str, Any], options: Options) -> list[Operation]:
    """Build an Operation for every method of every path, in document order.

    Operations without an ``operationId`` get one from method and path;
    repeated ids get a numeric suffix.
    """
    operations: list[Operation] = []
    seen: dict[str, int] = {}

    for path, path_item in get_paths(spec).items():
        path_item = deref(spec, path_item)
        for method in HTTP_METHODS:
            operation_spec = path_item.get(method)
            if not isinstance(operation_spec, dict):
                continue

            id = operation_spec.get("operationId") or operation_id(method, path)
            if id in seen:
                seen[id] += 1
                id = f"{id}{seen[id]}"
            else:
                seen[id] = 1

            operations.append(
                Operation(spec, path, path_item, method, id, operation_spec, options)
            )

    return operations
