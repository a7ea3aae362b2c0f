"""Collect the normalized pieces of one OpenAPI operation.

Each collector takes the raw document fragments, dereferences them where
needed and returns descriptors from :mod:`opgen.model`.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from .loader import deref, resolve_ref
from .log import Logger
from .model import Content, Parameter, Response, Security
from .naming import escape_id
from .options import Options
from .schema_types import resolve_schema_type

_PATH_TOKEN = re.compile(r"\{([^}]+)\}")
_LEADING_INT = re.compile(r"[+-]?\d+")


def collect_parameters(
    spec: dict[str, Any],
    params: Optional[list[Any]],
    operation_id: str,
    options: Options,
    logger: Logger,
) -> list[Parameter]:
    """Resolve one parameter list, dropping cookie and excluded parameters."""
    result: list[Parameter] = []
    excluded = set(options.exclude_parameters)

    for param in params or []:
        param = deref(spec, param)
        name = param.get("name", "")
        location = param.get("in", "query")

        if location == "cookie":
            logger.warn(
                f"Ignoring cookie parameter {operation_id}.{name} as cookie"
                " parameters cannot be sent in XmlHttpRequests."
            )
            continue
        if name in excluded:
            continue

        schema = param.get("schema") or {}
        result.append(Parameter(
            name=name,
            location=location,
            var=escape_id(name),
            required=bool(param.get("required", location == "path")),
            description=param.get("description", ""),
            deprecated=bool(param.get("deprecated", False)),
            style=param.get("style"),
            explode=param.get("explode"),
            type=resolve_schema_type(schema),
            spec=param,
        ))

    return result


def collect_security(
    spec: dict[str, Any],
    requirements: Optional[list[dict[str, list[str]]]],
) -> list[list[Security]]:
    """Resolve security requirements into alternatives of required schemes.

    The outer list holds alternatives (any one suffices); each inner list
    holds schemes that must all be satisfied.
    """
    if not requirements:
        return []

    result = []
    for requirement in requirements:
        alternative = []
        for name, scope in requirement.items():
            scheme = resolve_ref(spec, f"#/components/securitySchemes/{name}")
            alternative.append(Security(name=name, spec=scheme, scope=list(scope or [])))
        result.append(alternative)
    return result


def collect_content(spec: dict[str, Any], content: Optional[dict[str, Any]]) -> list[Content]:
    """One Content per media type, in declaration order."""
    result = []
    for media_type, desc in (content or {}).items():
        desc = deref(spec, desc) or {}
        result.append(Content(
            media_type=media_type,
            spec=desc,
            type=resolve_schema_type(desc.get("schema")),
        ))
    return result


def parse_status(status_code: str) -> Optional[int]:
    """Parse the leading integer of a status key; None if there is none."""
    match = _LEADING_INT.match(status_code.strip())
    return int(match.group()) if match else None


def collect_responses(
    spec: dict[str, Any],
    responses: Optional[dict[str, Any]],
) -> tuple[Optional[Response], list[Response]]:
    """Build every declared response and pick the success response.

    The success response is the first one with a 2xx status, else the
    ``default`` response, else None.
    """
    success: Optional[Response] = None
    fallback: Optional[Response] = None
    all_responses: list[Response] = []

    for status_code, response_obj in (responses or {}).items():
        status_code = str(status_code)
        desc = deref(spec, response_obj) or {}
        response = Response(
            status_code=status_code,
            description=desc.get("description") or "",
            content=collect_content(spec, desc.get("content")),
        )
        all_responses.append(response)

        status = parse_status(status_code)
        if status is not None and 200 <= status < 300:
            if success is None:
                success = response
        elif status_code == "default":
            fallback = response

    return success or fallback, all_responses


def to_path_expression(path: str, parameters: list[Parameter]) -> str:
    """Rewrite ``{name}`` path segments as ``${params.<var>}``.

    "/a/{var1}/b/{var2}/" returns "/a/${params.var1}/b/${params.var2}/"
    """
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        param = next((p for p in parameters if p.name == name), None)
        return "${params." + (param.var if param else name) + "}"

    return _PATH_TOKEN.sub(replace, path or "")
