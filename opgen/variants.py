"""Expand an operation into one variant per request/response content label.

An operation may accept or return several content types that end up in the
same method (``application/json``, ``application/foo+json``, ``text/json``).
Each content type is reduced to a label appended to the method name:

  - application/json              -> "$Json"  ("" with skipJsonSuffix)
  - application/hal+json          -> "$Json"
  - text/plain                    -> "$Plain"
  - application/octet-stream, */* -> "$Any"

Contents sharing a label collapse into one entry, the last one declared
winning. When a side ends up with a single label it gets no suffix at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .model import ABSENT, Content, ContentChoice, OperationVariant, Present
from .naming import type_name
from .options import Options

if TYPE_CHECKING:
    from .operation import Operation

ANY_LABEL = "$Any"


def variant_method_part(content: Optional[Content], options: Options) -> str:
    """Return how the given content is represented on the method name."""
    if content is None:
        return ""
    media_type = content.media_type.replace("/*", "", 1)
    if media_type in ("*", "application/octet-stream"):
        return ANY_LABEL
    subtype = media_type.split("/")[-1]
    subtype = subtype[subtype.rfind("+") + 1:]
    if options.skip_json_suffix and subtype == "json":
        return ""
    return "$" + type_name(subtype)


def contents_by_method_part(
    contents: Optional[list[Content]],
    options: Options,
) -> dict[str, ContentChoice]:
    """Group contents by method-name label."""
    by_label: dict[str, ContentChoice] = {}
    for content in contents or []:
        if content and content.media_type:
            by_label[variant_method_part(content, options)] = Present(content)

    if not by_label:
        return {"": ABSENT}
    if len(by_label) == 1:
        (sole,) = by_label.values()
        return {"": sole}
    return by_label


def unique_name(name: str, taken: set[str]) -> str:
    """Return *name*, or *name* with the first free numeric suffix from 2 on."""
    candidate = name
    counter = 1
    while candidate in taken:
        counter += 1
        candidate = f"{name}{counter}"
    return candidate


def calculate_variants(operation: Operation, options: Options) -> list[OperationVariant]:
    """Cross the request labels with the success response labels.

    An empty label on one side can make two combinations share a name
    (json x plain and plain x json with skipJsonSuffix); the later one gets
    a numeric suffix.
    """
    request_body = operation.request_body
    success = operation.success_response
    request_variants = contents_by_method_part(
        request_body.content if request_body else None, options,
    )
    response_variants = contents_by_method_part(
        success.content if success else None, options,
    )

    variants = []
    taken: set[str] = set()
    for request_part, request in request_variants.items():
        for response_part, response in response_variants.items():
            name = unique_name(operation.method_name + request_part + response_part, taken)
            taken.add(name)
            variants.append(OperationVariant(
                operation=operation,
                method_name=name,
                request=request,
                response=response,
            ))
    return variants
