"""Normalized descriptors built from an OpenAPI document.

These are what templates see. Everything except :class:`OperationVariant`'s
back-reference is a plain value built once by the collectors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from .operation import Operation


@dataclass(frozen=True)
class Content:
    """One media type of a request body or response, with its schema."""

    media_type: str
    spec: dict[str, Any] = field(default_factory=dict, compare=False)
    type: str = "any"

    @property
    def schema(self) -> Optional[dict[str, Any]]:
        return self.spec.get("schema")


@dataclass(frozen=True)
class Parameter:
    """A path, query or header parameter."""

    name: str
    location: str
    var: str
    required: bool = False
    description: str = ""
    deprecated: bool = False
    style: Optional[str] = None
    explode: Optional[bool] = None
    type: str = "any"
    spec: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class RequestBody:
    content: list[Content]
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class Response:
    status_code: str
    description: str
    content: list[Content]


@dataclass(frozen=True)
class Security:
    """A security scheme paired with the scopes one requirement asks for."""

    name: str
    spec: dict[str, Any] = field(compare=False, repr=False)
    scope: list[str] = field(default_factory=list)

    @property
    def type(self) -> Optional[str]:
        return self.spec.get("type")

    @property
    def location(self) -> Optional[str]:
        return self.spec.get("in")

    @property
    def param_name(self) -> Optional[str]:
        return self.spec.get("name")


@dataclass(frozen=True)
class Present:
    """A variant's chosen content."""

    content: Content


class Absent:
    """Marks a variant with no request or no response content."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()

ContentChoice = Union[Present, Absent]


def content_of(choice: ContentChoice) -> Optional[Content]:
    """Return the content carried by *choice*, or None when absent."""
    if isinstance(choice, Present):
        return choice.content
    return None


@dataclass(eq=False)
class OperationVariant:
    """One callable derived from an operation: a request and a response content."""

    operation: Operation = field(repr=False)
    method_name: str
    request: ContentChoice = ABSENT
    response: ContentChoice = ABSENT

    @property
    def request_content(self) -> Optional[Content]:
        return content_of(self.request)

    @property
    def response_content(self) -> Optional[Content]:
        return content_of(self.response)

    @property
    def accept(self) -> str:
        """Accept header value for this variant."""
        content = self.response_content
        return content.media_type if content else "*/*"
