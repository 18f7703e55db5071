"""Metadata tags attached to handler classes, methods and parameters.

A tag is a (kind, value) pair. The same object works as a decorator on a
class or method and as ``typing.Annotated`` metadata on a parameter:

    @path("/query")
    class QueryApi:
        @GET
        @path("/resource")
        @description("Run a query")
        def query(self, q: Annotated[int, query("q"), REQUIRED]): ...
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

TAGS_ATTR = "__iodocs_tags__"


class TagKind(str, Enum):
    HTTP_METHOD = "http_method"
    PATH = "path"
    NAME = "name"
    DESCRIPTION = "description"
    IGNORE = "ignore"
    QUERY = "query"
    PATH_PARAM = "path_param"
    HEADER = "header"
    REQUIRED = "required"
    DEFAULT_BOOLEAN = "default_boolean"
    DEFAULT_INTEGER = "default_integer"
    DEFAULT_STRING = "default_string"
    ENUM = "enum"
    ENUM_DESCRIPTIONS = "enum_descriptions"
    DO_NOT_EXTEND = "do_not_extend"


class Tag(BaseModel):
    """A single piece of declarative metadata."""

    model_config = ConfigDict(frozen=True)

    kind: TagKind
    value: bool | int | str | tuple[str, ...] | None = None

    def __call__(self, target: Any) -> Any:
        """Attach this tag to a class or function, keeping source order."""
        existing = target.__dict__.get(TAGS_ATTR, ())
        setattr(target, TAGS_ATTR, (self, *existing))
        return target


def tags_of(target: Any) -> tuple[Tag, ...]:
    """Tags declared directly on ``target`` (never inherited ones)."""
    return tuple(getattr(target, "__dict__", {}).get(TAGS_ATTR, ()))


def has_tag(tags: tuple[Tag, ...] | list[Tag], kind: TagKind) -> bool:
    return any(tag.kind is kind for tag in tags)


def last_value(tags: tuple[Tag, ...] | list[Tag], kind: TagKind) -> Any:
    """Value of the last tag of ``kind``, or None."""
    value = None
    for tag in tags:
        if tag.kind is kind:
            value = tag.value
    return value


# HTTP verbs
GET = Tag(kind=TagKind.HTTP_METHOD, value="GET")
POST = Tag(kind=TagKind.HTTP_METHOD, value="POST")
PUT = Tag(kind=TagKind.HTTP_METHOD, value="PUT")
DELETE = Tag(kind=TagKind.HTTP_METHOD, value="DELETE")
HEAD = Tag(kind=TagKind.HTTP_METHOD, value="HEAD")
OPTIONS = Tag(kind=TagKind.HTTP_METHOD, value="OPTIONS")
PATCH = Tag(kind=TagKind.HTTP_METHOD, value="PATCH")

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH")

IGNORE = Tag(kind=TagKind.IGNORE)
REQUIRED = Tag(kind=TagKind.REQUIRED)
DO_NOT_EXTEND = Tag(kind=TagKind.DO_NOT_EXTEND)


def http_method(verb: str) -> Tag:
    verb = verb.upper()
    if verb not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method: {verb}")
    return Tag(kind=TagKind.HTTP_METHOD, value=verb)


def path(value: str) -> Tag:
    """Class-level prefix or method-level path fragment."""
    return Tag(kind=TagKind.PATH, value=value)


def name(value: str) -> Tag:
    """Explicit method name in the generated document."""
    return Tag(kind=TagKind.NAME, value=value)


def description(value: str) -> Tag:
    """A method description fragment. Stack several to add more."""
    return Tag(kind=TagKind.DESCRIPTION, value=value)


# Parameter metadata

def query(value: str) -> Tag:
    return Tag(kind=TagKind.QUERY, value=value)


def path_param(value: str) -> Tag:
    return Tag(kind=TagKind.PATH_PARAM, value=value)


def header(value: str) -> Tag:
    return Tag(kind=TagKind.HEADER, value=value)


def param_description(value: str) -> Tag:
    return Tag(kind=TagKind.DESCRIPTION, value=value)


def default_boolean(value: bool) -> Tag:
    return Tag(kind=TagKind.DEFAULT_BOOLEAN, value=bool(value))


def default_integer(value: int) -> Tag:
    return Tag(kind=TagKind.DEFAULT_INTEGER, value=int(value))


def default_string(value: str) -> Tag:
    return Tag(kind=TagKind.DEFAULT_STRING, value=str(value))


def enum_values(*values: str) -> Tag:
    return Tag(kind=TagKind.ENUM, value=tuple(values))


def enum_descriptions(*values: str) -> Tag:
    return Tag(kind=TagKind.ENUM_DESCRIPTIONS, value=tuple(values))
