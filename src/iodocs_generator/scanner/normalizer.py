"""Parameter normalizer.

Turns one raw parameter declaration into a Parameter. Each tag kind maps to
a rule in ``_RULES``; tags are applied in declaration order.
"""

import io
import pathlib
import typing
from collections.abc import Callable, Mapping
from typing import Any, get_origin

from pydantic import BaseModel

from iodocs_generator.introspect.base import RawParameter
from iodocs_generator.logging import get_logger
from iodocs_generator.model import REQUEST_BODY, Location, Parameter, ParamType, to_default
from iodocs_generator.tags import Tag, TagKind

logger = get_logger(__name__)

BOOLEAN_SEED = ("true", "false")

# Declared types that can carry a raw request body
BODY_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    io.IOBase,
    typing.IO,
    pathlib.PurePath,
    Mapping,
    BaseModel,
)


def semantic_type(declared_type: Any) -> ParamType:
    """Map a declared Python type to int, boolean or (by default) string."""
    if get_origin(declared_type) is None and isinstance(declared_type, type):
        # bool is a subclass of int
        if issubclass(declared_type, bool):
            return ParamType.BOOLEAN
        if issubclass(declared_type, int):
            return ParamType.INT
    return ParamType.STRING


def is_body_type(declared_type: Any) -> bool:
    target = get_origin(declared_type) or declared_type
    if not isinstance(target, type):
        return False
    try:
        return issubclass(target, BODY_TYPES)
    except TypeError:
        return False


def _location(location: Location) -> Callable[[Tag, dict], dict]:
    def rule(tag: Tag, fields: dict) -> dict:
        if fields.get("location") is not None:
            logger.warning(
                f"Parameter '{tag.value}' has more than one location tag; using {location.value}"
            )
        return {"name": tag.value, "location": location}

    return rule


def _description(tag: Tag, fields: dict) -> dict:
    return {"description": tag.value}


def _required(tag: Tag, fields: dict) -> dict:
    return {"required": True}


def _default(tag: Tag, fields: dict) -> dict:
    return {"default": to_default(tag.value)}


def _enum_field(field: str) -> Callable[[Tag, dict], dict]:
    def rule(tag: Tag, fields: dict) -> dict:
        updates = {field: list(tag.value or ())}
        # an explicit enumeration replaces the boolean pair
        if fields["type"] is ParamType.BOOLEAN:
            updates["type"] = ParamType.STRING
        return updates

    return rule


def _no_op(tag: Tag, fields: dict) -> dict:
    return {}


_RULES: dict[TagKind, Callable[[Tag, dict], dict]] = {
    TagKind.QUERY: _location(Location.QUERY),
    TagKind.PATH_PARAM: _location(Location.PATH),
    TagKind.HEADER: _location(Location.HEADER),
    TagKind.DESCRIPTION: _description,
    TagKind.REQUIRED: _required,
    TagKind.DEFAULT_BOOLEAN: _default,
    TagKind.DEFAULT_INTEGER: _default,
    TagKind.DEFAULT_STRING: _default,
    TagKind.ENUM: _enum_field("enumeration"),
    TagKind.ENUM_DESCRIPTIONS: _enum_field("enum_descriptions"),
    # accepted but not consulted when extending parameters
    TagKind.DO_NOT_EXTEND: _no_op,
}


def normalize_parameter(raw: RawParameter) -> Parameter | None:
    """Build a Parameter from a raw declaration.

    Returns None when the parameter has no location tag and its declared
    type cannot carry a request body.
    """
    fields: dict[str, Any] = {
        "name": None,
        "location": None,
        "type": semantic_type(raw.declared_type),
        "enumeration": [],
        "enum_descriptions": [],
    }
    if fields["type"] is ParamType.BOOLEAN:
        fields["enumeration"] = list(BOOLEAN_SEED)
        fields["enum_descriptions"] = list(BOOLEAN_SEED)

    for tag in raw.tags:
        rule = _RULES.get(tag.kind)
        if rule is None:
            logger.debug(f"Ignoring {tag.kind.value} tag on parameter '{raw.name}'")
            continue
        fields.update(rule(tag, fields))

    if fields["location"] is None:
        if not is_body_type(raw.declared_type):
            logger.debug(f"Dropping parameter '{raw.name}': no location and not a request body")
            return None
        fields.update(name=REQUEST_BODY, type=ParamType.TEXTAREA, location=Location.BODY)

    return Parameter(**fields)
