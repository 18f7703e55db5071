"""Document synthesizer: assembles method descriptors into an I/O Docs tree.

The tree is plain dicts and lists whose insertion order is the order in
which fields are emitted.
"""

import json
from functools import reduce
from typing import Any

from iodocs_generator.introspect.base import DescriptorSource
from iodocs_generator.logging import get_logger
from iodocs_generator.model import (
    ApiMeta,
    ExtensionParameter,
    Location,
    MethodDescriptor,
    Parameter,
    ParamType,
)
from iodocs_generator.scanner.endpoint import scan_endpoints

logger = get_logger(__name__)

PROTOCOL = "rest"
RESOURCE_GROUP = "Product Methods"
AUTH = {"key": {"location": "query", "param": "api_key"}}

# I/O Docs spells the path location "pathReplace"
EMITTED_LOCATIONS = {Location.PATH: "pathReplace"}

BOOLEAN_ENUM = ("true", "false")
BOOLEAN_ENUM_DESCRIPTIONS = ("True", "False")


def merge_extension(parameter: Parameter, extension: ExtensionParameter) -> Parameter:
    """Fill the empty fields of ``parameter`` from a matching extension.

    Populated fields are never overwritten. Returns ``parameter`` unchanged
    when the (name, type, location) triple does not match.
    """
    if not parameter.matches(extension):
        return parameter

    updates: dict[str, Any] = {}
    if not parameter.description:
        updates["description"] = extension.description
    if not parameter.enumeration:
        updates["enumeration"] = list(extension.enumeration)
        updates["enum_descriptions"] = list(extension.enum_descriptions)
    if not parameter.required:
        updates["required"] = extension.required
    if parameter.default is None:
        updates["default"] = extension.default
    return parameter.model_copy(update=updates)


def extend_parameter(parameter: Parameter, extensions: list[ExtensionParameter]) -> Parameter:
    return reduce(merge_extension, extensions, parameter)


def render_parameter(parameter: Parameter) -> dict[str, Any]:
    enumeration = list(parameter.enumeration)
    enum_descriptions = list(parameter.enum_descriptions)
    param_type = parameter.emitted_type.value
    if parameter.type is ParamType.BOOLEAN:
        enumeration = list(BOOLEAN_ENUM)
        enum_descriptions = list(BOOLEAN_ENUM_DESCRIPTIONS)
    if parameter.location is Location.BODY:
        param_type = ParamType.TEXTAREA.value

    data: dict[str, Any] = {
        "type": param_type,
        "location": EMITTED_LOCATIONS.get(parameter.location, parameter.location.value),
        "description": parameter.description,
        "default": parameter.default.value if parameter.default is not None else None,
    }
    if parameter.required:
        data["required"] = True

    if enum_descriptions and len(enumeration) != len(enum_descriptions):
        data["warning"] = (
            f"Enumeration size ({len(enumeration)}) is not equal to "
            f"enumeration description size ({len(enum_descriptions)})"
        )

    if enumeration:
        data["enum"] = enumeration
        if enum_descriptions:
            data["enumDescriptions"] = enum_descriptions

    return data


def render_method(
    method: MethodDescriptor, extensions: list[ExtensionParameter]
) -> dict[str, Any]:
    data: dict[str, Any] = {"httpMethod": method.http_method, "path": method.path}
    if method.description and method.description.strip():
        data["description"] = method.description

    parameters: dict[str, Any] = {}
    for parameter in method.parameters:
        parameter = extend_parameter(parameter, extensions)
        parameters[parameter.key] = render_parameter(parameter)
    if parameters:
        data["parameters"] = parameters
    return data


def synthesize(
    api: ApiMeta,
    endpoints: list[type],
    extensions: list[ExtensionParameter] | None = None,
    source: DescriptorSource | None = None,
) -> dict[str, Any]:
    """Build the document tree for ``endpoints``.

    Methods sharing a resolved name overwrite earlier ones.
    """
    extensions = list(extensions or [])
    methods: dict[str, Any] = {}
    document: dict[str, Any] = {
        "name": api.name,
        "title": api.title,
        "description": api.description,
        "version": api.version,
        "basePath": api.base_path,
        "protocol": PROTOCOL,
        "auth": {"key": dict(AUTH["key"])},
        "resources": {RESOURCE_GROUP: {"methods": methods}},
    }

    for method in scan_endpoints(endpoints, source):
        if method.name in methods:
            logger.warning(f"Method name '{method.name}' is used more than once; keeping the last")
        methods[method.name] = render_method(method, extensions)
    return document


def to_json(document: dict[str, Any]) -> str:
    """Pretty-print a document tree, leaving out null values."""
    return json.dumps(_drop_nulls(document), indent=2, ensure_ascii=False)


def _drop_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_nulls(v) for v in value]
    return value


def generate(
    name: str,
    title: str,
    description: str | None,
    version: str,
    base_path: str,
    endpoints: list[type],
    extensions: list[ExtensionParameter] | None = None,
    source: DescriptorSource | None = None,
) -> str:
    """Generate I/O Docs JSON for annotated endpoint classes."""
    api = ApiMeta(
        name=name, title=title, description=description, version=version, base_path=base_path
    )
    return to_json(synthesize(api, endpoints, extensions, source))
