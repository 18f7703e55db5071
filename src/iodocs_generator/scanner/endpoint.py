"""Endpoint scanner.

Walks endpoint classes and extracts one MethodDescriptor per method that
carries an HTTP verb tag.
"""

from iodocs_generator.introspect.annotations import AnnotationSource
from iodocs_generator.introspect.base import DescriptorSource, RawMethod
from iodocs_generator.logging import get_logger
from iodocs_generator.model import MethodDescriptor, Parameter
from iodocs_generator.scanner.normalizer import normalize_parameter
from iodocs_generator.tags import TagKind, has_tag, last_value

logger = get_logger(__name__)

DESCRIPTION_DELIMITER = ", "


def scan_endpoints(
    endpoints: list[type], source: DescriptorSource | None = None
) -> list[MethodDescriptor]:
    """Scan endpoint classes in order into a flat list of MethodDescriptor."""
    source = source or AnnotationSource()
    descriptors: list[MethodDescriptor] = []
    for endpoint in endpoints:
        descriptors.extend(scan_endpoint(endpoint, source))
    return descriptors


def scan_endpoint(endpoint: type, source: DescriptorSource) -> list[MethodDescriptor]:
    prefix = last_value(source.class_tags(endpoint), TagKind.PATH) or ""

    descriptors = []
    for method in source.methods(endpoint):
        if has_tag(method.tags, TagKind.IGNORE):
            logger.debug(f"Skipping ignored method {endpoint.__name__}.{method.name}")
            continue
        descriptor = _describe(endpoint, method, prefix)
        if descriptor is not None:
            descriptors.append(descriptor)
    return descriptors


def _describe(endpoint: type, method: RawMethod, prefix: str) -> MethodDescriptor | None:
    http_method = last_value(method.tags, TagKind.HTTP_METHOD)
    if http_method is None:
        return None

    fragments = [tag.value for tag in method.tags if tag.kind is TagKind.DESCRIPTION]
    description = DESCRIPTION_DELIMITER.join(str(f) for f in fragments) or None

    method_name = last_value(method.tags, TagKind.NAME)
    if method_name is None:
        method_name = f"{endpoint.__name__}_{method.name}"

    return MethodDescriptor(
        name=method_name,
        http_method=http_method,
        path=prefix + (last_value(method.tags, TagKind.PATH) or ""),
        description=description,
        parameters=_parameters(method),
    )


def _parameters(method: RawMethod) -> list[Parameter]:
    parameters = []
    for raw in method.parameters:
        if has_tag(raw.tags, TagKind.IGNORE):
            continue
        parameter = normalize_parameter(raw)
        if parameter is not None:
            parameters.append(parameter)
    return parameters
