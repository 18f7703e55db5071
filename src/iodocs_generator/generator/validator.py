"""Checks a generated document for problems that do not stop generation."""

from typing import Any

from iodocs_generator.generator.document import RESOURCE_GROUP
from iodocs_generator.model import MethodDescriptor


def collect_warnings(document: dict[str, Any]) -> dict[str, str]:
    """Collect inline parameter warnings.

    Returns dict of {"method.parameterKey": warning_message}.
    """
    warnings = {}
    for resource in document.get("resources", {}).values():
        for method_name, method in resource.get("methods", {}).items():
            for param_key, param in method.get("parameters", {}).items():
                if "warning" in param:
                    warnings[f"{method_name}.{param_key}"] = param["warning"]
    return warnings


def find_duplicate_names(descriptors: list[MethodDescriptor]) -> dict[str, str]:
    """Find method names that more than one descriptor resolves to.

    Returns dict of {method_name: error_message}.
    """
    owners: dict[str, list[str]] = {}
    for descriptor in descriptors:
        owners.setdefault(descriptor.name, []).append(
            f"{descriptor.http_method} {descriptor.path}"
        )
    return {
        name: f"Method name is used by {len(paths)} operations: {', '.join(paths)}"
        for name, paths in owners.items()
        if len(paths) > 1
    }


def check(document: dict[str, Any], descriptors: list[MethodDescriptor]) -> dict[str, str]:
    """Run all checks.

    Returns dict of {location: message} for every problem found.
    """
    problems = {}
    problems.update(find_duplicate_names(descriptors))
    problems.update(collect_warnings(document))
    return problems


def method_count(document: dict[str, Any]) -> int:
    return len(document.get("resources", {}).get(RESOURCE_GROUP, {}).get("methods", {}))
