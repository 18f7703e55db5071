"""Descriptor source built from explicit registration calls.

Useful for handlers that cannot carry decorators, e.g. classes generated at
runtime or owned by another package.
"""

from typing import Any

from iodocs_generator.introspect.base import RawMethod, RawParameter
from iodocs_generator.tags import Tag


class EndpointRegistry:
    """Holds tags and methods registered per endpoint class."""

    def __init__(self):
        self._class_tags: dict[type, tuple[Tag, ...]] = {}
        self._methods: dict[type, list[RawMethod]] = {}

    def register_class(self, endpoint: type, *tags: Tag) -> "EndpointRegistry":
        self._class_tags[endpoint] = self._class_tags.get(endpoint, ()) + tags
        self._methods.setdefault(endpoint, [])
        return self

    def register_method(
        self,
        endpoint: type,
        method_name: str,
        *tags: Tag,
        parameters: list[tuple[str, Any, list[Tag]]] | None = None,
    ) -> "EndpointRegistry":
        """Register one method with its tags.

        ``parameters`` is a list of ``(name, declared_type, tags)`` tuples in
        declaration order.
        """
        raw_parameters = [
            RawParameter(name=param_name, declared_type=declared_type, tags=tuple(param_tags))
            for param_name, declared_type, param_tags in parameters or []
        ]
        self._methods.setdefault(endpoint, []).append(
            RawMethod(name=method_name, tags=tags, parameters=raw_parameters)
        )
        return self

    def class_tags(self, endpoint: type) -> tuple[Tag, ...]:
        return self._class_tags.get(endpoint, ())

    def methods(self, endpoint: type) -> list[RawMethod]:
        return list(self._methods.get(endpoint, []))
