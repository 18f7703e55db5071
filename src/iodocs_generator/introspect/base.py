"""Raw descriptors read from endpoint classes.

A DescriptorSource hides how tags and declared types are obtained, so the
scanner works the same for decorated classes and explicit registrations.
"""

from typing import Any, Protocol

from pydantic import BaseModel

from iodocs_generator.tags import Tag


class RawParameter(BaseModel):
    """A declared method parameter with the tags attached to it."""

    name: str
    declared_type: Any = None
    tags: tuple[Tag, ...] = ()


class RawMethod(BaseModel):
    """A public method of an endpoint class, before normalization."""

    name: str
    tags: tuple[Tag, ...] = ()
    parameters: list[RawParameter] = []


class DescriptorSource(Protocol):
    def class_tags(self, endpoint: type) -> tuple[Tag, ...]:
        ...

    def methods(self, endpoint: type) -> list[RawMethod]:
        ...
