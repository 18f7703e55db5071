"""Descriptor source for decorated classes and Annotated parameters."""

import inspect
import types
import typing
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from iodocs_generator.introspect.base import RawMethod, RawParameter
from iodocs_generator.logging import get_logger
from iodocs_generator.tags import Tag, tags_of

logger = get_logger(__name__)

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class AnnotationSource:
    """Reads tags set by decorators and ``Annotated`` parameter metadata.

    Public methods are listed declared-first, then inherited, each class in
    definition order.
    """

    def class_tags(self, endpoint: type) -> tuple[Tag, ...]:
        return tags_of(endpoint)

    def methods(self, endpoint: type) -> list[RawMethod]:
        methods = []
        seen: set[str] = set()
        for klass in endpoint.__mro__:
            if klass is object:
                continue
            for attr_name, attr in vars(klass).items():
                if attr_name.startswith("_") or attr_name in seen:
                    continue
                seen.add(attr_name)
                func = _unwrap(attr)
                if func is None:
                    continue
                methods.append(
                    RawMethod(
                        name=attr_name,
                        tags=_method_tags(attr, func),
                        parameters=_parameters(func, bound=not isinstance(attr, staticmethod)),
                    )
                )
        return methods


def _unwrap(attr: Any):
    if isinstance(attr, (staticmethod, classmethod)):
        attr = attr.__func__
    if inspect.isfunction(attr):
        return attr
    return None


def _method_tags(attr: Any, func) -> tuple[Tag, ...]:
    inner = tags_of(func)
    if attr is func:
        return inner
    # staticmethod/classmethod may already carry a copy of the function's __dict__
    outer = tags_of(attr)
    if inner and outer[len(outer) - len(inner):] == inner:
        return outer
    return outer + inner


def _parameters(func, bound: bool) -> list[RawParameter]:
    try:
        hints = get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning(f"Could not resolve type hints for {func.__qualname__}: {e}")
        hints = {}

    params = list(inspect.signature(func).parameters.values())
    if bound and params:
        # self / cls
        params = params[1:]

    result = []
    for param in params:
        if param.kind in _SKIPPED_KINDS:
            continue
        annotation = hints.get(param.name, param.annotation)
        declared_type, tags = _split_annotation(annotation)
        result.append(RawParameter(name=param.name, declared_type=declared_type, tags=tags))
    return result


def _split_annotation(annotation: Any) -> tuple[Any, tuple[Tag, ...]]:
    """Separate an annotation into its declared type and attached tags."""
    if annotation is inspect.Parameter.empty:
        return None, ()

    tags: tuple[Tag, ...] = ()
    # get_type_hints may wrap Annotated in Optional when the default is None
    annotation = _strip_optional(annotation)
    if get_origin(annotation) is Annotated:
        tags = tuple(meta for meta in annotation.__metadata__ if isinstance(meta, Tag))
        annotation = get_args(annotation)[0]

    return _strip_optional(annotation), tags


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation
