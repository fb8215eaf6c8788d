"""Introspection of constructors and of the types an object satisfies."""

import inspect
import types
from typing import (
    Annotated,
    Any,
    Optional,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from nucleus.domain import ParameterSpec, type_name
from nucleus.errors import NotConstructibleError

__all__ = [
    "PRIMITIVE_TYPES",
    "is_primitive",
    "parameter_types",
    "satisfied_type_names",
    "type_name",
]


PRIMITIVE_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    list,
    tuple,
    dict,
    set,
    frozenset,
)

_UNMOCKABLE_TYPES = frozenset(PRIMITIVE_TYPES + (object, type(None)))

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def is_primitive(value: Any) -> bool:
    """Check whether a value is a plain value rather than an object usable as a mock.

    Only exact builtin types count, so instances of user classes deriving from a
    builtin, such as a ``NamedTuple`` or a ``dict`` subclass, are objects. Classes
    count as primitive too: a class is a name for a type, not an instance standing
    in for one.
    """
    return value is None or type(value) in PRIMITIVE_TYPES or inspect.isclass(value)


def parameter_types(target: Any) -> list[ParameterSpec]:
    """Describe the parameters of a class's constructor, in declaration order.

    Parameters that carry no mockable class annotation are kept, with a
    ``declared_type`` of None, so that positions line up with the signature.
    Variadic ``*args`` and ``**kwargs`` parameters are left out.

    Args:
        target: The class to inspect.

    Returns:
        One ParameterSpec per constructor parameter, ``self`` excluded.

    Raises:
        NotConstructibleError: If target is not a class, if it does not define a
            constructor, or if its annotations cannot be resolved.

    Example:
        >>> class Service:
        ...     def __init__(self, db: Database, retries: int, *, cache: Optional[Cache] = None):
        ...         pass
        >>> parameter_types(Service)
        >>> # Returns:
        >>> # [ParameterSpec(0, "db", Database),
        >>> #  ParameterSpec(1, "retries", None),
        >>> #  ParameterSpec(2, "cache", Cache, keyword_only=True)]
    """
    if not inspect.isclass(target):
        raise NotConstructibleError(f"{target!r} is not a class")

    constructor = target.__init__
    if constructor is object.__init__:
        raise NotConstructibleError(
            f"Using an impersonator on {target.__qualname__}, which has no constructor, "
            "does not make much sense"
        )

    try:
        hints = get_type_hints(constructor, include_extras=True)
    except NameError as e:
        raise NotConstructibleError(
            f"Unable to resolve constructor annotations of {target.__qualname__}: {e}"
        ) from e

    try:
        signature = inspect.signature(constructor)
    except ValueError as e:
        raise NotConstructibleError(
            f"Unable to read the constructor signature of {target.__qualname__}"
        ) from e

    parameters = list(signature.parameters.values())[1:]

    return [
        ParameterSpec(
            position,
            parameter.name,
            _mockable_type(hints.get(parameter.name)),
            parameter.kind == inspect.Parameter.KEYWORD_ONLY,
        )
        for position, parameter in enumerate(
            p for p in parameters if p.kind not in _VARIADIC
        )
    ]


def satisfied_type_names(obj: Any) -> set[str]:
    """Name every class an object is an instance of, through its class hierarchy.

    ``obj.__class__`` is consulted rather than ``type(obj)``, so that mocks
    built with a ``spec`` report the class they impersonate. ``object`` is left
    out since every value satisfies it.

    Example:
        >>> class FileStore(Store): ...
        >>> satisfied_type_names(FileStore())  # Returns {"app.FileStore", "app.Store"}
    """
    return {
        type_name(cls)
        for cls in inspect.getmro(obj.__class__)
        if cls is not object
    }


def _mockable_type(annotation) -> Optional[type]:
    if annotation is None:
        return None

    while get_origin(annotation) in (Annotated, Union, types.UnionType):
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
            continue

        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        annotation = members[0]

    if get_origin(annotation) is not None:
        return None

    if not inspect.isclass(annotation) or annotation in _UNMOCKABLE_TYPES:
        return None

    return annotation
