"""Enumeration emulation through named class constants."""

import inspect
from typing import Any

__all__ = ["Enum"]


class Enum:
    """Base class for sets of named constants.

    Constants are the public, upper-case attributes declared on a subclass or
    inherited from an ancestor, other than methods and descriptors. A constant
    may hold a class or any other callable object. Subclasses are namespaces
    and are never instantiated.

    Example:
        >>> class Colour(Enum):
        ...     RED = "red"
        ...     GREEN = "green"
        >>> Colour.get_values()  # Returns {"RED": "red", "GREEN": "green"}
        >>> Colour.get_keys()    # Returns ["RED", "GREEN"]
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__qualname__} is an enumeration and cannot be instantiated")

    @classmethod
    def get_keys(cls) -> list[str]:
        """Get the names of the constants in the enumeration."""
        return list(cls.get_values().keys())

    @classmethod
    def get_values(cls) -> dict[str, Any]:
        """Get the value of every constant in the enumeration, keyed by name."""
        values = {}
        for klass in reversed(inspect.getmro(cls)):
            for name, value in vars(klass).items():
                if _is_constant(name, value):
                    values[name] = value
        return values


def _is_constant(name: str, value: Any) -> bool:
    if name.startswith("_") or not name.isupper():
        return False
    return not (
        inspect.isroutine(value)
        or inspect.isdatadescriptor(value)
        or isinstance(value, (classmethod, staticmethod))
    )
