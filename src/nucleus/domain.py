"""Domain models used throughout the library."""

from dataclasses import dataclass
from typing import Optional

__all__ = ["ParameterSpec", "type_name"]


def type_name(cls: type) -> str:
    """Return the fully-qualified name a class is registered and looked up under.

    Example:
        >>> type_name(collections.OrderedDict)  # Returns "collections.OrderedDict"
    """
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class ParameterSpec:
    """Represents one parameter of a constructor.

    Attributes:
        position: Index of the parameter in the signature, not counting ``self``.
        name: The parameter name in the constructor's signature.
        declared_type: The class the parameter is annotated with, or None when the
            parameter is untyped or typed with something that cannot be mocked.
        keyword_only: Whether the argument must be supplied by name.
    """

    position: int
    name: str
    declared_type: Optional[type]
    keyword_only: bool = False

    @property
    def type_name(self) -> Optional[str]:
        if self.declared_type is None:
            return None
        return type_name(self.declared_type)
