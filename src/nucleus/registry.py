"""Lookup table from type names to the mocks provided for them."""

import inspect
import logging
from typing import Any, Iterable, Optional, Union

from nucleus.domain import type_name
from nucleus.errors import InvalidMockError
from nucleus.inspection import is_primitive

__all__ = ["MockRegistry", "TypeKey"]

logger = logging.getLogger(__name__)


TypeKey = Union[str, type]


class MockRegistry:
    """Mapping from fully-qualified type names to provided mock instances.

    A name maps to at most one mock. Inserting a mock under a name that is
    already taken replaces the previous mock, so when several mocks satisfy the
    same type, the one inserted last wins.

    Example:
        >>> registry = MockRegistry()
        >>> registry.insert(store_mock, {"app.FileStore", "app.Store"})
        >>> registry.lookup(Store)         # Returns store_mock
        >>> registry.lookup("app.Cache")   # Returns None
    """

    def __init__(self):
        self._mocks: dict[str, Any] = {}

    def insert(self, mock: Any, type_names: Iterable[TypeKey]):
        """Associate a mock with every one of the given type names.

        Args:
            mock: The mock instance to store. Shared by reference.
            type_names: Names (or classes) of the types the mock satisfies.

        Raises:
            InvalidMockError: If mock is a primitive value rather than an object.
            TypeError: If a type name is neither a string nor a class. Nothing is
                inserted in that case.
        """
        if is_primitive(mock):
            raise InvalidMockError(
                f"A mock cannot be a string, a collection or another primitive value, "
                f"got {type(mock).__name__}"
            )

        names = [_as_name(key) for key in type_names]

        for name in names:
            if name in self._mocks and self._mocks[name] is not mock:
                logger.debug("Replacing mock provided for %s", name)
            self._mocks[name] = mock

    def lookup(self, key: TypeKey) -> Optional[Any]:
        return self._mocks.get(_as_name(key))

    def type_names(self) -> set[str]:
        return set(self._mocks.keys())

    def __contains__(self, key: TypeKey) -> bool:
        return _as_name(key) in self._mocks

    def __len__(self) -> int:
        return len(self._mocks)


def _as_name(key: TypeKey) -> str:
    if isinstance(key, str):
        return key
    if not inspect.isclass(key):
        raise TypeError(f"Expected a class or a type name, got {key!r}")
    return type_name(key)
