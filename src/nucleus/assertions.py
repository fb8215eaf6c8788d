"""Assertions shared by the test helpers."""

from typing import Any, Sequence, Union

from nucleus.domain import type_name
from nucleus.inspection import is_primitive, satisfied_type_names

__all__ = ["ExpectedType", "assert_is_object", "assert_instance_of"]


ExpectedType = Union[str, type]


def assert_is_object(actual: Any, message: str = ""):
    """Assert that actual is an object instance, not None or a primitive value."""
    if is_primitive(actual):
        raise AssertionError(
            message or f"Failed asserting that {actual!r} is an object"
        )


def assert_instance_of(
    expected: Union[ExpectedType, Sequence[ExpectedType]], actual: Any, message: str = ""
):
    """Assert that actual is an instance of one or several types.

    When expected is a list or tuple, actual must be an instance of every entry.
    This is useful for checking that a class also implements some abstract base.

    Args:
        expected: A class or fully-qualified type name, or a sequence of them.
        actual: The value to check.
        message: Optional message replacing the default failure message.

    Example:
        >>> assert_instance_of([FileStore, "app.Store"], FileStore())
    """
    if isinstance(expected, (list, tuple)):
        for expected_single in expected:
            assert_instance_of(expected_single, actual, message)
        return

    if isinstance(expected, str):
        matches = expected in satisfied_type_names(actual)
        expected_name = expected
    else:
        matches = isinstance(actual, expected)
        expected_name = type_name(expected)

    if not matches:
        raise AssertionError(
            message
            or f"Failed asserting that {actual!r} is an instance of {expected_name}"
        )
