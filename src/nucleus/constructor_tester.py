from typing import Any, Sequence

from nucleus.assertions import ExpectedType, assert_instance_of, assert_is_object
from nucleus.errors import FixtureConfigurationError

__all__ = ["ConstructorTester"]


class ConstructorTester:
    """Mixin adding a constructor test to a pytest test class.

    The test class defines ``make()``, returning a new instance of the class under
    test, and optionally ``constructor_types``, listing classes or type names the
    instance must all be an instance of.

    Example:
        >>> class TestScheduler(ConstructorTester):
        ...     constructor_types = [Scheduler, "app.jobs.Runner"]
        ...
        ...     def make(self):
        ...         return Impersonator().make(Scheduler)
    """

    constructor_types: Sequence[ExpectedType] = ()

    def test_constructor(self):
        make = getattr(self, "make", None)
        if not callable(make):
            raise FixtureConfigurationError(
                "Unable to test constructor. Factory function is not defined"
            )

        instance: Any = make()

        assert_is_object(instance)

        if self.constructor_types:
            assert_instance_of(list(self.constructor_types), instance)
