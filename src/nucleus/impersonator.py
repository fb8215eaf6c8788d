"""Automatic construction of objects under test with mocked dependencies.

An :class:`Impersonator` reads the constructor annotations of a class and
supplies a mock for each parameter. Mocks handed to :meth:`Impersonator.provide`
are indexed under every class they are an instance of and reused whenever a
parameter asks for one of those classes; every other parameter receives a
fresh, empty mock.

Example:
    >>> impersonator = Impersonator()
    >>> impersonator.mock(Clock, lambda clock: setattr(clock.now, "return_value", 0))
    >>> scheduler = impersonator.make(Scheduler)  # Scheduler(clock: Clock, store: Store)
    >>> # scheduler receives the configured Clock mock and an empty Store mock
"""

import logging
from typing import Any, Iterable, Optional

from nucleus.domain import ParameterSpec
from nucleus.errors import UnresolvableParameterError
from nucleus.inspection import parameter_types, satisfied_type_names
from nucleus.registry import MockRegistry, TypeKey
from nucleus.synthesis import AutospecSynthesizer, Configurator, MockSynthesizer

__all__ = ["Impersonator"]

logger = logging.getLogger(__name__)


class Impersonator:
    """Builds objects whose constructor arguments are all mocks.

    Provided mocks are kept in a :class:`MockRegistry` keyed by type name. When
    two provided mocks satisfy the same type, the one provided last is used for
    it. Where a constructor takes two parameters of the same type, or mocks
    share conflicting base classes, build the object by hand instead.

    Args:
        synthesizer: Builds the mocks for parameters nothing was provided for.
            Defaults to an :class:`AutospecSynthesizer`.
    """

    def __init__(self, synthesizer: Optional[MockSynthesizer] = None):
        self._synthesizer = synthesizer or AutospecSynthesizer()
        self._provided = MockRegistry()

    @property
    def provided(self) -> MockRegistry:
        return self._provided

    @property
    def synthesizer(self) -> MockSynthesizer:
        return self._synthesizer

    def make(self, target: type) -> Any:
        """Construct target, passing a mock for each constructor parameter.

        Scalar and other non-class parameters cannot be mocked, so a target with
        any such parameter cannot be built this way.

        Args:
            target: The class to construct.

        Returns:
            The new instance of target.

        Raises:
            NotConstructibleError: If target is not a class with a constructor.
            UnresolvableParameterError: If a parameter has no mockable class type.
        """
        parameters = parameter_types(target)

        args = []
        kwargs = {}
        for parameter in parameters:
            resolved = self._resolve_for(target, parameter)
            if parameter.keyword_only:
                kwargs[parameter.name] = resolved
            else:
                args.append(resolved)

        return target(*args, **kwargs)

    def provide(self, mock: Any, types: Optional[Iterable[TypeKey]] = None) -> Any:
        """Register a mock to be used for every type it satisfies.

        Without ``types``, the mock is indexed under its class and each of that
        class's ancestors, abstract bases and protocols included. Classes the
        mock satisfies only virtually, for instance through ``ABC.register``,
        have to be listed explicitly through ``types``, which then replaces the
        inferred set.

        Args:
            mock: The mock instance.
            types: Optional classes or type names to index the mock under.

        Returns:
            The mock, for chaining.

        Raises:
            InvalidMockError: If mock is a primitive value such as a string or list.
        """
        type_names = satisfied_type_names(mock) if types is None else list(types)
        self._provided.insert(mock, type_names)
        logger.debug("Provided %r for %s", mock, sorted(map(str, type_names)))

        return mock

    def mock(self, declared_type: type, configurator: Optional[Configurator] = None) -> Any:
        """Build a mock of declared_type, configure it, and provide it.

        Args:
            declared_type: The class to mock.
            configurator: Optional callable receiving the mock before it is provided.

        Returns:
            The provided mock.
        """
        return self.provide(self._synthesizer.build(declared_type, configurator))

    def resolve(self, parameter: ParameterSpec) -> Any:
        """Pick the mock to pass for a single constructor parameter.

        A mock provided for the parameter's declared type is preferred; failing
        that, a new empty mock is built. Built mocks are not remembered, so two
        parameters of the same unprovided type receive two different mocks.

        Raises:
            UnresolvableParameterError: If the parameter has no declared class.
        """
        return self._resolve_for(None, parameter)

    def build_mock(self, declared_type: type) -> Any:
        """Build the empty mock used for a parameter nothing was provided for.

        Override this to use a different mock style for every synthesized mock.
        """
        return self._synthesizer.build(declared_type)

    def _resolve_for(self, target: Optional[type], parameter: ParameterSpec) -> Any:
        if parameter.declared_type is None:
            owner = f" of {target.__qualname__}" if target is not None else ""
            raise UnresolvableParameterError(
                f"Unable to resolve parameter <{parameter.name}> at position "
                f"{parameter.position}{owner}: only parameters annotated with a "
                "class can be mocked"
            )

        provided = self._provided.lookup(parameter.declared_type)
        if provided is not None:
            logger.debug("Resolved <%s> to provided mock for %s", parameter.name, parameter.type_name)
            return provided

        logger.debug("Synthesizing mock of %s for <%s>", parameter.type_name, parameter.name)
        return self.build_mock(parameter.declared_type)
