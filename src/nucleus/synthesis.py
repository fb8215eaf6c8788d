"""Creation of default mocks for a requested type.

Mock objects themselves come from :mod:`unittest.mock`; this module only decides
how a behaviourless stand-in for a class is built. Every synthesizer produces
mocks whose ``__class__`` is the requested type, so they pass ``isinstance``
checks and can in turn be provided to an Impersonator.
"""

from typing import Any, Callable, Optional, Protocol
from unittest import mock

__all__ = [
    "Configurator",
    "MockSynthesizer",
    "AutospecSynthesizer",
    "SpecSynthesizer",
]


Configurator = Callable[[Any], None]


class MockSynthesizer(Protocol):
    def build(self, declared_type: type, configurator: Optional[Configurator] = None) -> Any:
        """Build an empty mock standing in for an instance of declared_type.

        Args:
            declared_type: The class the mock impersonates.
            configurator: Optional callable receiving the new mock, used to set
                return values and side effects before the mock is handed out.

        Returns:
            The configured mock.
        """
        ...


class AutospecSynthesizer:
    """Build mocks with :func:`unittest.mock.create_autospec`.

    Methods of the mock check their call signatures against the real class.
    """

    def build(self, declared_type: type, configurator: Optional[Configurator] = None) -> Any:
        built = mock.create_autospec(declared_type, instance=True)
        return _configured(built, configurator)


class SpecSynthesizer:
    """Build ``NonCallableMagicMock(spec=...)`` mocks.

    Attribute access is limited to what the class defines, but calls are not
    checked against method signatures.
    """

    def build(self, declared_type: type, configurator: Optional[Configurator] = None) -> Any:
        built = mock.NonCallableMagicMock(spec=declared_type)
        return _configured(built, configurator)


def _configured(built: Any, configurator: Optional[Configurator]) -> Any:
    if configurator is not None:
        configurator(built)
    return built
