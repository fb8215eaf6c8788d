__all__ = [
    "NucleusError",
    "NotConstructibleError",
    "UnresolvableParameterError",
    "InvalidMockError",
    "FixtureConfigurationError",
]


class NucleusError(Exception):
    """Base class for errors raised by the testing helpers."""

    pass


class NotConstructibleError(NucleusError):
    """Raised when a target is not a class, or has no constructor to inspect."""

    pass


class UnresolvableParameterError(NucleusError):
    """Raised when a constructor parameter has no class type to mock."""

    pass


class InvalidMockError(NucleusError):
    """Raised when a primitive value is provided in place of a mock."""

    pass


class FixtureConfigurationError(NucleusError):
    """Raised when a test fixture is missing the factory a helper relies on."""

    pass
