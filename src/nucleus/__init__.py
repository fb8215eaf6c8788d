"""Unit-testing support helpers.

Builds objects under test with mocked collaborators, checks constructors, and
emulates enumerations through named class constants.

Key Features:
    - Constructor introspection through standard type hints
    - Reuse of provided mocks for every class they are an instance of
    - Empty ``unittest.mock`` mocks for everything else
    - A pytest fixture handing each test its own Impersonator

Basic Usage:
    >>> from nucleus.impersonator import Impersonator
    >>>
    >>> impersonator = Impersonator()
    >>> impersonator.provide(FakeStore())
    >>> service = impersonator.make(Service)

The library consists of several modules:
    - impersonator: Construction of objects with mocked dependencies
    - inspection: Constructor and class hierarchy introspection
    - registry: Lookup of provided mocks by type name
    - synthesis: Creation of empty mocks
    - assertions, constructor_tester: Test-case helpers
    - enumeration: Enumeration emulation
    - plugin: pytest integration
    - errors: Library-specific exceptions
"""
