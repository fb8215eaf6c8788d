"""pytest plugin exposing a fresh Impersonator to every test.

Registered through the ``pytest11`` entry point, so installing the package is
enough to make the ``impersonator`` fixture available.
"""

import pytest

from nucleus.impersonator import Impersonator
from nucleus.synthesis import AutospecSynthesizer, SpecSynthesizer

AUTOSPEC_OPTION = "impersonator_autospec"


def pytest_addoption(parser):
    parser.addini(
        AUTOSPEC_OPTION,
        "Whether mocks synthesized by the impersonator fixture check call signatures",
        type="bool",
        default=True,
    )


@pytest.fixture
def impersonator(request) -> Impersonator:
    if request.config.getini(AUTOSPEC_OPTION):
        return Impersonator(AutospecSynthesizer())
    return Impersonator(SpecSynthesizer())
