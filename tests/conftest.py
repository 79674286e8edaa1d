"""Pytest configuration shared by the unit tests.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ and
the root on sys.path so helpers import as ``tests.unit...``.
"""

import pytest

from hardcoded_strings_linter.infrastructure.di.container import HardcodedStringsContainer


@pytest.fixture(autouse=True)
def fresh_container():
    """Each test sees a container built from its own working directory."""
    HardcodedStringsContainer.reset()
    yield
    HardcodedStringsContainer.reset()
