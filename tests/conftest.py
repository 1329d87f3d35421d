"""Shared pytest fixtures for all tests."""

import pytest

from fakes import InMemoryLocationRepository


@pytest.fixture
def in_memory_repository():
    return InMemoryLocationRepository()
