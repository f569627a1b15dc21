"""Shared pytest fixtures for the artwork selector test-suite."""

from typing import List

import pytest

from artwork_selector.config import get_settings
from artwork_selector.models import Artwork

from tests.fakes import FakeRecordSource, make_artworks


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def artworks() -> List[Artwork]:
    return make_artworks(23)


@pytest.fixture
def source(artworks) -> FakeRecordSource:
    return FakeRecordSource(artworks, page_size=10)
