"""Shared fixtures."""
import pytest

from helpers import FakeFetcher


@pytest.fixture
def fetcher():
    """Empty FakeFetcher; tests fill ``fetcher.pages``."""
    return FakeFetcher()
