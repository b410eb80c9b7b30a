"""Global pytest fixtures."""

import pytest

from wiki.services.page_storage import reset_storage_service
from wiki.services.renderer import reset_renderer


@pytest.fixture(autouse=True)
def pages_path(settings, tmp_path):
    """Keep every test's pages in its own temporary directory."""
    path = tmp_path / "pages"
    settings.WIKI_PAGES_PATH = path
    reset_storage_service()
    reset_renderer()
    yield path
    reset_storage_service()
    reset_renderer()


@pytest.fixture
def sample_page_body():
    """Sample page body for testing."""
    return b"""Test Page

This is a test page with some content.
It spans several lines.
"""
