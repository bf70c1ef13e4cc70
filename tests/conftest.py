"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_markdown():
    """Markdown article as delivered by an RSS feed."""
    return """# Release Notes

The new version ships with **faster** startup and a [changelog](https://example.com/changes).

- Smaller install size
- Better error messages

> Upgrading is recommended for all users.

Run `pip install --upgrade tool` to update.
"""


@pytest.fixture
def sample_text():
    """Plain text article with paragraph breaks."""
    return """First paragraph of a plain article.

Second paragraph, separated by a blank line.

Third paragraph closes the article."""


@pytest.fixture
def sample_html():
    """Article body that is already HTML."""
    return (
        "<article><h2>Title</h2><p>First paragraph.</p>"
        "<p>Second <em>paragraph</em>.</p><ul><li>One</li><li>Two</li></ul></article>"
    )
