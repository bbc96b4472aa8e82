"""
Pytest configuration for AI Attraction Finder tests.

Sets up test environment and global fixtures.
"""
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")


def make_gemini_response(text, grounding_chunks=None):
    """
    Build a stand-in for a google-genai GenerateContentResponse.

    Only the attributes the service reads are populated: the first
    candidate's text part, its grounding metadata, and response.text.
    """
    parts = [SimpleNamespace(text=text)] if text else []
    metadata = None
    if grounding_chunks is not None:
        metadata = SimpleNamespace(grounding_chunks=grounding_chunks)

    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=parts),
        grounding_metadata=metadata,
    )
    return SimpleNamespace(candidates=[candidate], text=text)


def make_maps_chunk(uri, title="Place"):
    """A grounding chunk carrying a Google Maps reference."""
    return SimpleNamespace(maps=SimpleNamespace(uri=uri, title=title), web=None)


@pytest.fixture
def mock_gemini_client():
    """
    Mock Gemini client whose async generate_content is an AsyncMock.

    Set mock_gemini_client.aio.models.generate_content.return_value (or
    side_effect) in the test.
    """
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock()
    return mock_client


@pytest.fixture
def gemini_response():
    """Factory fixture: gemini_response(text, grounding_chunks=None)."""
    return make_gemini_response


@pytest.fixture
def maps_chunk():
    """Factory fixture: maps_chunk(uri, title="Place")."""
    return make_maps_chunk
