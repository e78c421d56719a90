"""
Shared fixtures for LocationPulse tests.
"""

import json

import pytest

from src.models.location import Location, LocationMetadata


@pytest.fixture
def locations():
    """Two locations, only the first has metadata."""
    return [
        Location(id="a", latitude=1, longitude=2),
        Location(id="b", latitude=3, longitude=4)
    ]


@pytest.fixture
def metadata():
    """Two metadata records sharing id "a"; the first must win."""
    return [
        LocationMetadata(id="a", type="park", rating=4, reviews=10),
        LocationMetadata(id="a", type="park", rating=2, reviews=5)
    ]


@pytest.fixture
def locations_text(locations):
    return json.dumps([location.to_dict() for location in locations])


@pytest.fixture
def metadata_text(metadata):
    return json.dumps([record.to_dict() for record in metadata])
