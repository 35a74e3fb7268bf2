"""
Pytest configuration and fixtures for static map tests.
"""

import pytest
from static_map.core.config import settings
from static_map.schemas.common import Location
from static_map.schemas.static_map import DirectionsResult, DirectionsRoute, MapViewport


class PendingRenderer:
    """Directions renderer resolved by hand from a test."""

    def __init__(self, route_index=0):
        self.directions = None
        self.route_index = route_index

    def resolve(self, points):
        self.directions = DirectionsResult(routes=[DirectionsRoute(overview_path=points)])

    def get_directions(self):
        return self.directions

    def get_route_index(self):
        return self.route_index


@pytest.fixture
def viewport():
    return MapViewport(
        width=300,
        height=300,
        zoom=12,
        center=Location(lat=10.0, lng=20.0),
        map_type_id="roadmap",
    )


@pytest.fixture
def route_points():
    return [Location(lat=38.5, lng=-120.2), Location(lat=40.7, lng=-120.95)]


@pytest.fixture
def pending_renderer():
    return PendingRenderer()


@pytest.fixture
def short_timeout(monkeypatch):
    monkeypatch.setattr(settings, "ROUTE_RESOLVE_TIMEOUT", 0.1)
    return 0.1
