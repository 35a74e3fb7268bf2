import pytest
from fastapi.testclient import TestClient
from main import app
from static_map.core.config import settings
from static_map.core.errors import RoutingProviderError
from static_map.schemas.common import Location
from static_map.services import static_map_service as service_module

BASE_URL = settings.STATIC_MAP_BASE_URL

VIEWPORT = {
    "width": 300,
    "height": 300,
    "zoom": 12,
    "center": {"lat": 10.0, "lng": 20.0},
    "map_type_id": "roadmap",
}


class FakeRoutingClient:
    def __init__(self, points=None, error=None):
        self.points = points
        self.error = error
        self.calls = []

    async def get_route_points(self, waypoints, vehicle_type="car"):
        self.calls.append((waypoints, vehicle_type))
        if self.error is not None:
            raise self.error
        return self.points


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_build_url_with_markers(client):
    response = client.post("/api/static-map/url", json={
        "viewport": VIEWPORT,
        "markers": [
            {"location": {"lat": 1.0, "lng": 1.0}, "color": "green", "label": "A"},
            {"location": {"lat": 2.0, "lng": 2.0}, "color": "green", "label": "B"},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["url"] == (
        BASE_URL
        + "&size=300x300&zoom=12&maptype=roadmap&center=10,20"
        + "&markers=color:green|label:A|1,1&markers=color:green|label:B|2,2"
    )
    assert data["marker_groups"] == 2
    assert data["has_path"] is False


def test_build_url_with_route_points(client):
    response = client.post("/api/static-map/url", json={
        "viewport": VIEWPORT,
        "route": {"points": [{"lat": 38.5, "lng": -120.2}, {"lat": 40.7, "lng": -120.95}]},
    })

    assert response.status_code == 200
    data = response.json()
    assert data["url"].endswith(
        "&markers=color:green|label:A|38.5,-120.2"
        "&markers=color:green|label:B|40.7,-120.95"
        "&path=color:0xff0000ff|weight:3|enc:_p~iF~ps|U_ulLnnqC"
    )
    assert data["has_path"] is True


def test_build_url_with_waypoints(client, monkeypatch):
    routed = [Location(lat=38.5, lng=-120.2), Location(lat=39.0, lng=-120.5), Location(lat=40.7, lng=-120.95)]
    fake = FakeRoutingClient(points=routed)
    monkeypatch.setattr(service_module, "get_routing_client", lambda: fake)

    response = client.post("/api/static-map/url", json={
        "viewport": VIEWPORT,
        "route": {
            "waypoints": [{"lat": 38.5, "lng": -120.2}, {"lat": 40.7, "lng": -120.95}],
            "vehicle_type": "truck",
        },
    })

    assert response.status_code == 200
    assert fake.calls[0][1] == "truck"
    assert "&markers=color:green|label:B|40.7,-120.95" in response.json()["url"]
    assert response.json()["has_path"] is True


def test_routing_failure_returns_502(client, monkeypatch):
    fake = FakeRoutingClient(error=RoutingProviderError("GraphHopper API failed: 500"))
    monkeypatch.setattr(service_module, "get_routing_client", lambda: fake)

    response = client.post("/api/static-map/url", json={
        "viewport": VIEWPORT,
        "route": {"waypoints": [{"lat": 1.0, "lng": 1.0}, {"lat": 2.0, "lng": 2.0}]},
    })

    assert response.status_code == 502


def test_route_requires_points_or_waypoints(client):
    response = client.post("/api/static-map/url", json={"viewport": VIEWPORT, "route": {}})
    assert response.status_code == 422


def test_invalid_location_rejected(client):
    response = client.post("/api/static-map/url", json={
        "viewport": VIEWPORT,
        "markers": [{"location": {"lat": 95.0, "lng": 1.0}}],
    })
    assert response.status_code == 422
