from pydantic import BaseModel, Field, model_validator
from typing import List, Optional, Tuple
from static_map.schemas.common import Location
from static_map.schemas.marker import Marker


# Directions Schemas
class DirectionsRoute(BaseModel):
    overview_path: List[Location] = []

class DirectionsResult(BaseModel):
    routes: List[DirectionsRoute] = []


# Viewport Schemas
class MapViewport(BaseModel):
    """Snapshot of an interactive map's viewport, usable as a live map."""
    width: int = Field(..., gt=0, description="Map div width in pixels")
    height: int = Field(..., gt=0, description="Map div height in pixels")
    zoom: int = Field(..., ge=0, le=21)
    center: Location
    map_type_id: str = "roadmap"

    def get_div_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def get_zoom(self) -> int:
        return self.zoom

    def get_center(self) -> Location:
        return self.center

    def get_map_type_id(self) -> str:
        return self.map_type_id


# Request Schemas
class MarkerCreate(BaseModel):
    location: Location
    size: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    shadow: Optional[str] = None
    label: Optional[str] = None

    def to_marker(self) -> Marker:
        return Marker.from_options(
            location=self.location,
            size=self.size,
            color=self.color,
            icon=self.icon,
            shadow=self.shadow,
            label=self.label,
        )

class RouteCreate(BaseModel):
    """
    Route attached to the static map.

    Either ``points`` (an already resolved overview path) or ``waypoints``
    (routed through the configured routing provider) must be given.
    """
    points: Optional[List[Location]] = None
    waypoints: Optional[List[Location]] = None
    vehicle_type: str = "car"

    @model_validator(mode="after")
    def check_points_or_waypoints(self):
        if self.points is None and self.waypoints is None:
            raise ValueError("Either points or waypoints must be provided")
        if self.points is not None and self.waypoints is not None:
            raise ValueError("Provide only one of points or waypoints")
        if self.waypoints is not None and len(self.waypoints) < 2:
            raise ValueError("At least two waypoints are required")
        return self

class StaticMapRequest(BaseModel):
    viewport: MapViewport
    markers: List[MarkerCreate] = []
    route: Optional[RouteCreate] = None
    premium: bool = False


# Response Schemas
class StaticMapResponse(BaseModel):
    url: str
    marker_groups: int
    has_path: bool
