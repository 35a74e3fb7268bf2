"""
Directions renderers.

A renderer is the route collaborator of a static map: it exposes the
directions once they are available and the index of the selected route.
"""
import asyncio
from typing import List, Optional, Protocol
from static_map.core.errors import RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.schemas.static_map import DirectionsResult, DirectionsRoute
from static_map.services.directions.routing_client import RoutingClient


class DirectionsRenderer(Protocol):
    """Protocol for directions renderers."""
    
    def get_directions(self) -> Optional[DirectionsResult]:
        """Return the directions, or None while they are not available."""
        ...
    
    def get_route_index(self) -> int:
        ...


class ResolvedDirectionsRenderer:
    """Renderer for directions that are already known."""
    
    def __init__(self, directions: DirectionsResult, route_index: int = 0):
        self.directions = directions
        self.route_index = route_index
    
    @classmethod
    def from_points(cls, points: List[Location]) -> "ResolvedDirectionsRenderer":
        return cls(DirectionsResult(routes=[DirectionsRoute(overview_path=points)]))
    
    def get_directions(self) -> Optional[DirectionsResult]:
        return self.directions
    
    def get_route_index(self) -> int:
        return self.route_index


class ProviderDirectionsRenderer:
    """
    Renderer resolving its directions through a routing provider.
    
    The request runs in a background task started by ``start()``; until it
    finishes ``get_directions()`` returns None.
    """
    
    def __init__(
        self,
        client: RoutingClient,
        waypoints: List[Location],
        vehicle_type: str = "car"
    ):
        self.client = client
        self.waypoints = waypoints
        self.vehicle_type = vehicle_type
        self._task: Optional[asyncio.Task] = None
    
    def start(self) -> "ProviderDirectionsRenderer":
        if self._task is None:
            logger.info(f"Resolving directions through {len(self.waypoints)} waypoints")
            self._task = asyncio.get_running_loop().create_task(
                self.client.get_route_points(self.waypoints, self.vehicle_type)
            )
        return self
    
    def get_directions(self) -> Optional[DirectionsResult]:
        """
        Return the resolved directions.
        
        Raises:
            RoutingProviderError: If the routing request failed
        """
        if self._task is None or not self._task.done():
            return None
        
        if self._task.cancelled():
            raise RoutingProviderError("Routing request was cancelled")
        
        error = self._task.exception()
        if error is not None:
            if isinstance(error, RoutingProviderError):
                raise error
            raise RoutingProviderError(f"Routing request failed: {error}") from error
        
        return DirectionsResult(routes=[DirectionsRoute(overview_path=self._task.result())])
    
    def get_route_index(self) -> int:
        return 0
    
    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
