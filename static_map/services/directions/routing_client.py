"""
Routing client abstraction.

Provides a unified interface for different routing providers (GraphHopper, Geoapify, Google).
"""

from typing import List, Protocol
from static_map.core.config import settings
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.services.directions.geoapify_client import GeoapifyClient
from static_map.services.directions.google_client import GoogleDirectionsClient
from static_map.services.directions.graphhopper_client import GraphHopperClient

class RoutingClient(Protocol):
    """Protocol for routing clients."""
    
    async def get_route_points(
        self,
        waypoints: List[Location],
        vehicle_type: str = "car"
    ) -> List[Location]:
        """Get route overview path."""
        ...


def get_routing_client() -> RoutingClient:
    """
    Factory function to get the configured routing client.
    
    Returns:
        Instance of RoutingClient implementation
    """
    provider = settings.ROUTING_PROVIDER.lower()
    
    if provider == "graphhopper":
        return GraphHopperClient()
    elif provider == "geoapify":
        return GeoapifyClient()
    elif provider == "google":
        return GoogleDirectionsClient()
    else:
        logger.warning(f"Unknown routing provider '{provider}', defaulting to GraphHopper")
        return GraphHopperClient()
