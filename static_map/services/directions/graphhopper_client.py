"""
GraphHopper API client for route geometry.

Handles communication with the GraphHopper Routing API.
"""

import httpx
from typing import List, Optional
from static_map.core.config import settings
from static_map.core.errors import RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.utils.polyline import decode


class GraphHopperClient:
    """Client for GraphHopper API."""
    
    BASE_URL = "https://graphhopper.com/api/1"
    
    # Map internal vehicle types to GraphHopper profiles
    PROFILE_MAP = {
        "car": "car",
        "van": "car",  # GraphHopper free tier has limited profiles
        "truck": "truck",
        "bike": "bike",
        "scooter": "scooter",
        "foot": "foot"
    }
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize GraphHopper client.
        
        Args:
            api_key: GraphHopper API key (defaults to env var)
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key or settings.GRAPHHOPPER_API_KEY
        self.transport = transport
        if not self.api_key:
            logger.warning("GRAPHHOPPER_API_KEY not set. Routing will fail.")
    
    async def get_route_points(
        self,
        waypoints: List[Location],
        vehicle_type: str = "car"
    ) -> List[Location]:
        """
        Get the overview path of a route through the waypoints.
        
        Args:
            waypoints: Ordered locations to route through
            vehicle_type: Internal vehicle type
            
        Returns:
            Ordered route geometry
            
        Raises:
            RoutingProviderError: If the request fails or returns no path
        """
        if len(waypoints) < 2:
            raise RoutingProviderError(f"Not enough waypoints for route: {len(waypoints)}")
            
        profile = self.PROFILE_MAP.get(vehicle_type, "car")
        
        # GraphHopper expects [lon, lat] arrays
        points = [[p.lng, p.lat] for p in waypoints]
        
        payload = {
            "points": points,
            "profile": profile,
            "elevation": False,
            "instructions": False,
            "calc_points": True,
            "points_encoded": True
        }
        
        logger.info(f"Requesting route from GraphHopper: {len(points)} points, profile={profile}")
        logger.debug(f"Route points: {points}")
        
        url = f"{self.BASE_URL}/route"
        
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    url, params={"key": self.api_key}, json=payload, timeout=30.0
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"GraphHopper route API error {e.response.status_code}: {e.response.text}")
            raise RoutingProviderError(f"GraphHopper API failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to get route from GraphHopper: {str(e)}")
            raise RoutingProviderError(f"GraphHopper request failed: {e}") from e
        
        # Extract polyline from first path
        paths = data.get("paths") or []
        if not paths or not paths[0].get("points"):
            logger.warning("No path in GraphHopper response")
            raise RoutingProviderError("GraphHopper returned no path")
        
        route_points = decode(paths[0]["points"])
        logger.info(f"Successfully fetched route ({len(route_points)} points)")
        return route_points
