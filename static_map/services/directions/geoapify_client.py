"""
Geoapify API client for route geometry.
"""

import httpx
from typing import List, Optional
from static_map.core.config import settings
from static_map.core.errors import RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.common import Location


class GeoapifyClient:
    """Client for Geoapify API."""
    
    BASE_URL = "https://api.geoapify.com/v1"
    
    # Map internal vehicle types to Geoapify profiles
    PROFILE_MAP = {
        "car": "drive",
        "van": "drive",
        "truck": "truck",
        "bike": "bicycle",
        "scooter": "bicycle",
        "foot": "walk"
    }
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key or settings.GEOAPIFY_API_KEY
        self.transport = transport
        if not self.api_key:
            logger.warning("GEOAPIFY_API_KEY not set. Routing will fail.")
    
    async def get_route_points(
        self,
        waypoints: List[Location],
        vehicle_type: str = "car"
    ) -> List[Location]:
        """
        Get the overview path of a route using Geoapify Routing API.
        
        Args:
            waypoints: Ordered locations to route through
            vehicle_type: Internal vehicle type
            
        Returns:
            Ordered route geometry
            
        Raises:
            RoutingProviderError: If the request fails or returns no geometry
        """
        if len(waypoints) < 2:
            raise RoutingProviderError(f"Not enough waypoints for route: {len(waypoints)}")
            
        profile = self.PROFILE_MAP.get(vehicle_type, "drive")
        
        # format: lat,lon|lat,lon|...
        params = {
            "waypoints": "|".join(f"{p.lat},{p.lng}" for p in waypoints),
            "mode": profile,
            "apiKey": self.api_key
        }
        
        logger.info(f"Requesting route from Geoapify: {len(waypoints)} points, profile={profile}")
        
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(f"{self.BASE_URL}/routing", params=params, timeout=30.0)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Geoapify route API error {e.response.status_code}: {e.response.text}")
            raise RoutingProviderError(f"Geoapify API failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to get route from Geoapify: {str(e)}")
            raise RoutingProviderError(f"Geoapify request failed: {e}") from e
        
        features = data.get("features") or []
        if not features:
            logger.warning("No features in Geoapify response")
            raise RoutingProviderError("Geoapify returned no route")
        
        geometry = features[0].get("geometry", {})
        geo_type = geometry.get("type")
        coordinates = geometry.get("coordinates") or []
        
        route_points = []
        if geo_type == "LineString":
            # [[lon, lat], [lon, lat], ...]
            route_points = [Location(lat=c[1], lng=c[0]) for c in coordinates]
        elif geo_type == "MultiLineString":
            # [[[lon, lat], ...], [[lon, lat], ...]]
            for segment in coordinates:
                route_points.extend(Location(lat=c[1], lng=c[0]) for c in segment)
        
        if not route_points:
            logger.warning("No usable coordinates in routing response")
            raise RoutingProviderError("Geoapify returned no usable coordinates")
        
        logger.info(f"Successfully fetched route ({len(route_points)} points)")
        return route_points
