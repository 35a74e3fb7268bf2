"""
Google Maps Directions client for route geometry.
"""

import asyncio
import googlemaps
from typing import Any, List, Optional
from static_map.core.config import settings
from static_map.core.errors import RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.utils.polyline import decode


class GoogleDirectionsClient:
    """Google Maps Directions API integration"""
    
    # Map internal vehicle types to Google travel modes
    MODE_MAP = {
        "car": "driving",
        "van": "driving",
        "truck": "driving",
        "bike": "bicycling",
        "scooter": "bicycling",
        "foot": "walking"
    }
    
    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        """
        Initialize Google Directions client.
        
        Args:
            api_key: Google Maps API key (defaults to env var)
            client: Preconfigured googlemaps client, used by tests
        """
        if client is not None:
            self.client = client
        elif api_key or settings.GOOGLE_MAPS_API_KEY:
            self.client = googlemaps.Client(key=api_key or settings.GOOGLE_MAPS_API_KEY)
        else:
            self.client = None
            logger.warning("GOOGLE_MAPS_API_KEY not set. Routing will fail.")
    
    async def get_route_points(
        self,
        waypoints: List[Location],
        vehicle_type: str = "car"
    ) -> List[Location]:
        """
        Get the overview path of the first route Google returns.
        
        Args:
            waypoints: Ordered locations; first is origin, last is destination
            vehicle_type: Internal vehicle type
            
        Returns:
            Decoded overview polyline of the route
            
        Raises:
            RoutingProviderError: If the client is not configured or the request fails
        """
        if self.client is None:
            raise RoutingProviderError("Google Directions client not configured")
        if len(waypoints) < 2:
            raise RoutingProviderError(f"Not enough waypoints for route: {len(waypoints)}")
        
        mode = self.MODE_MAP.get(vehicle_type, "driving")
        via = [p.as_tuple() for p in waypoints[1:-1]]
        
        logger.info(f"Requesting directions from Google: {len(waypoints)} points, mode={mode}")
        
        try:
            # googlemaps is synchronous
            routes = await asyncio.to_thread(
                self.client.directions,
                waypoints[0].as_tuple(),
                waypoints[-1].as_tuple(),
                mode=mode,
                waypoints=via or None,
            )
        except googlemaps.exceptions.ApiError as e:
            logger.error(f"Google Directions API error: {str(e)}")
            raise RoutingProviderError(f"Google Directions API failed: {e.status}") from e
        except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
            logger.error(f"Failed to get directions from Google: {str(e)}")
            raise RoutingProviderError(f"Google Directions request failed: {e}") from e
        
        if not routes:
            logger.warning("No routes in Google Directions response")
            raise RoutingProviderError("Google Directions returned no route")
        
        encoded = routes[0].get("overview_polyline", {}).get("points")
        if not encoded:
            raise RoutingProviderError("Google Directions route has no overview polyline")
        
        route_points = decode(encoded)
        logger.info(f"Successfully fetched directions ({len(route_points)} points)")
        return route_points
