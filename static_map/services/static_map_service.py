from fastapi import HTTPException, status
from static_map.core.errors import RouteNotResolvedError, RouteResolutionTimeout, RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.static_map import StaticMapRequest, StaticMapResponse
from static_map.services.directions.renderer import ProviderDirectionsRenderer, ResolvedDirectionsRenderer
from static_map.services.directions.routing_client import get_routing_client
from static_map.services.static_map import StaticMapBuilder


class StaticMapService:
    """
    Service layer turning API requests into static map URLs.
    
    Every request gets its own builder; nothing is shared between requests.
    """
    
    async def build_url(self, request_data: StaticMapRequest) -> StaticMapResponse:
        """
        Build a static map URL for a viewport, markers and optional route.
        
        Args:
            request_data: Viewport snapshot, markers and route
            
        Returns:
            The URL with a summary of what it contains
            
        Raises:
            HTTPException 502: If the routing provider failed
            HTTPException 504: If the route did not resolve in time
        """
        builder = StaticMapBuilder(request_data.viewport, premium=request_data.premium)
        
        for marker_data in request_data.markers:
            builder.markers.add_marker(marker_data.to_marker())
        
        renderer = None
        route = request_data.route
        if route is not None:
            if route.points is not None:
                renderer = ResolvedDirectionsRenderer.from_points(route.points)
            else:
                renderer = ProviderDirectionsRenderer(
                    get_routing_client(), route.waypoints, route.vehicle_type
                ).start()
            builder.route.set_renderer(renderer)
        
        try:
            url = await builder.prepare_url()
        except RouteResolutionTimeout as e:
            logger.error(f"Static map build timed out: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                detail="Route did not resolve in time"
            )
        except RoutingProviderError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Routing provider failed: {str(e)}"
            )
        except RouteNotResolvedError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e)
            )
        finally:
            builder.route.cancel()
            if isinstance(renderer, ProviderDirectionsRenderer):
                renderer.cancel()
        
        return StaticMapResponse(
            url=url,
            marker_groups=len(builder.markers.get_grouped()),
            has_path="&path=" in url,
        )


static_map_service = StaticMapService()
