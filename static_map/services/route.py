"""
Route path serialization for static maps.
"""
from typing import List, Optional, Sequence
from static_map.core.config import settings
from static_map.core.errors import RouteNotResolvedError, RoutingProviderError
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.schemas.static_map import DirectionsResult
from static_map.services.directions.renderer import DirectionsRenderer
from static_map.services.params import lat_lng_to_str
from static_map.utils import polyline
from static_map.utils.watcher import ReadinessWatcher


def points_to_str(points: Sequence[Location]) -> str:
    return "|".join(lat_lng_to_str(point) for point in points)


def points_to_encoded_str(points: Sequence[Location]) -> str:
    return polyline.encode(points)


def assemble_path(points: Sequence[Location]) -> str:
    """
    Build the ``&path=`` parameter for an ordered point sequence.
    
    The encoded representation is used only when it is strictly shorter
    than the verbatim ``lat,lng|lat,lng`` list.
    
    Args:
        points: Route overview path
        
    Returns:
        Path parameter, or an empty string when there are no points
    """
    if not points:
        return ""
    
    verbatim = points_to_str(points)
    encoded = points_to_encoded_str(points)
    points_str = encoded if len(encoded) < len(verbatim) else verbatim
    
    style = f"color:{settings.ROUTE_PATH_COLOR}|weight:{settings.ROUTE_PATH_WEIGHT}"
    return f"&path={style}|{points_str}"


class StaticMapRoute:
    """
    Route drawn on a static map.
    
    Attaching a renderer starts polling it; the route stays loading until
    the renderer returns directions (or fails).
    """
    
    def __init__(self):
        self._renderer: Optional[DirectionsRenderer] = None
        self._directions: Optional[DirectionsResult] = None
        self._error: Optional[RoutingProviderError] = None
        self._is_loading = False
        self._watcher: Optional[ReadinessWatcher] = None
    
    def set_renderer(self, renderer: DirectionsRenderer) -> None:
        """Attach a renderer. Must be called from a running event loop."""
        self.cancel()
        self._renderer = renderer
        self._directions = None
        self._error = None
        self._is_loading = True
        
        self._watcher = ReadinessWatcher(
            self._poll_renderer,
            interval=settings.RENDERER_POLL_INTERVAL,
            name="directions renderer",
        ).start()
    
    def _poll_renderer(self) -> bool:
        try:
            directions = self._renderer.get_directions()
        except RoutingProviderError as e:
            logger.error(f"Directions could not be resolved: {str(e)}")
            self._error = e
            self._is_loading = False
            return True
        
        if directions is None:
            return False
        
        self._directions = directions
        self._is_loading = False
        return True
    
    def is_set(self) -> bool:
        return self._renderer is not None
    
    def is_loading(self) -> bool:
        return self._is_loading
    
    def get_directions(self) -> Optional[DirectionsResult]:
        return self._directions
    
    def get_path(self) -> List[Location]:
        """
        Return the overview path of the selected route.
        
        Raises:
            RoutingProviderError: If the directions failed to resolve
            RouteNotResolvedError: If the directions are not available yet
        """
        if self._error is not None:
            raise self._error
        if self._directions is None:
            raise RouteNotResolvedError("Route directions are not resolved yet")
        
        route_index = self._renderer.get_route_index()
        try:
            return self._directions.routes[route_index].overview_path
        except IndexError:
            raise RouteNotResolvedError(f"Directions have no route at index {route_index}")
    
    def get_origin(self) -> Location:
        path = self.get_path()
        if not path:
            raise RouteNotResolvedError("Selected route has an empty path")
        return path[0]
    
    def get_destination(self) -> Location:
        path = self.get_path()
        if not path:
            raise RouteNotResolvedError("Selected route has an empty path")
        return path[-1]
    
    def get_as_url_param(self) -> str:
        if self._renderer is None or self._directions is None:
            return ""
        return assemble_path(self.get_path())
    
    def cancel(self) -> None:
        if self._watcher is not None:
            self._watcher.cancel()
