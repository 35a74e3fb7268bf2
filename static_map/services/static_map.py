"""
Static map URL builder.

Reads the viewport of a live map and combines it with grouped markers and
an optional route into a Static Maps API request URL.
"""
import asyncio
from typing import Callable, Dict, List, Optional, Protocol, Tuple, Any
from static_map.core.config import settings
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.schemas.marker import Marker
from static_map.services.markers import MarkerCollection
from static_map.services.params import lat_lng_to_str, map_size_to_str, object_to_url_param
from static_map.services.route import StaticMapRoute
from static_map.utils.watcher import ReadinessWatcher

# Markers added at the ends of a route once it resolves
ROUTE_MARKER_COLOR = "green"
ROUTE_ORIGIN_LABEL = "A"
ROUTE_DESTINATION_LABEL = "B"

UrlListener = Callable[[str], None]


class LiveMap(Protocol):
    """Protocol for the interactive map a static map is created from."""
    
    def get_div_size(self) -> Tuple[int, int]:
        ...
    
    def get_zoom(self) -> int:
        ...
    
    def get_center(self) -> Location:
        ...
    
    def get_map_type_id(self) -> str:
        ...


class StaticMapBuilder:
    """
    Builds static map URLs for a live map.
    
    Each ``prepare_url()`` call is one build: it waits for a loading route
    if needed, then notifies every listener exactly once with the URL and
    returns it. A cancelled build notifies nobody.
    """
    
    def __init__(
        self,
        live_map: LiveMap,
        premium: bool = False,
        base_url: Optional[str] = None
    ):
        self.map = live_map
        self.premium = premium
        self.base_url = base_url or settings.STATIC_MAP_BASE_URL
        self.markers = MarkerCollection()
        self.route = StaticMapRoute()
        self._listeners: List[UrlListener] = []
        self._pending: Optional[asyncio.Task] = None
    
    def add_listener(self, callback: UrlListener) -> None:
        self._listeners.append(callback)
    
    def remove_listener(self, callback: UrlListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)
    
    async def prepare_url(self) -> str:
        """
        Build the static map URL.
        
        A build that is still pending from an earlier call is cancelled first.
        
        Returns:
            The assembled Static Maps API URL
            
        Raises:
            RouteResolutionTimeout: If the route did not resolve in time
            RoutingProviderError: If the route failed to resolve
            asyncio.CancelledError: If the build was cancelled
        """
        self.cancel()
        # Route state is sampled at call time, as the renderer may resolve
        # before the build task first runs
        wait_for_route = self.route.is_set() and self.route.is_loading()
        task = asyncio.get_running_loop().create_task(self._build(wait_for_route))
        self._pending = task
        try:
            return await task
        finally:
            if self._pending is task:
                self._pending = None
    
    def cancel(self) -> None:
        """Cancel a pending build so it never notifies its listeners."""
        if self._pending is not None and not self._pending.done():
            logger.info("Cancelling pending static map build")
            self._pending.cancel()
    
    async def _build(self, wait_for_route: bool) -> str:
        if wait_for_route:
            logger.info("Waiting for route directions before building static map URL")
            watcher = ReadinessWatcher(
                lambda: not self.route.is_loading(),
                interval=settings.ROUTE_POLL_INTERVAL,
                timeout=settings.ROUTE_RESOLVE_TIMEOUT,
                name="route",
            )
            try:
                await watcher.wait()
            finally:
                watcher.cancel()
            
            if self.route.get_path():
                self._add_route_markers()
        
        return self._prepare_url()
    
    def _add_route_markers(self) -> None:
        self.markers.add_marker(Marker.from_options(
            location=self.route.get_origin(),
            color=ROUTE_MARKER_COLOR,
            label=ROUTE_ORIGIN_LABEL,
        ))
        self.markers.add_marker(Marker.from_options(
            location=self.route.get_destination(),
            color=ROUTE_MARKER_COLOR,
            label=ROUTE_DESTINATION_LABEL,
        ))

    def _viewport_params(self) -> Dict[str, Any]:
        width, height = self.map.get_div_size()
        return {
            "size": map_size_to_str(width, height, premium=self.premium),
            "zoom": self.map.get_zoom(),
            "maptype": self.map.get_map_type_id().lower(),
            "center": lat_lng_to_str(self.map.get_center()),
        }
    
    def _prepare_url(self) -> str:
        url = (
            self.base_url
            + object_to_url_param(self._viewport_params())
            + self.markers.get_as_url_param()
            + self.route.get_as_url_param()
        )
        logger.info(f"Static map URL prepared ({len(url)} chars, {len(self.markers)} markers)")
        
        for listener in list(self._listeners):
            listener(url)
        return url
