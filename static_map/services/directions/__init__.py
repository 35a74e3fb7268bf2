"""
Directions collaborators for static map routes.

This package provides:
- Renderers exposing resolved directions to a static map route
- Routing clients fetching route geometry from GraphHopper, Geoapify or Google
"""

from .routing_client import RoutingClient, get_routing_client
from .graphhopper_client import GraphHopperClient
from .geoapify_client import GeoapifyClient
from .google_client import GoogleDirectionsClient
from .renderer import DirectionsRenderer, ResolvedDirectionsRenderer, ProviderDirectionsRenderer

__all__ = [
    "RoutingClient",
    "get_routing_client",
    "GraphHopperClient",
    "GeoapifyClient",
    "GoogleDirectionsClient",
    "DirectionsRenderer",
    "ResolvedDirectionsRenderer",
    "ProviderDirectionsRenderer",
]
