class StaticMapError(Exception):
    pass


class RouteNotResolvedError(StaticMapError):
    """Raised when route geometry is read before the directions resolved."""
    pass


class RouteResolutionTimeout(StaticMapError):
    """Raised when a route does not resolve within the configured bound."""
    pass


class RoutingProviderError(StaticMapError):
    pass
