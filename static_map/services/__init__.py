"""Static map services: marker grouping, route paths and URL building."""
