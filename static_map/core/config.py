from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    STATIC_MAP_BASE_URL: str = "http://maps.googleapis.com/maps/api/staticmap?sensor=false"

    # Static Maps API pixel limits
    MAX_SIZE: int = 640
    MAX_SIZE_PREMIUM: int = 2048

    ROUTE_PATH_COLOR: str = "0xff0000ff"
    ROUTE_PATH_WEIGHT: int = 3

    # Seconds
    ROUTE_POLL_INTERVAL: float = 0.02
    RENDERER_POLL_INTERVAL: float = 0.01
    ROUTE_RESOLVE_TIMEOUT: float = 10.0

    ROUTING_PROVIDER: str = "graphhopper"  # "graphhopper", "geoapify" or "google"
    GRAPHHOPPER_API_KEY: Optional[str] = None
    GEOAPIFY_API_KEY: Optional[str] = None
    GOOGLE_MAPS_API_KEY: Optional[str] = None

    ENVIRONMENT: str = "development"  # "development" or "production"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
