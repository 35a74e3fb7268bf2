from fastapi import APIRouter
from static_map.schemas.static_map import StaticMapRequest, StaticMapResponse
from static_map.services.static_map_service import static_map_service
from static_map.core.logging_config import logger

router = APIRouter()


@router.post("/url", response_model=StaticMapResponse)
async def create_static_map_url(request_data: StaticMapRequest):
    """
    Build a Static Maps API URL for the given map state.
    
    Markers sharing a style are merged into one markers= parameter. A route
    given as waypoints is resolved through the configured routing provider
    first, and its ends are marked A and B.
    
    Example:
        ```json
        {
            "viewport": {
                "width": 300, "height": 300, "zoom": 12,
                "center": {"lat": 10.0, "lng": 20.0},
                "map_type_id": "roadmap"
            },
            "markers": [
                {"location": {"lat": 1.0, "lng": 1.0}, "color": "green", "label": "A"}
            ]
        }
        ```
    """
    logger.info(
        f"Building static map URL: markers={len(request_data.markers)}, "
        f"route={'yes' if request_data.route else 'no'}"
    )
    return await static_map_service.build_url(request_data)
