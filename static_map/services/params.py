"""
Query-string serialization helpers for static map URLs.
"""
from decimal import Decimal
from typing import Any, Mapping
from static_map.core.config import settings
from static_map.schemas.common import Location


def format_coordinate(value: float) -> str:
    """
    Format a coordinate the way the map widget prints numbers.
    
    Shortest round-trip digits in positional notation (``1.0`` -> ``"1"``,
    ``5e-05`` -> ``"0.00005"``). Below 1e-6 the exponent form is kept
    without zero padding (``"1e-7"``).
    """
    if value == 0:
        return "0"
    text = repr(float(value))
    if "e" in text:
        if abs(value) < 1e-6:
            mantissa, exponent = text.split("e")
            return f"{mantissa}e{int(exponent)}"
        text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def lat_lng_to_str(location: Location) -> str:
    return f"{format_coordinate(location.lat)},{format_coordinate(location.lng)}"


def object_to_url_param(params: Mapping[str, Any]) -> str:
    """
    Serialize a mapping into ``&key=value`` pairs, in mapping order.
    
    Keys whose value is ``None`` are omitted.
    """
    return "".join(
        f"&{key}={value}" for key, value in params.items() if value is not None
    )


def map_size_to_str(width: int, height: int, premium: bool = False) -> str:
    """Clamp the map div size to the service maximum and format it as WxH."""
    limit = settings.MAX_SIZE_PREMIUM if premium else settings.MAX_SIZE
    return f"{min(width, limit)}x{min(height, limit)}"
