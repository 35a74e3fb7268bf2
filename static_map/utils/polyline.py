"""
Polyline encoding utility.
Implements the Encoded Polyline Algorithm Format with the ``enc:`` prefix
used by the Static Maps API for encoded paths.
ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""
import math
from typing import List, Sequence
from googlemaps import convert
from static_map.schemas.common import Location

ENCODED_PREFIX = "enc:"


def encode(points: Sequence[Location]) -> str:
    """
    Encode a sequence of locations into an ``enc:``-prefixed polyline.
    
    Each point is encoded as the delta from the previous point, starting
    from (0, 0).
    
    Args:
        points: Ordered locations.
        
    Returns:
        Encoded polyline string, ``"enc:"`` alone for an empty sequence.
    """
    result = [ENCODED_PREFIX]
    prev_lat = 0
    prev_lng = 0
    
    for point in points:
        result.append(encode_lat_lng(point.lat - prev_lat, point.lng - prev_lng))
        prev_lat = point.lat
        prev_lng = point.lng
        
    return "".join(result)


def encode_lat_lng(d_lat: float, d_lng: float) -> str:
    return encode_value(d_lat) + encode_value(d_lng)


def encode_value(value: float) -> str:
    """Encode a single coordinate value (or delta)."""
    is_negative = value < 0
    # Halves round towards +inf, not to even
    num = math.floor(value * 1e5 + 0.5)
    num = num << 1
    if is_negative:
        num = ~num
        
    result = []
    while num > 31:
        result.append(chr(((num & 31) | 0x20) + 63))
        num >>= 5
    result.append(chr(num + 63))
    
    return "".join(result)


def decode(encoded: str) -> List[Location]:
    """
    Decode a polyline string into locations.
    
    Args:
        encoded: Polyline string, optionally ``enc:``-prefixed.
        
    Returns:
        Decoded locations with 5 decimal precision.
        
    Raises:
        ValueError: If the polyline ends in the middle of a value
    """
    if encoded.startswith(ENCODED_PREFIX):
        encoded = encoded[len(ENCODED_PREFIX):]
        
    try:
        points = convert.decode_polyline(encoded)
    except IndexError as e:
        raise ValueError("Truncated polyline") from e
        
    return [
        Location(lat=round(point["lat"], 5), lng=round(point["lng"], 5))
        for point in points
    ]
