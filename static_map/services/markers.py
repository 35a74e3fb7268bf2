"""
Marker collection and style-based grouping.

Markers that share an identical style are serialized together in a single
``markers=`` parameter, which keeps the static map URL short.
"""
from typing import List, Optional, Protocol, Sequence
from static_map.core.logging_config import logger
from static_map.schemas.common import Location
from static_map.schemas.marker import Marker, MarkerStyle
from static_map.services.params import lat_lng_to_str


class LiveMarker(Protocol):
    """Protocol for markers placed on an interactive map."""
    
    def get_icon(self) -> Optional[str]:
        ...
    
    def get_shadow(self) -> Optional[str]:
        ...
    
    def get_position(self) -> Location:
        ...


def group_markers(markers: Sequence[Marker]) -> List[List[Marker]]:
    """
    Partition markers into groups of identical style.
    
    Greedy first-fit: the first remaining marker seeds a group and every
    later marker with the same style joins it. Relative order is kept both
    inside groups and among the markers left for the next round.
    
    Args:
        markers: Markers in insertion order
        
    Returns:
        Non-empty, style-homogeneous groups, ordered by their seed
    """
    groups = []
    left = list(markers)
    
    while left:
        current = left[0]
        group = [current]
        rest = []
        
        for marker in left[1:]:
            if current.can_be_merged_with(marker):
                group.append(marker)
            else:
                rest.append(marker)
        
        groups.append(group)
        left = rest
    
    return groups


def serialize_group(group: Sequence[Marker]) -> str:
    """
    Serialize one marker group as a ``&markers=`` parameter.
    
    The style is read from the first marker; all members share it.
    Returns an empty string for an empty group.
    """
    if not group:
        return ""
    
    commons = group[0].style.tokens()
    commons_str = "|".join(commons) + "|" if commons else ""
    locations = "|".join(lat_lng_to_str(marker.location) for marker in group)
    
    return "&markers=" + commons_str + locations


class MarkerCollection:
    """Append-only collection of markers for one static map."""
    
    def __init__(self):
        self._markers: List[Marker] = []
    
    def add_marker(self, marker: Marker) -> None:
        self._markers.append(marker)
    
    def add_map_marker(self, map_marker: LiveMarker) -> Marker:
        """
        Add a marker read from an interactive map.
        
        Only icon, shadow and position carry over; other style fields
        are left unset.
        """
        marker = Marker(
            location=map_marker.get_position(),
            style=MarkerStyle(icon=map_marker.get_icon(), shadow=map_marker.get_shadow()),
        )
        self._markers.append(marker)
        return marker
    
    def get_all(self) -> List[Marker]:
        return list(self._markers)
    
    def get_grouped(self) -> List[List[Marker]]:
        return group_markers(self._markers)
    
    def get_as_url_param(self) -> str:
        groups = self.get_grouped()
        if groups:
            logger.debug(f"Serializing {len(self._markers)} markers in {len(groups)} groups")
        return "".join(serialize_group(group) for group in groups)
    
    def __len__(self) -> int:
        return len(self._markers)
