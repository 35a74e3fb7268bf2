from pydantic import BaseModel, ConfigDict
from typing import Optional
from static_map.schemas.common import Location

# Serialization order of style tokens inside a markers= parameter
STYLE_FIELDS = ("color", "size", "icon", "shadow", "label")


class MarkerStyle(BaseModel):
    """
    Visual style of a static map marker.

    Every field is optional and ``None`` is the only "absent" value, so two
    styles are equal exactly when all five fields are equal.
    """
    model_config = ConfigDict(frozen=True)

    size: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    shadow: Optional[str] = None
    label: Optional[str] = None

    def tokens(self) -> list[str]:
        """Return ``field:value`` tokens for the fields that are set."""
        return [
            f"{name}:{getattr(self, name)}"
            for name in STYLE_FIELDS
            if getattr(self, name) is not None
        ]


class Marker(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    style: MarkerStyle = MarkerStyle()

    @classmethod
    def from_options(
        cls,
        location: Location,
        size: Optional[str] = None,
        color: Optional[str] = None,
        icon: Optional[str] = None,
        shadow: Optional[str] = None,
        label: Optional[str] = None,
    ) -> "Marker":
        style = MarkerStyle(size=size, color=color, icon=icon, shadow=shadow, label=label)
        return cls(location=location, style=style)

    def can_be_merged_with(self, other: "Marker") -> bool:
        return self.style == other.style
