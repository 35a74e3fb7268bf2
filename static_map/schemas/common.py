from pydantic import BaseModel, ConfigDict, Field

class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude", ge=-90, le=90)
    lng: float = Field(..., description="Longitude", ge=-180, le=180)

    def as_tuple(self) -> tuple[float, float]:
        return self.lat, self.lng
