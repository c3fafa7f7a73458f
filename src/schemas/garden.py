"""Garden schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GardenResponse(BaseModel):
    """Garden response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    owner_id: int
    created_at: datetime
    planting_count: int = 0
