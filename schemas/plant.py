from pydantic import BaseModel
from typing import Optional


class SpeciesCreate(BaseModel):
    common_name: Optional[str] = None
    water_frequency: Optional[int] = None


class SpeciesCreated(BaseModel):
    plant_id: int


class SpeciesResponse(BaseModel):
    plant_id: int
    common_name: str
    water_frequency: int

    class Config:
        from_attributes = True
