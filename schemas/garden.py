# schemas/garden.py
from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from enum import Enum


class Health(str, Enum):
    """植物の状態"""
    POOR = "Poor"
    GOOD = "Good"


class GardenAdd(BaseModel):
    common_name: Optional[str] = None
    water_frequency: Optional[int] = None


class GardenAddResponse(BaseModel):
    message: str
    plant_id: int
    entry_id: UUID


class GardenPlant(BaseModel):
    """garden の1行に plants の common_name / water_frequency をマージしたもの"""
    entry_id: UUID
    plant_id: int
    common_name: str
    water_frequency: int
    watered_count: int
    health: Health


class GardenListResponse(BaseModel):
    message: str
    plants: List[GardenPlant]


class WaterRequest(BaseModel):
    entry_id: Optional[UUID] = None


class WaterResponse(BaseModel):
    message: str
    plant: GardenPlant


class RemoveResponse(BaseModel):
    message: str
    removed: int
