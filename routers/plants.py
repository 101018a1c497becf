from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from uuid import UUID

from db.database import get_db
from auth.deps import get_current_user
from errors import NotFoundError, ValidationError
from models.user import User
from schemas.garden import (
    GardenAdd,
    GardenAddResponse,
    GardenListResponse,
    RemoveResponse,
    WaterRequest,
    WaterResponse,
)
from services import garden_service

router = APIRouter(
    prefix="/plants",
    tags=["Plants"],
)


@router.post("", response_model=GardenAddResponse, status_code=status.HTTP_201_CREATED)
def add_plant(
    body: GardenAdd,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """garden に植物を追加する。種がカタログに無ければ登録する"""
    entry = garden_service.add_to_garden(db, user.user_id, body.common_name, body.water_frequency)
    return {
        "message": "Plant added successfully",
        "plant_id": entry.plant_id,
        "entry_id": entry.entry_id,
    }


@router.get("", response_model=GardenListResponse)
def get_garden(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    plants = garden_service.list_garden(db, user.user_id)

    # 空の garden は 404 で返す
    if not plants:
        raise NotFoundError("No plants found for the given user")

    return {"message": "Plants fetched successfully", "plants": plants}


# /{entry_id} より先に定義しておく
@router.put("/water", response_model=WaterResponse)
def water_plant(
    body: WaterRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if body.entry_id is None:
        raise ValidationError("Valid entry ID is required")

    plant = garden_service.water(db, user.user_id, body.entry_id)
    return {"message": f"Plant {body.entry_id} has been watered", "plant": plant}


@router.delete("/species/{plant_id}", response_model=RemoveResponse)
def delete_species_from_garden(
    plant_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """ある種のエントリを自分の garden からまとめて削除する"""
    removed = garden_service.remove_species_from_garden(db, user.user_id, plant_id)
    return {"message": "Plants deleted successfully", "removed": removed}


@router.delete("/{entry_id}", response_model=RemoveResponse)
def delete_plant(
    entry_id: UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    # plants テーブルからは消さない（他のユーザーが同じ種を使う）
    garden_service.remove_from_garden(db, user.user_id, entry_id)
    return {"message": "Plant deleted successfully", "removed": 1}
