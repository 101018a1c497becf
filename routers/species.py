# routers/species.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from db.database import get_db
from auth.deps import get_current_user
from schemas.plant import SpeciesCreate, SpeciesCreated, SpeciesResponse
from services import species_service

router = APIRouter(
    prefix="/species",
    tags=["Species"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[SpeciesResponse])
def get_species_catalog(db: Session = Depends(get_db)):
    return species_service.list_species(db)


@router.post("", response_model=SpeciesCreated, status_code=status.HTTP_201_CREATED)
def register_species(body: SpeciesCreate, db: Session = Depends(get_db)):
    """
    カタログに種を登録する
    既に同じ common_name があれば water_frequency は無視してその plant_id を返す
    """
    plant_id = species_service.register_species(db, body.common_name, body.water_frequency)
    return {"plant_id": plant_id}


@router.get("/{plant_id}", response_model=SpeciesResponse)
def get_species(plant_id: int, db: Session = Depends(get_db)):
    return species_service.get_species(db, plant_id)
