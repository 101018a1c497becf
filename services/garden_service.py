import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from db.database import storage_guard
from errors import NotFoundError, ValidationError
from models.garden import GardenEntry
from models.plant import Plant
from schemas.garden import GardenPlant, Health
from services.species_service import clean_water_frequency, clean_common_name, resolve_species

logger = logging.getLogger("garden.registry")


def derive_health(watered_count: int) -> Health:
    """
    水やり回数から health を決める
    一度でも水をやれば Good のまま（時間経過で Poor に戻るルールはない）
    """
    return Health.GOOD if watered_count >= 1 else Health.POOR


def _to_view(entry: GardenEntry, plant: Plant) -> GardenPlant:
    return GardenPlant(
        entry_id=entry.entry_id,
        plant_id=plant.plant_id,
        common_name=plant.common_name,
        water_frequency=plant.water_frequency,
        watered_count=entry.watered_count,
        health=Health(entry.health),
    )


def _require_user(user_id: str | None) -> str:
    if not user_id:
        raise ValidationError("Missing required field: user_id")
    return user_id


def add_to_garden(
    db: Session,
    user_id: str | None,
    common_name: str | None,
    water_frequency: int | None = None,
) -> GardenEntry:
    user_id = _require_user(user_id)
    name = clean_common_name(common_name)
    frequency = clean_water_frequency(water_frequency)

    with storage_guard(db, "add plant"):
        plant_id = resolve_species(db, name, frequency)
        entry = GardenEntry(
            user_id=user_id,
            plant_id=plant_id,
            watered_count=0,
            health=derive_health(0).value,
        )
        db.add(entry)
        db.commit()
        db.refresh(entry)

    logger.info("user %s added %r (entry %s)", user_id, name, entry.entry_id)
    return entry


def list_garden(db: Session, user_id: str | None) -> List[GardenPlant]:
    user_id = _require_user(user_id)

    with storage_guard(db, "fetch plants"):
        rows = (
            db.query(GardenEntry, Plant)
            .join(Plant, GardenEntry.plant_id == Plant.plant_id)
            .filter(GardenEntry.user_id == user_id)
            .order_by(GardenEntry.created_at)
            .all()
        )
    return [_to_view(entry, plant) for entry, plant in rows]


def remove_from_garden(db: Session, user_id: str | None, entry_id: UUID | None) -> None:
    """ユーザー自身の garden エントリを1つだけ削除する。plants 側の行は残す"""
    user_id = _require_user(user_id)
    if entry_id is None:
        raise ValidationError("Missing required parameter: entry_id")

    with storage_guard(db, "delete plant"):
        deleted = (
            db.query(GardenEntry)
            .filter(GardenEntry.entry_id == entry_id, GardenEntry.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            db.rollback()
            raise NotFoundError("Plant not found in the garden")
        db.commit()

    logger.info("user %s removed entry %s", user_id, entry_id)


def remove_species_from_garden(db: Session, user_id: str | None, plant_id: int | None) -> int:
    """
    ある種のエントリをユーザーの garden からまとめて削除する
    他のユーザーのエントリには触らない
    """
    user_id = _require_user(user_id)
    if plant_id is None:
        raise ValidationError("Missing required parameter: plant_id")

    with storage_guard(db, "delete plant"):
        deleted = (
            db.query(GardenEntry)
            .filter(GardenEntry.plant_id == plant_id, GardenEntry.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            db.rollback()
            raise NotFoundError("Plant not found in the garden")
        db.commit()

    logger.info("user %s removed %d entries of plant_id=%s", user_id, deleted, plant_id)
    return deleted


def water(db: Session, user_id: str | None, entry_id: UUID | None) -> GardenPlant:
    """
    水やり: watered_count を +1 して health を再計算する

    Poor -> Good (初回) / Good -> Good (2回目以降) の遷移しかない。
    """
    user_id = _require_user(user_id)
    if entry_id is None:
        raise ValidationError("Valid entry ID is required")

    with storage_guard(db, "water plant"):
        entry = (
            db.query(GardenEntry)
            .filter(GardenEntry.entry_id == entry_id, GardenEntry.user_id == user_id)
            .first()
        )
        if entry is None:
            raise NotFoundError("No plant found with the given ID")

        # 加算はDB側で行う
        entry.watered_count = GardenEntry.watered_count + 1
        db.flush()

        plant = db.get(Plant, entry.plant_id)
        if plant is None:
            db.rollback()
            raise NotFoundError("No plant found with the given ID in the plants table")

        entry.health = derive_health(entry.watered_count).value
        db.commit()

        # commit で expire された属性の再読み込みもここで行う
        view = _to_view(entry, plant)

    logger.info("entry %s watered (count=%d)", view.entry_id, view.watered_count)
    return view
