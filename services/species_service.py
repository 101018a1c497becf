import logging
from typing import List

from sqlalchemy.orm import Session

import config
from db.database import upsert, storage_guard
from errors import NotFoundError, ValidationError
from models.plant import Plant

logger = logging.getLogger("garden.species")


def clean_common_name(common_name: str | None) -> str:
    name = (common_name or "").strip()
    if not name:
        raise ValidationError("Missing required field: common_name")
    return name


def clean_water_frequency(water_frequency: int | None) -> int:
    if water_frequency is None:
        water_frequency = config.DEFAULT_WATER_FREQUENCY
    if isinstance(water_frequency, bool) or not isinstance(water_frequency, int) or water_frequency < 1:
        raise ValidationError("water_frequency must be a positive integer")
    return water_frequency


def resolve_species(db: Session, common_name: str, water_frequency: int) -> int:
    """
    plants に insert-if-absent して plant_id を返す（commit はしない）

    衝突時は common_name を自分自身で上書きするだけなので water_frequency は
    最初に登録した値のまま残り、どの呼び出しも勝った行の plant_id を受け取る。
    """
    stmt = upsert(db, Plant).values(common_name=common_name, water_frequency=water_frequency)
    stmt = stmt.on_conflict_do_update(
        index_elements=["common_name"],
        set_={"common_name": stmt.excluded.common_name},
    )
    return db.execute(stmt.returning(Plant.plant_id)).scalar_one()


def register_species(db: Session, common_name: str | None, water_frequency: int | None = None) -> int:
    name = clean_common_name(common_name)
    frequency = clean_water_frequency(water_frequency)

    with storage_guard(db, "register species"):
        plant_id = resolve_species(db, name, frequency)
        db.commit()

    logger.info("species %r resolved to plant_id=%s", name, plant_id)
    return plant_id


def get_species(db: Session, plant_id: int) -> Plant:
    with storage_guard(db, "fetch species"):
        plant = db.get(Plant, plant_id)
    if plant is None:
        raise NotFoundError("No plant found with the given ID in the plants table")
    return plant


def list_species(db: Session) -> List[Plant]:
    with storage_guard(db, "fetch species"):
        return db.query(Plant).order_by(Plant.common_name).all()
