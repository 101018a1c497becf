from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import config
from db.database import Base, build_engine
from errors import NotFoundError, ValidationError
from models.plant import Plant
from services.species_service import get_species, list_species, register_species


def test_first_registration_fixes_water_frequency(db) -> None:
    first = register_species(db, "fern", 2)
    second = register_species(db, "fern", 3)

    assert first == second
    assert db.query(Plant).filter(Plant.common_name == "fern").count() == 1
    assert get_species(db, first).water_frequency == 2


def test_common_name_is_trimmed(db) -> None:
    assert register_species(db, "  basil ", 1) == register_species(db, "basil", 1)


def test_default_water_frequency_comes_from_config(db, monkeypatch) -> None:
    monkeypatch.setattr(config, "DEFAULT_WATER_FREQUENCY", 3)
    plant_id = register_species(db, "cactus")
    assert get_species(db, plant_id).water_frequency == 3


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_common_name_rejected(db, name) -> None:
    with pytest.raises(ValidationError):
        register_species(db, name, 1)
    assert db.query(Plant).count() == 0


@pytest.mark.parametrize("frequency", [0, -2])
def test_non_positive_water_frequency_rejected(db, frequency) -> None:
    with pytest.raises(ValidationError):
        register_species(db, "fern", frequency)


def test_get_species_not_found(db) -> None:
    with pytest.raises(NotFoundError):
        get_species(db, 999)


def test_list_species_sorted_by_name(db) -> None:
    register_species(db, "tulip", 1)
    register_species(db, "aloe", 2)
    assert [p.common_name for p in list_species(db)] == ["aloe", "tulip"]


def test_concurrent_first_registration_creates_one_row(tmp_path) -> None:
    engine = build_engine(f"sqlite:///{tmp_path / 'race.sqlite'}")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    barrier = threading.Barrier(2)

    def _register(frequency: int) -> int:
        session = Session()
        try:
            barrier.wait()
            return register_species(session, "basil", frequency)
        finally:
            session.close()

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            ids = list(pool.map(_register, [1, 2]))

        session = Session()
        try:
            rows = session.query(Plant).filter(Plant.common_name == "basil").all()
        finally:
            session.close()
    finally:
        engine.dispose()

    assert len(rows) == 1
    assert ids[0] == ids[1] == rows[0].plant_id
    assert rows[0].water_frequency in (1, 2)


def test_species_endpoints(client: TestClient, auth_headers) -> None:
    headers = auth_headers()

    created = client.post("/species", json={"common_name": "fern", "water_frequency": 2}, headers=headers)
    assert created.status_code == 201
    plant_id = created.json()["plant_id"]

    duplicate = client.post("/species", json={"common_name": "fern", "water_frequency": 5}, headers=headers)
    assert duplicate.status_code == 201
    assert duplicate.json()["plant_id"] == plant_id

    catalog = client.get("/species", headers=headers)
    assert catalog.status_code == 200
    assert catalog.json() == [{"plant_id": plant_id, "common_name": "fern", "water_frequency": 2}]

    assert client.get(f"/species/{plant_id}", headers=headers).json()["water_frequency"] == 2
    assert client.get("/species/999", headers=headers).status_code == 404


def test_species_register_validation(client: TestClient, auth_headers) -> None:
    response = client.post("/species", json={"water_frequency": 2}, headers=auth_headers())
    assert response.status_code == 400


def test_species_requires_auth(client: TestClient) -> None:
    assert client.get("/species").status_code == 401
