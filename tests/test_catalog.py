import json
import logging

import pytest

from plant_finder.catalog import (CatalogError, apply_overrides, catalog_frame,
                                  get_curated_plants_for_zone, get_plant_by_id,
                                  get_plants, get_plants_for_zone,
                                  load_catalog, refresh_catalog,
                                  validate_catalog)
from plant_finder.utils import load_dataset

RECORD = {"id": "x", "commonName": "X Plant", "scientificName": "Plantus x"}


def test_bundled_catalog_loads():
    plants = get_plants()
    assert isinstance(plants, tuple)
    assert len(plants) == 24
    assert plants[0].id == "echinacea-purpurea"
    assert get_plants() is plants
    assert len({p.id for p in plants}) == len(plants)


def test_bundled_catalog_is_valid():
    assert validate_catalog(load_dataset("plants/plant_catalog.json")) == []


def test_inference_applied_to_bundled_records():
    opuntia = get_plant_by_id("opuntia-humifusa")
    # native (2) + low water + perennial + full sun
    assert opuntia.beginner_friendly is True
    zinnia = get_plant_by_id("zinnia-elegans")
    assert zinnia.zone_min is None and zinnia.zone_max is None


def test_overrides_applied():
    opuntia = get_plant_by_id("opuntia-humifusa")
    assert opuntia.toxicity_to_pets == "non-toxic"
    assert "Spines" in opuntia.notes
    lonicera = get_plant_by_id("lonicera-sempervirens")
    assert lonicera.curated_for_zones == (6, 7)


def test_apply_overrides_keeps_notes():
    base = {"id": "a", "notes": "original", "waterNeeds": "low"}
    merged = apply_overrides(base, {"a": {"waterNeeds": "high"}})
    assert merged == {"id": "a", "notes": "original", "waterNeeds": "high"}
    merged = apply_overrides(base, {"a": {"notes": "replaced"}})
    assert merged["notes"] == "replaced"
    assert apply_overrides(base, {}) == base


def test_zone_lookups():
    zone_six = get_plants_for_zone(6)
    assert get_plant_by_id("ocimum-basilicum") not in zone_six
    # unknown ranges are kept
    assert get_plant_by_id("zinnia-elegans") in zone_six

    curated = [p.id for p in get_curated_plants_for_zone(6)]
    assert curated[0] == "echinacea-purpurea"
    assert curated[-1] == "lonicera-sempervirens"
    assert "aquilegia-canadensis" not in curated
    assert get_plant_by_id("missing") is None


def test_load_catalog_skips_invalid_and_duplicates(caplog):
    records = [
        RECORD,
        {"id": "bad", "scientificName": "No common name"},
        {**RECORD, "commonName": "Second X"},
        {"id": "y", "commonName": "Y", "scientificName": "Y y", "waterNeeds": "soggy"},
    ]
    with caplog.at_level(logging.WARNING):
        plants = load_catalog(records, overrides={})
    assert [p.common_name for p in plants] == ["X Plant"]
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "invalid:bad" in messages
    assert "duplicate:x" in messages
    assert "invalid:y" in messages


def test_load_catalog_swaps_reversed_zones(caplog):
    with caplog.at_level(logging.WARNING):
        (plant,) = load_catalog([{**RECORD, "zoneMin": 8, "zoneMax": 4}], overrides={})
    assert (plant.zone_min, plant.zone_max) == (4, 8)
    assert "zones:x" in caplog.text


def test_validate_catalog_messages():
    issues = validate_catalog([RECORD, {"id": "x", "commonName": "", "scientificName": "s"}, "junk"])
    assert any(issue.startswith("x: commonName") for issue in issues)
    assert "x: duplicate id" in issues
    assert any(issue.startswith("#2:") for issue in issues)


def test_catalog_frame():
    frame = catalog_frame()
    assert len(frame) == 24
    assert frame.index.name == "id"
    assert frame.loc["echinacea-purpurea", "commonName"] == "Purple Coneflower"
    assert catalog_frame([]).empty


def test_data_dir_env(tmp_path, monkeypatch):
    plants_dir = tmp_path / "plants"
    plants_dir.mkdir()
    (plants_dir / "plant_catalog.json").write_text(json.dumps([RECORD]))
    monkeypatch.setenv("PLANT_FINDER_DATA_DIR", str(tmp_path))
    refresh_catalog()
    assert [p.id for p in get_plants()] == ["x"]


def test_overlay_overrides(tmp_path, monkeypatch):
    plants_dir = tmp_path / "plants"
    plants_dir.mkdir()
    (plants_dir / "plant_overrides.json").write_text(
        json.dumps({"echinacea-purpurea": {"waterNeeds": "medium"}})
    )
    monkeypatch.setenv("PLANT_FINDER_OVERLAY_DIR", str(tmp_path))
    refresh_catalog()
    assert get_plant_by_id("echinacea-purpurea").water_needs == "medium"
    # bundled overrides are merged, not replaced
    assert get_plant_by_id("opuntia-humifusa").toxicity_to_pets == "non-toxic"


def test_missing_catalog_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("PLANT_FINDER_DATA_DIR", str(tmp_path))
    refresh_catalog()
    with pytest.raises(CatalogError):
        get_plants()
