import pytest

from plant_finder.inference import (apply_inference, infer_beginner_friendly,
                                    infer_pollinator_friendly,
                                    infer_sun_exposure, infer_water_needs,
                                    normalize_zone_range)


def test_explicit_beginner_wins():
    assert infer_beginner_friendly({"beginnerFriendly": False, "isNative": True}) is False
    assert infer_beginner_friendly({"beginnerFriendly": True}) is True


def test_beginner_points():
    # native (2) + perennial (1)
    assert infer_beginner_friendly({"isNative": True, "plantType": "perennial"}) is True
    # low water (1) + full sun (1)
    assert infer_beginner_friendly({"waterNeeds": "low", "sunExposure": ["full-sun"]}) is False
    record = {"zoneMin": 4, "zoneMax": 8, "droughtTolerance": "high", "waterNeeds": "medium"}
    assert infer_beginner_friendly(record) is True
    assert infer_beginner_friendly({}) is False


def test_pollinator_inference():
    assert infer_pollinator_friendly({"isPollinatorFriendly": False, "pollinators": ["Bees"]}) is False
    assert infer_pollinator_friendly({"pollinators": ["Bees"]}) is True
    assert infer_pollinator_friendly({"isNative": True, "bloomPeriod": "Spring"}) is True
    assert infer_pollinator_friendly({"isNative": True}) is False


@pytest.mark.parametrize(
    "tolerance, expected",
    [("High", "low"), ("medium", "medium"), ("low", "high"), ("none", "high"), ("odd", None), (None, None)],
)
def test_infer_water_needs(tolerance, expected):
    assert infer_water_needs(tolerance) == expected


def test_infer_sun_exposure():
    assert infer_sun_exposure("intolerant") == ["full-sun"]
    assert infer_sun_exposure("Intermediate") == ["full-sun", "part-sun"]
    assert infer_sun_exposure("tolerant") == ["part-sun", "shade"]
    assert infer_sun_exposure("") is None


def test_normalize_zone_range():
    assert normalize_zone_range(8, 4) == (4, 8)
    assert normalize_zone_range(5, None) == (5, 5)
    assert normalize_zone_range(None, 7) == (7, 7)
    assert normalize_zone_range(None, None) == (None, None)


def test_apply_inference_fills_gaps_without_mutating():
    record = {"id": "x", "droughtTolerance": "high", "shadeTolerance": "tolerant", "zoneMin": 9, "zoneMax": 3}
    enriched = apply_inference(record)
    assert enriched["waterNeeds"] == "low"
    assert enriched["sunExposure"] == ["part-sun", "shade"]
    assert (enriched["zoneMin"], enriched["zoneMax"]) == (3, 9)
    assert "waterNeeds" not in record


def test_apply_inference_keeps_known_values():
    record = {"id": "x", "waterNeeds": "high", "droughtTolerance": "high", "sunExposure": ["shade"]}
    enriched = apply_inference(record)
    assert enriched["waterNeeds"] == "high"
    assert enriched["sunExposure"] == ["shade"]
