import pytest

from plant_finder.bundles import (BUNDLE_IDS, Rule, get_all_bundles,
                                  get_beginner_starter_pack, get_bundle,
                                  get_pollinator_garden_pack,
                                  get_shade_garden_pack, get_theme,
                                  score_candidate)
from plant_finder.catalog import refresh_catalog
from plant_finder.zone_ranking import is_ideal_for_zone


def _pollinators(plant_factory, count):
    return [
        plant_factory(f"p{i}", zone_min=3, zone_max=9, is_pollinator_friendly=True)
        for i in range(count)
    ]


def test_bundle_caps_at_twelve(plant_factory):
    bundle = get_pollinator_garden_pack(6, _pollinators(plant_factory, 15))
    assert len(bundle.plants) == 12
    assert [p.id for p in bundle.plants] == [f"p{i}" for i in range(12)]


def test_bundle_returns_all_when_fewer_than_eight(plant_factory):
    bundle = get_pollinator_garden_pack(6, _pollinators(plant_factory, 5))
    assert len(bundle.plants) == 5


def test_bundle_only_includes_ideal_zone_plants(plant_factory):
    plants = _pollinators(plant_factory, 3) + [
        plant_factory("cold", zone_min=2, zone_max=5, is_pollinator_friendly=True),
        plant_factory("unknown", is_pollinator_friendly=True),
    ]
    bundle = get_pollinator_garden_pack(6, plants)
    assert [p.id for p in bundle.plants] == ["p0", "p1", "p2"]


def test_beginner_pack_selection_and_order(seed_plants):
    bundle = get_beginner_starter_pack(6, seed_plants)
    assert bundle.id == "beginner-starter"
    assert bundle.name == "Beginner Starter Pack"
    assert [p.common_name for p in bundle.plants] == [
        "Purple Coneflower",
        "Black-Eyed Susan",
        "Woodland Sage",
    ]
    assert "Beginner-friendly" in bundle.criteria


def test_beginner_pack_requires_confirmed_beginner(plant_factory):
    plants = [
        plant_factory("unknown", zone_min=3, zone_max=9),
        plant_factory("thirsty", zone_min=3, zone_max=9, beginner_friendly=True, water_needs="high"),
        plant_factory("ok", zone_min=3, zone_max=9, beginner_friendly=True),
    ]
    assert [p.id for p in get_beginner_starter_pack(6, plants).plants] == ["ok"]


def test_score_candidate_weights(seed_plants):
    coneflower, butterfly_weed, _, lavender = seed_plants[:4]
    theme = get_theme("pollinator-garden")
    # zone 100 + native 40 + perennial 20 + beginner 15
    assert score_candidate(theme, coneflower, 6) == 175
    assert score_candidate(theme, lavender, 6) == 135
    assert score_candidate(get_theme("low-water-garden"), butterfly_weed, 6) == 205


def test_bundle_orders_by_score(seed_plants):
    bundle = get_pollinator_garden_pack(6, seed_plants)
    assert [p.common_name for p in bundle.plants][-2:] == ["English Lavender", "Woodland Sage"]


def test_get_all_bundles_drops_small_bundles(seed_plants):
    assert len(get_shade_garden_pack(6, seed_plants).plants) == 1
    result = get_all_bundles(6, seed_plants)
    assert [b.id for b in result] == [
        "beginner-starter",
        "pollinator-garden",
        "native-garden",
        "low-water-garden",
        "full-sun-garden",
    ]


def test_bundled_catalog_bundles():
    result = get_all_bundles(6)
    assert result
    assert [b.id for b in result] == [i for i in BUNDLE_IDS if i in {b.id for b in result}]
    for bundle in result:
        assert 3 <= len(bundle.plants) <= 12
        assert all(is_ideal_for_zone(p, 6) for p in bundle.plants)


def test_bundle_as_dict(seed_plants):
    data = get_bundle("native-garden", 6, seed_plants).as_dict()
    assert data["id"] == "native-garden"
    assert data["plants"][0]["commonName"]
    assert isinstance(data["criteria"], list)


def test_unknown_bundle():
    with pytest.raises(KeyError):
        get_theme("rock-garden")


def test_rule_validation():
    with pytest.raises(ValueError):
        Rule.from_dict({"field": "is_native", "op": "gt"})
    with pytest.raises(ValueError):
        Rule.from_dict({"field": "height", "op": "eq", "value": 3})
    rule = Rule.from_dict({"field": "water_needs", "op": "eq", "value": "low", "weight": "10"})
    assert rule.weight == 10


def test_overlay_changes_theme(tmp_path, monkeypatch, seed_plants):
    assert get_theme("beginner-starter").name == "Beginner Starter Pack"
    overlay = tmp_path / "bundles"
    overlay.mkdir()
    (overlay / "bundle_themes.yaml").write_text(
        "beginner-starter:\n  name: First Garden\n", encoding="utf-8"
    )
    monkeypatch.setenv("PLANT_FINDER_OVERLAY_DIR", str(tmp_path))
    refresh_catalog()

    bundle = get_beginner_starter_pack(6, seed_plants)
    assert bundle.name == "First Garden"
    assert len(bundle.plants) == 3


@pytest.mark.parametrize("bundle_id", BUNDLE_IDS)
def test_every_bundle_caps_at_twelve(plant_factory, bundle_id):
    plants = [
        plant_factory(
            f"all-round-{i}",
            zone_min=3,
            zone_max=9,
            is_native=True,
            is_pollinator_friendly=True,
            beginner_friendly=True,
            toxicity_to_pets="non-toxic",
            water_needs="low",
            sun_exposure=("full-sun", "shade"),
            plant_type="perennial",
        )
        for i in range(14)
    ]
    bundle = get_bundle(bundle_id, 6, plants)
    assert len(bundle.plants) == 12
    assert bundle.plants == tuple(plants[:12])
