import pytest

from plant_finder.catalog import refresh_catalog
from plant_finder.log_utils import reset_warnings
from plant_finder.plant import Plant

SEED_RECORDS = [
    {
        "id": "echinacea-purpurea",
        "commonName": "Purple Coneflower",
        "scientificName": "Echinacea purpurea",
        "zoneMin": 3,
        "zoneMax": 9,
        "isNative": True,
        "isPollinatorFriendly": True,
        "sunExposure": ["full-sun", "part-sun"],
        "waterNeeds": "low",
        "plantType": "perennial",
        "toxicityToPets": "non-toxic",
        "beginnerFriendly": True,
        "pollinators": ["Butterflies", "Bees", "Goldfinches"],
    },
    {
        "id": "asclepias-tuberosa",
        "commonName": "Butterfly Weed",
        "scientificName": "Asclepias tuberosa",
        "zoneMin": 3,
        "zoneMax": 9,
        "isNative": True,
        "isPollinatorFriendly": True,
        "sunExposure": ["full-sun"],
        "waterNeeds": "low",
        "plantType": "perennial",
        "toxicityToPets": "toxic",
        "beginnerFriendly": True,
        "pollinators": ["Monarch Butterflies", "Bees"],
    },
    {
        "id": "rudbeckia-hirta",
        "commonName": "Black-Eyed Susan",
        "scientificName": "Rudbeckia hirta",
        "zoneMin": 3,
        "zoneMax": 7,
        "isNative": True,
        "isPollinatorFriendly": True,
        "sunExposure": ["full-sun", "part-sun"],
        "waterNeeds": "medium",
        "plantType": "perennial",
        "toxicityToPets": "non-toxic",
        "beginnerFriendly": True,
    },
    {
        "id": "lavandula-angustifolia",
        "commonName": "English Lavender",
        "scientificName": "Lavandula angustifolia",
        "zoneMin": 5,
        "zoneMax": 9,
        "isNative": False,
        "isPollinatorFriendly": True,
        "sunExposure": ["full-sun"],
        "waterNeeds": "low",
        "plantType": "perennial",
        "toxicityToPets": "toxic",
        "beginnerFriendly": True,
    },
    {
        "id": "aquilegia-canadensis",
        "commonName": "Wild Columbine",
        "scientificName": "Aquilegia canadensis",
        "zoneMin": 3,
        "zoneMax": 8,
        "isNative": True,
        "isPollinatorFriendly": True,
        "sunExposure": ["part-sun", "shade"],
        "waterNeeds": "medium",
        "plantType": "perennial",
        "toxicityToPets": "toxic",
        "beginnerFriendly": True,
    },
    {
        "id": "salvia-nemorosa",
        "commonName": "Woodland Sage",
        "scientificName": "Salvia nemorosa",
        "zoneMin": 4,
        "zoneMax": 8,
        "isNative": False,
        "isPollinatorFriendly": True,
        "sunExposure": ["full-sun", "part-sun"],
        "waterNeeds": "medium",
        "plantType": "perennial",
        "toxicityToPets": "non-toxic",
        "beginnerFriendly": True,
    },
]


def make_plant(plant_id: str = "test-plant", **fields) -> Plant:
    """Return a plant with only the given fields known."""
    return Plant(id=plant_id, common_name=fields.pop("common_name", plant_id), **fields)


@pytest.fixture
def seed_plants() -> list[Plant]:
    return [Plant.from_dict(r) for r in SEED_RECORDS]


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch):
    for env in ("PLANT_FINDER_DATA_DIR", "PLANT_FINDER_EXTRA_DATA_DIRS", "PLANT_FINDER_OVERLAY_DIR"):
        monkeypatch.delenv(env, raising=False)
    refresh_catalog()
    reset_warnings()
    yield
    refresh_catalog()
    reset_warnings()


@pytest.fixture
def plant_factory():
    return make_plant
