import json

import pytest
import redis.asyncio as redis

from app.modules.favourites.domain.models.favourite import FavouriteIdentity, favourite_key
from app.modules.favourites.domain.services.favourites_store import FavouritesStore
from app.modules.favourites.infrastructure.storage.file_repository import FileFavouritesRepository
from app.modules.favourites.infrastructure.storage.redis_repository import RedisFavouritesRepository
from app.modules.plant_identification.domain.models.identification import (
    CARE_INSTRUCTIONS_PLACEHOLDER,
    IdentificationResult,
)
from app.shared.core.exceptions import StorageError

SLOT = "plantIdentifierFavorites:test"


def make_result(common_name, latin_name=None, **extra):
    document = {
        "commonName": common_name,
        "isWeed": False,
        "careInstructions": "Water weekly.",
        "healthStatus": "Healthy.",
        "proposedActions": "None needed.",
        **extra,
    }
    if latin_name is not None:
        document["latinName"] = latin_name
    return IdentificationResult.model_validate(document)


def test_identity_key_separates_name_boundaries():
    assert favourite_key(make_result("Rose", "X")) != favourite_key(make_result("RoseX"))
    assert favourite_key(make_result("Rose")) == "Rose::"


@pytest.mark.asyncio
async def test_add_then_remove_round_trip(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)
    rose = make_result("Rose", "Rosa")

    assert await store.add(rose) is True
    assert store.is_favourite(rose)

    assert await store.remove(rose) is True
    assert store.list_all() == []
    assert await store.remove(rose) is False


@pytest.mark.asyncio
async def test_duplicate_add_is_a_no_op(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)
    rose = make_result("Rose", "Rosa")
    other_copy = make_result("Rose", "Rosa", healthStatus="Aphids on new growth.")

    await store.add(rose)
    assert await store.add(other_copy) is False
    assert store.list_all() == [rose]


@pytest.mark.asyncio
async def test_same_common_name_different_latin_name_are_distinct(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)

    await store.add(make_result("Daisy", "Bellis perennis"))
    await store.add(make_result("Daisy", "Leucanthemum vulgare"))

    assert len(store.list_all()) == 2


@pytest.mark.asyncio
async def test_toggle_flips_membership(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)
    fern = make_result("Fern")

    assert await store.toggle(fern) is True
    assert store.is_favourite(fern)
    assert await store.toggle(fern) is False
    assert not store.is_favourite(fern)


@pytest.mark.asyncio
async def test_favourites_survive_reload_in_order(tmp_path):
    repository = FileFavouritesRepository(tmp_path)
    store = FavouritesStore(repository, SLOT)
    await store.add(make_result("Fern"))
    await store.add(make_result("Apple", "Malus domestica", isEdibleFruit=True, fruitHarvestTime="September"))

    reloaded = FavouritesStore(repository, SLOT)
    results = await reloaded.load()

    assert [r.common_name for r in results] == ["Fern", "Apple"]
    assert results[1].fruit_harvest_time == "September"


@pytest.mark.asyncio
async def test_persisted_form_is_camel_case_list(tmp_path):
    repository = FileFavouritesRepository(tmp_path)
    store = FavouritesStore(repository, SLOT)
    await store.add(make_result("Fern"))

    stored = json.loads(repository.path_for(SLOT).read_text(encoding="utf-8"))

    assert stored == [
        {
            "commonName": "Fern",
            "isWeed": False,
            "careInstructions": "Water weekly.",
            "healthStatus": "Healthy.",
            "proposedActions": "None needed.",
        }
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["{not json", '{"commonName": "Fern"}', "42"])
async def test_corrupt_slot_loads_empty(fake_redis, raw):
    fake_redis.data[SLOT] = raw
    store = FavouritesStore(RedisFavouritesRepository(fake_redis), SLOT)

    assert await store.load() == []

    await store.add(make_result("Fern"))
    assert [doc["commonName"] for doc in json.loads(fake_redis.data[SLOT])] == ["Fern"]


@pytest.mark.asyncio
async def test_invalid_and_duplicate_entries_are_skipped(fake_redis):
    fern = make_result("Fern").to_document()
    fake_redis.data[SLOT] = json.dumps([fern, {"commonName": 5}, fern, "Rose"])
    store = FavouritesStore(RedisFavouritesRepository(fake_redis), SLOT)

    results = await store.load()

    assert [r.common_name for r in results] == ["Fern"]


@pytest.mark.asyncio
async def test_incomplete_entries_are_repaired_on_load(fake_redis):
    fake_redis.data[SLOT] = json.dumps([{"commonName": "Fern"}, {"commonName": "Unknown"}, {"latinName": "Rosa"}])
    store = FavouritesStore(RedisFavouritesRepository(fake_redis), SLOT)

    results = await store.load()

    assert len(results) == 1
    assert results[0].common_name == "Fern"
    assert results[0].is_weed is False
    assert results[0].care_instructions == CARE_INSTRUCTIONS_PLACEHOLDER
    assert store.is_favourite(FavouriteIdentity(commonName="Fern"))


@pytest.mark.asyncio
async def test_same_name_without_latin_name_collide(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)
    first = make_result("Rose", healthStatus="Healthy.")
    second = make_result("Rose", healthStatus="Black spot on lower leaves.", isWeed=True)

    assert await store.add(first) is True
    assert await store.add(second) is False
    assert store.list_all() == [first]
    assert store.is_favourite(second)


@pytest.mark.asyncio
async def test_remove_by_identity_only(tmp_path):
    store = FavouritesStore(FileFavouritesRepository(tmp_path), SLOT)
    await store.add(make_result("Daisy", "Bellis perennis"))
    await store.add(make_result("Daisy", "Leucanthemum vulgare"))

    identity = FavouriteIdentity.model_validate({"commonName": "Daisy", "latinName": "Bellis perennis", "isWeed": "?"})

    assert await store.remove(identity) is True
    assert [r.latin_name for r in store.list_all()] == ["Leucanthemum vulgare"]


@pytest.mark.asyncio
async def test_slots_are_independent(fake_redis):
    repository = RedisFavouritesRepository(fake_redis)
    first = FavouritesStore(repository, "favourites:alice")
    second = FavouritesStore(repository, "favourites:bob")

    await first.add(make_result("Fern"))

    assert await second.load() == []


@pytest.mark.asyncio
async def test_redis_errors_become_storage_errors():
    class BrokenRedis:
        async def get(self, key):
            raise redis.ConnectionError("down")

    with pytest.raises(StorageError):
        await RedisFavouritesRepository(BrokenRedis()).read(SLOT)


def test_file_slot_names_are_sanitized(tmp_path):
    repository = FileFavouritesRepository(tmp_path)

    path = repository.path_for("plantIdentifierFavorites:../etc")

    assert path.parent == tmp_path
    assert path.name == "plantIdentifierFavorites_.._etc.json"
