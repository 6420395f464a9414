import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from hero_api.database.database import create_session_factory
from hero_api.database.model import Hero
from hero_api.database.repository import HeroRepository


async def _seed(repo: HeroRepository, *names: str) -> list[Hero]:
    heroes = []
    for name in names:
        hero = await repo.save(Hero(name=name))
        assert hero is not None
        heroes.append(hero)
    return heroes


@pytest.mark.asyncio
async def test_save_assigns_new_ids(repo: HeroRepository) -> None:
    batman, superman = await _seed(repo, "Batman", "Superman")

    assert batman.id is not None
    assert superman.id is not None
    assert batman.id != superman.id


@pytest.mark.asyncio
async def test_find_by_id_returns_none_for_unknown_id(repo: HeroRepository) -> None:
    assert await repo.find_by_id(42) is None


@pytest.mark.asyncio
async def test_find_all_returns_every_hero(repo: HeroRepository) -> None:
    await _seed(repo, "Batman", "Superman", "Robin")

    heroes = await repo.find_all()

    assert sorted(h.name for h in heroes) == ["Batman", "Robin", "Superman"]


@pytest.mark.asyncio
async def test_save_with_id_updates_existing_row(repo: HeroRepository) -> None:
    (batman,) = await _seed(repo, "Batman")

    updated = await repo.save(Hero(id=batman.id, name="Dark Knight"))

    assert updated is not None
    assert updated.id == batman.id
    stored = await repo.find_by_id(batman.id)
    assert stored is not None
    assert stored.name == "Dark Knight"
    assert len(await repo.find_all()) == 1


@pytest.mark.asyncio
async def test_save_with_unknown_id_returns_none(repo: HeroRepository) -> None:
    assert await repo.save(Hero(id=99, name="Ghost")) is None
    assert await repo.find_all() == []


@pytest.mark.asyncio
async def test_delete_by_id(repo: HeroRepository) -> None:
    batman, superman = await _seed(repo, "Batman", "Superman")

    assert await repo.delete_by_id(batman.id) is True
    assert await repo.delete_by_id(batman.id) is False
    assert [h.id for h in await repo.find_all()] == [superman.id]


@pytest.mark.asyncio
async def test_find_by_name_is_case_insensitive_substring(
    repo: HeroRepository,
) -> None:
    await _seed(repo, "Superman", "BATMAN", "manhunter", "Robin")

    heroes = await repo.find_by_name("man")

    assert sorted(h.name for h in heroes) == ["BATMAN", "Superman", "manhunter"]


@pytest.mark.asyncio
async def test_find_by_name_empty_string_matches_all(repo: HeroRepository) -> None:
    await _seed(repo, "Batman", "Robin")

    assert len(await repo.find_by_name("")) == 2


@pytest.mark.asyncio
async def test_find_by_name_treats_wildcards_literally(repo: HeroRepository) -> None:
    await _seed(repo, "Batman", "100% Hero", "Mr_Fantastic")

    assert [h.name for h in await repo.find_by_name("%")] == ["100% Hero"]
    assert [h.name for h in await repo.find_by_name("_")] == ["Mr_Fantastic"]
    assert await repo.find_by_name("nothing") == []


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_does_not_resurrect(
    engine: AsyncEngine,
) -> None:
    session_factory = create_session_factory(engine)
    async with session_factory() as first, session_factory() as second:
        writer = HeroRepository(first)
        deleter = HeroRepository(second)
        (batman,) = await _seed(writer, "Batman")

        current = await writer.find_by_id(batman.id)
        assert current is not None
        assert await deleter.delete_by_id(batman.id) is True

        current.name = "Dark Knight"
        assert await writer.save(current) is None

    async with session_factory() as check:
        assert await HeroRepository(check).find_all() == []


@pytest.mark.asyncio
async def test_save_detached_hero_after_concurrent_delete_returns_none(
    engine: AsyncEngine,
) -> None:
    session_factory = create_session_factory(engine)
    async with session_factory() as first, session_factory() as second:
        writer = HeroRepository(first)
        (batman,) = await _seed(writer, "Batman")
        batman_id = batman.id
        assert await HeroRepository(second).delete_by_id(batman_id) is True

        assert await writer.save(Hero(id=batman_id, name="Dark Knight")) is None
        assert await writer.find_by_id(batman_id) is None
