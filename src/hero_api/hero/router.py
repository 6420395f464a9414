"""ヒーローAPIのルーター定義."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hero_api.common.log_prefix import LogPrefix
from hero_api.database.model.hero import Hero
from hero_api.database.repository.hero_repository import get_hero_repository
from hero_api.hero.protocol import HeroStore
from hero_api.hero.schema import HeroCreate, HeroResponse, HeroUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/heroes", tags=["heroes"])

Store = Annotated[HeroStore, Depends(get_hero_repository)]


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.post(
    "",
    response_model=HeroResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_hero(payload: HeroCreate, store: Store) -> HeroResponse:
    """ヒーローを登録し、採番済みのidを含めて返す."""
    logger.debug(f"{LogPrefix.HERO_API} create_hero: {payload.name}")
    created = HeroResponse.model_validate(await store.save(Hero(name=payload.name)))
    logger.debug(
        f"{LogPrefix.HERO_API} created hero {created.name} with id {created.id}"
    )
    return created


@router.get("", response_model=list[HeroResponse])
async def all_heroes(store: Store) -> list[HeroResponse]:
    """登録済みのヒーロー一覧を返す."""
    logger.debug(f"{LogPrefix.HERO_API} all_heroes")
    heroes = await store.find_all()
    return [HeroResponse.model_validate(h) for h in heroes]


@router.get("/search", response_model=list[HeroResponse])
async def find_by_name(
    name: Annotated[str, Query()],
    store: Store,
) -> list[HeroResponse]:
    """名前に検索文字列を含むヒーローを返す(大文字小文字を区別しない)."""
    logger.debug(f"{LogPrefix.HERO_API} find_by_name >{name}<")
    heroes = await store.find_by_name(name)
    return [HeroResponse.model_validate(h) for h in heroes]


@router.get("/{hero_id}", response_model=HeroResponse)
async def single_hero(hero_id: int, store: Store) -> HeroResponse:
    """idで指定したヒーローを返す."""
    logger.debug(f"{LogPrefix.HERO_API} single_hero for id {hero_id}")
    hero = await store.find_by_id(hero_id)
    if hero is None:
        raise _not_found(f"Hero not found for id: {hero_id}")
    return HeroResponse.model_validate(hero)


@router.put("/{hero_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hero(hero_id: int, payload: HeroUpdate, store: Store) -> None:
    """ヒーローの名前を更新する.

    保存前に存在確認のため既存レコードを取得する。
    取得後に削除された場合も404を返す。
    """
    current = await store.find_by_id(hero_id)
    if current is None:
        raise _not_found(f"Hero is not found for id={hero_id}")
    logger.debug(
        f"{LogPrefix.HERO_API} update_hero: modified name "
        f"from {current.name} to {payload.name}"
    )
    current.name = payload.name
    if await store.save(current) is None:
        raise _not_found(f"Hero is not found for id={hero_id}")


@router.delete("/{hero_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hero(hero_id: int, store: Store) -> None:
    """idで指定したヒーローを削除する."""
    logger.debug(f"{LogPrefix.HERO_API} delete >{hero_id}<")
    if not await store.delete_by_id(hero_id):
        raise _not_found(f"Cannot delete Hero with id {hero_id}. Not found")
