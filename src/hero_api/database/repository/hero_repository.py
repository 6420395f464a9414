"""Heroテーブルのリポジトリモジュール."""

import logging
from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from hero_api.common.log_prefix import LogPrefix
from hero_api.database.database import get_async_db_session
from hero_api.database.model.hero import Hero

logger = logging.getLogger(__name__)


class HeroRepository:
    """Heroテーブルへのデータアクセスを提供するリポジトリ.

    Attributes
    ----------
        session: 非同期DBセッション

    """

    def __init__(self, session: AsyncSession) -> None:
        """HeroRepositoryを初期化.

        Args:
        ----
            session: 非同期DBセッション

        """
        self.session = session

    async def save(self, hero: Hero) -> Hero | None:
        """ヒーローを登録または更新.

        idが未設定なら新規登録、設定済みなら既存行の名前を更新する。

        Args:
        ----
            hero: 保存するHero

        Returns:
        -------
            保存後のHero(idは採番済み)。更新対象の行が存在しない場合はNone

        Raises:
        ------
            SQLAlchemyError: DBエラー時

        """
        if hero.id is not None and hero not in self.session:
            current = await self.session.get(Hero, hero.id)
            if current is None:
                return None
            current.sqlmodel_update(hero.model_dump(exclude={"id"}))
            hero = current

        # rollback後はインスタンスが失効するため、ログ用のidを先に保持する
        hero_id = hero.id
        self.session.add(hero)
        try:
            await self.session.commit()
        except StaleDataError:
            # 読み込み後に別リクエストで削除された行は復活させない
            await self.session.rollback()
            logger.info(
                f"{LogPrefix.HERO_STORE} update matched no row: id=%s", hero_id
            )
            return None
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"{LogPrefix.HERO_STORE} save failed: {e}")
            raise

        await self.session.refresh(hero)
        return hero

    async def find_all(self) -> Sequence[Hero]:
        """全ヒーローをDBから取得.

        Returns
        -------
            Heroオブジェクトのリスト(id順)

        """
        result = await self.session.exec(select(Hero).order_by(col(Hero.id)))
        return result.all()

    async def find_by_id(self, hero_id: int) -> Hero | None:
        """idでヒーローを取得.

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            該当するHero。存在しない場合はNone

        """
        return await self.session.get(Hero, hero_id)

    async def delete_by_id(self, hero_id: int) -> bool:
        """idでヒーローを削除.

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            削除できた場合はTrue、該当行が存在しない場合はFalse

        Raises:
        ------
            SQLAlchemyError: DBエラー時

        """
        stmt = delete(Hero).where(col(Hero.id) == hero_id)
        try:
            result = await self.session.exec(stmt)  # type: ignore[call-overload]
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"{LogPrefix.HERO_STORE} delete failed: id={hero_id} {e}")
            raise

        return bool(result.rowcount)

    async def find_by_name(self, name: str) -> Sequence[Hero]:
        """名前に部分一致するヒーローを取得(大文字小文字を区別しない).

        `%` や `_` はワイルドカードではなく文字として扱う。
        空文字の場合は全件に一致する。

        Args:
        ----
            name: 検索文字列

        Returns:
        -------
            名前に検索文字列を含むHeroオブジェクトのリスト(id順)

        """
        stmt = (
            select(Hero)
            .where(col(Hero.name).icontains(name, autoescape=True))
            .order_by(col(Hero.id))
        )
        result = await self.session.exec(stmt)
        return result.all()


async def get_hero_repository(
    session: Annotated[AsyncSession, Depends(get_async_db_session)],
) -> HeroRepository:
    """FastAPI DI用のHeroRepositoryファクトリ.

    Returns
    -------
        HeroRepository

    """
    return HeroRepository(session)
