"""データベース接続とセッション管理を提供するモジュール."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from hero_api.settings.settings import Settings


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """設定から非同期エンジンを生成する.

    Args:
    ----
        settings: アプリケーション設定

    Returns:
    -------
        AsyncEngine: 非同期データベースエンジン

    """
    return create_async_engine(url=settings.db_url, echo=settings.sql_log)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """エンジンに紐づくセッションファクトリを生成する."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """登録済みの全モデルのテーブルを作成する(既存テーブルはそのまま)."""
    # モデルをメタデータに登録するためのインポート
    import hero_api.database.model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_async_db_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """非同期データベースセッションを生成する.

    FastAPIの依存性注入で使用されるジェネレーター関数。
    create_app で app.state に設定されたセッションファクトリからセッションを開き、
    リクエスト終了時に自動的にクローズする。

    Yields
    ------
        AsyncSession: 非同期データベースセッション

    """
    session_factory: async_sessionmaker[AsyncSession] = (
        request.app.state.session_factory
    )
    async with session_factory() as session:
        yield session
