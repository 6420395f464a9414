"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hero_api.database.database import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
)
from hero_api.hero.router import router as hero_router
from hero_api.settings.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPIアプリケーションを生成する.

    設定からDBエンジンとセッションファクトリを生成して app.state に保持し、
    ヒーローAPIのルーターを登録する。

    Args:
    ----
        settings: アプリケーション設定(省略時は環境変数から読み込む)

    Returns:
    -------
        FastAPI: アプリケーション

    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = create_engine_from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.create_schema_on_startup:
            await create_tables(engine)
        logger.info(f"Started in {settings.environment} environment")
        yield
        await engine.dispose()

    app = FastAPI(title="Hero API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.include_router(hero_router)
    return app


app = create_app()
