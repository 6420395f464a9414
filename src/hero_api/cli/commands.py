"""ヒーローAPIの管理コマンド.

APIサーバーの起動と、データベースのテーブル作成を行う。
"""

import asyncio
import logging
from typing import Annotated

import typer
import uvicorn

from hero_api.common.log_prefix import LogPrefix
from hero_api.database.database import create_engine_from_settings, create_tables
from hero_api.settings.settings import get_settings

app = typer.Typer()

logger = logging.getLogger(__name__)


@app.callback()
def configure_logging() -> None:
    """設定のログレベルでロギングを初期化する."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="待ち受けホスト")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="待ち受けポート")] = 8000,
    reload: Annotated[bool, typer.Option(help="コード変更時に自動再起動")] = False,
) -> None:
    """APIサーバーを起動する."""
    logger.info(f"{LogPrefix.CLI} Serving on {host}:{port}")
    uvicorn.run("hero_api.main:app", host=host, port=port, reload=reload)


@app.command("init-db")
def init_db() -> None:
    """設定されたデータベースにテーブルを作成する."""
    asyncio.run(_init_db())


async def _init_db() -> None:
    settings = get_settings()
    engine = create_engine_from_settings(settings)
    logger.info(f"{LogPrefix.CLI} Creating tables")
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()
    logger.info(f"{LogPrefix.CLI} Completed")


if __name__ == "__main__":
    app()
