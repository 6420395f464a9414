"""ヒーロー永続化のプロトコル定義."""

from collections.abc import Sequence
from typing import Protocol

from hero_api.database.model.hero import Hero


class HeroStore(Protocol):
    """ヒーローの永続化を行うゲートウェイのインターフェース."""

    async def save(self, hero: Hero) -> Hero | None:
        """登録(idなし)または更新(idあり)。更新対象がなければNone."""
        ...

    async def find_all(self) -> Sequence[Hero]:
        """全件取得."""
        ...

    async def find_by_id(self, hero_id: int) -> Hero | None:
        """id指定で取得。存在しなければNone."""
        ...

    async def delete_by_id(self, hero_id: int) -> bool:
        """id指定で削除。削除できなければFalse."""
        ...

    async def find_by_name(self, name: str) -> Sequence[Hero]:
        """名前の部分一致検索(大文字小文字を区別しない)."""
        ...
