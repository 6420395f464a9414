"""ヒーローのデータモデルを定義するモジュール."""

from sqlmodel import Field, SQLModel


class Hero(SQLModel, table=True):
    """ヒーローを表すデータベースモデル.

    Attributes
    ----------
        id: ヒーローの一意識別子(主キー、登録時に自動採番)
        name: ヒーローの名前(インデックス付き)

    """

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
