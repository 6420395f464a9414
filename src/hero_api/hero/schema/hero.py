"""ヒーローのリクエスト/レスポンススキーマ."""

from pydantic import BaseModel, ConfigDict


class HeroCreate(BaseModel):
    """ヒーロー登録リクエストスキーマ(idは無視される)."""

    name: str


class HeroUpdate(BaseModel):
    """ヒーロー更新リクエストスキーマ(name以外は無視される)."""

    name: str


class HeroResponse(BaseModel):
    """ヒーローレスポンススキーマ."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
