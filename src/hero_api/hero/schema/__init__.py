"""ヒーローAPIのスキーマ."""

from .hero import HeroCreate, HeroResponse, HeroUpdate

__all__ = ["HeroCreate", "HeroResponse", "HeroUpdate"]
