"""ヒーローAPIのプロトコル."""

from .hero_store import HeroStore

__all__ = ["HeroStore"]
