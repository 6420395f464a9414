"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    CLI = "[CLI]"
    HERO_API = "[HERO_API]"
    HERO_STORE = "[HERO_STORE]"
