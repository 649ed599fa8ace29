"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    SERVER = "[SERVER]"
    CREATE_SUPERHERO = "[CREATE_SUPERHERO]"
    LIST_SUPERHEROES = "[LIST_SUPERHEROES]"
    VALIDATION_ERROR = "[VALIDATION_ERROR]"
    INTERNAL_ERROR = "[INTERNAL_ERROR]"
