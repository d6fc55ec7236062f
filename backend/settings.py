import os

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        self.PORT: int = _as_int(os.getenv("PORT"), 3000)
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SEED_DATA_ENABLED: bool = _as_bool(os.getenv("SEED_DATA_ENABLED"), True)


settings = Settings()
