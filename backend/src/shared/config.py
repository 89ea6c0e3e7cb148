from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_URL: str = "localhost:5432"
    POSTGRES_DB: str = "users"
    DATABASE_URL: str = ""

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    TIMEOUT_KEEP_ALIVE: int = 60
    SHUTDOWN_GRACE_PERIOD: int = 15

    USER_EVENTS_BACKEND: Literal["log", "redis"] = "log"
    REDIS_URL: str = "redis://localhost:6379"
    USER_EVENTS_CHANNEL: str = "users:changed"

    BUILD_VERSION: str = ""
    BUILD_REVISION: str = ""
    BUILD_BRANCH: str = ""
    BUILD_USER: str = ""
    BUILD_DATE: str = ""

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def compose_database_url(self) -> "Settings":
        # An explicit DATABASE_URL wins over the POSTGRES_* parts.
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_URL}/{self.POSTGRES_DB}"
            )
        return self


settings = Settings()
