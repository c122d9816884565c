# app/core/config.py
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_ALLOWED_ENVS = {"dev", "prod", "test"}


class Settings(BaseSettings):
    # app
    app_env: str = Field("dev", alias="APP_ENV")
    app_version: str = Field("1.0.0", alias="APP_VERSION")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # DB
    database_url: str = Field("sqlite:///./tasks.db", alias="DATABASE_URL")
    db_echo: bool = Field(False, alias="DB_ECHO")

    # comma separated, "*" allows any origin
    cors_allow_origins: str = Field("*", alias="CORS_ALLOW_ORIGINS")

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    @field_validator("app_env")
    @classmethod
    def _check_env(cls, value: str) -> str:
        env = value.strip().lower()
        if env not in _ALLOWED_ENVS:
            allowed = "|".join(sorted(_ALLOWED_ENVS))
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return env

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
