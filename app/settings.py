from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Exercise database (API Ninjas)
    API_NINJAS_KEY: str | None = Field(default=None)
    EXERCISE_API_URL: str = Field(default="https://api.api-ninjas.com/v1/exercises")

    # Quotes (ZenQuotes)
    QUOTE_API_URL: str = Field(default="https://zenquotes.io/api/random")

    HTTP_TIMEOUT: float | None = Field(default=10.0)

    # App
    APP_NAME: str = Field(default="MoodMove")
    DEBUG: bool = Field(default=False)
    PORT: int = Field(default=3000)
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()  # type: ignore[call-arg]
