from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Cache configuration, read from CACHER_* environment variables"""

    # Strategy used by create_from_settings()
    default_strategy: str = "lru"

    # Capacity used by create_from_settings(); 0 means pass-through
    default_capacity: int = Field(default=128, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="CACHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    @field_validator("default_strategy")
    @classmethod
    def _strategy_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_strategy must not be blank")
        return value


settings = CacheSettings()
