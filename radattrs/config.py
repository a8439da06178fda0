from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class Settings(BaseSettings):
    strict_parse: bool = Field(False, validation_alias="RADATTRS_STRICT_PARSE")
    preserve_order: bool = Field(True, validation_alias="RADATTRS_PRESERVE_ORDER")

    log_level: str = Field("INFO", validation_alias="RADATTRS_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="RADATTRS_LOG_RING_SIZE")

    # User-Password by default
    redacted_types: List[int] = Field(default_factory=lambda: [2], validation_alias="RADATTRS_REDACTED_TYPES")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
