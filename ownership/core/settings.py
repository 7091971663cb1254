from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Ownership Engine", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    lexicon_dir: str = Field(default="config/lexicons", alias="LEXICON_DIR")
    default_jurisdiction: str = Field(default="default", alias="DEFAULT_JURISDICTION")
    uppercase_ratio_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0, alias="UPPERCASE_RATIO_THRESHOLD"
    )
    propagate_surname_hint: bool = Field(default=True, alias="PROPAGATE_SURNAME_HINT")

    output_dir: str = Field(default="owners", alias="OUTPUT_DIR")
    output_filename: str = Field(default="owner_data.json", alias="OUTPUT_FILENAME")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
