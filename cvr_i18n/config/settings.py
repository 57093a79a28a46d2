"""Settings for cvr-i18n, read from the environment."""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults that the command line flags override."""

    base_file: str = "en.json"
    default_directories: List[str] = ["locales", "src/locales"]
    indent: int = 2
    export_suffix: str = "_missing"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CVR_I18N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("indent must not be negative")
        return v

    @field_validator("base_file")
    @classmethod
    def validate_base_file(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_file must not be empty")
        return v
