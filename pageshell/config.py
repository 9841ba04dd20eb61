from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_BUNDLED_TEMPLATES = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    secret_word: str = Field(default="Popsicle", alias="SECRET_WORD")
    host: str = Field(default="127.0.0.1", alias="APP_HOST")
    port: int = Field(default=8080, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    templates_dir: str = Field(default=str(_BUNDLED_TEMPLATES), alias="TEMPLATES_DIR")
    page_numbers: int = Field(default=10, alias="PAGE_NUMBERS")

    @property
    def templates_path(self) -> Path:
        return Path(self.templates_dir)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
