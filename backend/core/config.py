from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Grammar data
    GRAMMAR_DATA_DIR: str | None = None  # Directory with rule tables and word lists; bundled data when unset
    NOUN_DICTIONARY_PATH: str | None = None  # TSV noun dictionary; bundled nouns.tsv when unset
    DICTIONARY_BACKEND: str = "tsv"  # "tsv" or "pymorphy"

    # Numeral speller
    SPELLING_STRIP_TRAILING_ZEROS: bool = True
    SPELLING_TRIM_FRACTION: bool = True

    @property
    def is_production(self) -> bool:
        return not self.APP_DEBUG

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
