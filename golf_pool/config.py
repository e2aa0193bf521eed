from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    golf_api_key: str = ""
    golf_api_host: str = "golf-leaderboard-data.p.rapidapi.com"
    golf_tournament_id: str = "759"
    http_timeout_seconds: float = 20.0
    pool_file: str = ""
    seed_sample_scores: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
