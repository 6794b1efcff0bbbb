from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod

    # --- Ads source ---
    # memory: bundled catalogue, sql: database below (seeded from the same catalogue)
    ADS_REPOSITORY: Literal["memory", "sql"] = "memory"
    ADS_DB_URL: str = "sqlite+aiosqlite:///./adquality.db"

    # None -> app/data/ads.json
    ADS_SEED_FILE: str | None = None
    ADS_SEED_ON_STARTUP: bool = True


settings = Settings()
