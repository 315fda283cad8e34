# donation_matching/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "foodbridge"
    use_mongo: bool = False
    log_level: str = "INFO"

    # matching knobs
    top_matches: int = 5
    group_radius_km: float = 5.0
    slot_minutes: int = 30
    recent_window_days: int = 7
    avg_speed_kmh: float = 25.0   # ETA for straight-line route summaries

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()

@lru_cache
def get_settings() -> Settings:
    return settings
