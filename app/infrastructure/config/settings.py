"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    vehicle_repository: str = "csv"  # csv, in_memory or postgres
    catalog_csv_path: str = ""  # Defaults to data/vehicles.csv in the project root
    database_url: str = ""  # Required when vehicle_repository=postgres
    listing_session_repository: str = "in_memory"  # in_memory or redis
    redis_url: str = "redis://localhost:6379/0"
    listing_session_ttl_seconds: int = 3600
    listing_base_path: str = "/vehicles"
    site_name: str = "Voiture.in"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
