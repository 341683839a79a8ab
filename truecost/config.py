"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./truecost.db"

    # Service
    service_name: str = "truecost"
    log_level: str = "INFO"

    # Calculators
    default_tax_rate: float = 0.25  # used when a time-cost request omits tax_rate
    max_summary_scenarios: int = 5


settings = Settings()
