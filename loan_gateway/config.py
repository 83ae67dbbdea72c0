"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Decision thresholds (both inclusive)
    min_salary: int = 65_000
    min_credit_score: int = 300

    # External Services
    identity_api_base: str = "http://localhost:8003"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
