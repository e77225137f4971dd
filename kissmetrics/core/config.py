from pydantic_settings import BaseSettings

from kissmetrics.models.types import DEFAULT_TIMEOUT, DEFAULT_TRACKER_HOST, DEFAULT_TRACKER_PORT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Tracking
    tracking_provider: str = "kissmetrics"
    kissmetrics_api_key: str = ""
    kissmetrics_host: str = DEFAULT_TRACKER_HOST
    kissmetrics_port: int = DEFAULT_TRACKER_PORT
    kissmetrics_timeout: float = DEFAULT_TIMEOUT

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
