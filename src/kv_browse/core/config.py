"""Configuration management for kv-browse."""

import signal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "kv-browse"
    otel_exporter_endpoint: str = "http://localhost:4317"

    # Grouped index backing the listings
    index_name: str = "file_browse"
    default_depth: int = 1

    inflight_report_signal: int = int(signal.SIGUSR1)

    model_config = {
        "env_prefix": "KV_BROWSE_",
        "case_sensitive": False,
    }


settings = Settings()
