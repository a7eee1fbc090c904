"""Configuration settings for the WebDriver client."""

from typing import Optional

import httpx
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client configuration from environment variables."""

    # Remote WebDriver server (chromedriver, geckodriver, Selenium Grid, ...)
    driver_url: str = "http://localhost:4444"
    session_id: Optional[str] = None

    # Protocol dialect: w3c, gecko, chrome, msedge, safari
    backend: str = "w3c"

    # Readiness polling; None = use the backend default
    wait_interval_ms: Optional[int] = None

    # Transport timeout; None = block until the server answers
    request_timeout_seconds: Optional[float] = None

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "WEBDRIVER_CLIENT_"}

    def session_url(self, session_id: str) -> str:
        """Base URL for all commands of one session."""
        return f"{self.driver_url.rstrip('/')}/session/{session_id}"

    @property
    def request_timeout(self) -> Optional[httpx.Timeout]:
        """httpx timeout, or None to disable timeouts."""
        if self.request_timeout_seconds is None:
            return None
        return httpx.Timeout(self.request_timeout_seconds)


# Global settings instance
settings = Settings()
