"""Createsend: Central Configuration via Pydantic Settings."""

from typing import Optional

from pydantic_settings import BaseSettings

VERSION = "0.1.0"


class Settings(BaseSettings):
    """Client settings loaded from environment variables / .env file."""

    # ── Campaign Monitor API ──
    createsend_api_key: str = ""
    createsend_access_token: Optional[str] = None
    createsend_base_url: str = "https://api.createsend.com/api/v3.1/"

    # ── Transport ──
    http_timeout_seconds: float = 30.0
    user_agent: str = f"createsend-python/{VERSION}"

    # ── App ──
    log_level: str = "INFO"

    @property
    def effective_base_url(self) -> str:
        """Return the base URL with exactly one trailing slash.

        Relative endpoint paths are joined onto it, so a missing slash
        would drop the last path segment (``/api/v3.1``).
        """
        return self.createsend_base_url.rstrip("/") + "/"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
