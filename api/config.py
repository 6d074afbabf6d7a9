"""
API - Configuration.

Service settings loaded from environment variables. A local
`.env` file is read first when present.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class ApiConfig:
    """Configuration for the reputation API service."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    """Log output format (text or json)."""

    # Cross-origin frontend
    frontend_url: str = "http://localhost:5173"

    # Public URL of this service, used to build the callback URL
    base_url: str = "http://localhost:3000"

    # Rate limiting on /api/ routes
    rate_limit_window_seconds: float = 900.0
    rate_limit_max_requests: int = 100

    # Account age assumed when a proof carries no creation date
    default_account_age_days: int = 365

    @property
    def callback_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/reclaim/callback"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text"),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5173"),
            base_url=os.getenv("BASE_URL", "http://localhost:3000"),
            rate_limit_window_seconds=float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
            rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "100")),
            default_account_age_days=int(os.getenv("DEFAULT_ACCOUNT_AGE_DAYS", "365")),
        )

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not 0 < self.port < 65536:
            errors.append(f"port must be between 1 and 65535, got {self.port}")

        if self.log_format not in ("text", "json"):
            errors.append(f"log_format must be 'text' or 'json', got {self.log_format!r}")

        if self.rate_limit_window_seconds <= 0:
            errors.append("rate_limit_window_seconds must be positive")

        if self.rate_limit_max_requests <= 0:
            errors.append("rate_limit_max_requests must be positive")

        if self.default_account_age_days < 0:
            errors.append("default_account_age_days must not be negative")

        return errors
