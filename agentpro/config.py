"""Application configuration loaded from the environment."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings(BaseModel):
    """Runtime settings for the service and its in-memory backends."""

    env: Optional[str] = None
    commit_hash: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Artificial latency of the mock credential backend
    login_delay_seconds: float = Field(default=0.5, ge=0)
    register_delay_seconds: float = Field(default=0.3, ge=0)

    read_receipt_delay_seconds: float = Field(default=0.4, ge=0)
    notification_delay_seconds: float = Field(default=1.0, ge=0)
    notification_backend: str = "local"  # 'local' or 'webhook'
    notification_webhook_url: Optional[str] = None

    player_cache_ttl_seconds: float = Field(default=300.0, ge=0)
    seed_data: bool = True

    @property
    def is_prod(self) -> bool:
        return self.env == "prod"

    @model_validator(mode="after")
    def check_consistency(self) -> "Settings":
        if self.is_prod and not self.commit_hash:
            raise ValueError("COMMIT_HASH is required for production environments")
        if self.notification_backend not in ("local", "webhook"):
            raise ValueError(
                f"Invalid NOTIFICATION_BACKEND: {self.notification_backend}. "
                "Must be 'local' or 'webhook'"
            )
        if self.notification_backend == "webhook" and not self.notification_webhook_url:
            raise ValueError(
                "NOTIFICATION_WEBHOOK_URL is required for the webhook backend"
            )
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            env=os.getenv("ENV"),
            commit_hash=os.getenv("COMMIT_HASH"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            login_delay_seconds=float(os.getenv("LOGIN_DELAY_SECONDS", "0.5")),
            register_delay_seconds=float(os.getenv("REGISTER_DELAY_SECONDS", "0.3")),
            read_receipt_delay_seconds=float(
                os.getenv("READ_RECEIPT_DELAY_SECONDS", "0.4")
            ),
            notification_delay_seconds=float(
                os.getenv("NOTIFICATION_DELAY_SECONDS", "1.0")
            ),
            notification_backend=os.getenv("NOTIFICATION_BACKEND", "local"),
            notification_webhook_url=os.getenv("NOTIFICATION_WEBHOOK_URL"),
            player_cache_ttl_seconds=float(
                os.getenv("PLAYER_CACHE_TTL_SECONDS", "300")
            ),
            seed_data=_env_bool("SEED_DATA", "true"),
        )
