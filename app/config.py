from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Optional
from functools import lru_cache
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./outbound_wizard.db"

    # Database Connection Pool Settings (ignored for SQLite)
    DB_POOL_SIZE: int = 5  # Base number of connections in pool
    DB_MAX_OVERFLOW: int = 10  # Extra connections allowed beyond pool_size
    DB_POOL_TIMEOUT: int = 30  # Seconds to wait for connection from pool
    DB_POOL_RECYCLE: int = 1800  # Recycle connections after 30 minutes

    # App Settings
    APP_NAME: str = "Outbound Configuration Wizard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - accepts JSON string, comma-separated, or list
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ]

    # Single mock user; there is no authentication layer
    MOCK_USER_ID: int = 1

    # Ordered wizard step keys. The canonical flow has six steps.
    WIZARD_STEPS: list[str] = [
        "INVENTORY_GROUPS",
        "TASK_SEQUENCES",
        "PICK_STRATEGIES",
        "WORK_ORDER_MANAGEMENT",
        "STOCK_ALLOCATION",
        "REVIEW_CONFIRM",
    ]

    # Seed a PICK + PUT stock allocation pair whenever an inventory group is created
    AUTO_SEED_ALLOCATION_STRATEGIES: bool = True

    # Seed the built-in one-click templates at startup
    SEED_DEFAULT_TEMPLATES: bool = True

    # Optional file name prefix for configuration exports
    EXPORT_FILENAME_PREFIX: Optional[str] = "outbound-configuration"

    @field_validator('CORS_ORIGINS', 'WIZARD_STEPS', mode='before')
    @classmethod
    def parse_list(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [item.strip() for item in v.split(',') if item.strip()]
        return v

    @field_validator('WIZARD_STEPS')
    @classmethod
    def uppercase_steps(cls, v):
        steps = [step.upper() for step in v]
        if not steps:
            raise ValueError("WIZARD_STEPS must name at least one step")
        if len(set(steps)) != len(steps):
            raise ValueError("WIZARD_STEPS must not repeat a step")
        return steps

    @property
    def cors_origins_list(self) -> list[str]:
        return self.CORS_ORIGINS

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
