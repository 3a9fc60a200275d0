"""
Application settings (Pydantic Settings).
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# .env next to backend/ (parent of grid_gateway/)
_env_path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    # Applies to every outbound provider call; no retries on top of it
    http_timeout_seconds: float = 20.0
    # Optional JSON file of extra tenants: {"tenant_id": {"provider": "...", "settings": {...}}}
    tenants_file: str = ""
    # Comma-separated extra CORS origins for the calendar front-end
    cors_origins: str = ""
    # Fallbacks for GridResponse.metadata when a tenant sets neither
    default_currency: str = ""
    default_timezone: str = ""

    class Config:
        env_file = _env_path
        extra = "ignore"

    @field_validator("tenants_file", "cors_origins", "default_currency", "default_timezone", mode="after")
    @classmethod
    def strip_values(cls, v: str) -> str:
        return (v or "").strip()

    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
