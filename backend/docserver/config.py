"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an environment variable or .env file
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box from the repo root
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Documentation sources
    backend_docs_dir: Path = Path("backend")
    frontend_docs_dir: Path = Path("frontend")
    backend_module_prefix: str = ""
    doc_excluded_dirs: list[str] = ["tests", "__pycache__", "node_modules"]

    # Servers
    tenant_host: str = "0.0.0.0"
    tenant_port: int = 8000
    admin_host: str = "0.0.0.0"
    admin_port: int = 8001
    admin_tenant_alias: str = "admin"

    # Swagger
    api_version: str = "1.0.0"
    service_title: str = "Documentation API"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        """Only json and text renderers exist."""
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
