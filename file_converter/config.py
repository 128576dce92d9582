"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_anon_key: str = ""

    # Storage
    storage_backend: str = "sqlite"  # "sqlite" or "supabase"
    database_url: str = "sqlite:///./file_converter.db"

    # Service
    service_port: int = 8002
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000", "*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

VERSION = "0.1.0"
