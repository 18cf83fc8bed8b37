# backend/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List
import json


DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unknown keys instead of crashing
        populate_by_name=True,
    )

    # ---- DB (accept either)
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_url_compat: Optional[str] = Field(default=None, alias="DB_URL")

    # ---- CORS raw (we'll parse)
    cors_origins_raw: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        alias="CORS_ORIGINS",
    )

    # ---- Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(True, alias="JSON_LOGS")

    # ---- Dashboard rendering
    display_timezone: Optional[str] = Field(default=None, alias="DISPLAY_TIMEZONE")
    copy_reset_seconds: float = Field(2.0, alias="COPY_RESET_SECONDS")
    dashboard_list_limit: int = Field(500, alias="DASHBOARD_LIST_LIMIT")

    # ---- Helpers / parsed properties
    @property
    def cors_origins(self) -> List[str]:
        s = (self.cors_origins_raw or "").strip()
        if not s:
            return list(DEFAULT_CORS_ORIGINS)
        if s.startswith("["):
            try:
                arr = json.loads(s)
                if isinstance(arr, list):
                    return [str(x).strip() for x in arr if str(x).strip()]
            except ValueError:
                pass
            s = s.strip("[]")
        return [x.strip().strip('"') for x in s.split(",") if x.strip()]

    @property
    def database_url_effective(self) -> str:
        return self.database_url or self.db_url_compat or "sqlite:///./interviews.sqlite"

    @property
    def DATABASE_URL(self) -> str:
        return self.database_url_effective

    @property
    def copy_reset_ms(self) -> int:
        return int(round(self.copy_reset_seconds * 1000))


settings = Settings()
