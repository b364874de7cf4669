from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="SYNOLOGY_", extra="ignore"
    )

    base_url: str = "http://localhost:5000"
    api_path: str = "/webapi"
    sid: Optional[str] = None
    timeout_seconds: float = 30
    verify_ssl: bool = True
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_path")
    @classmethod
    def validate_api_path(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def api_base_url(self) -> str:
        return self.base_url + self.api_path


def get_settings() -> Settings:
    return Settings()
