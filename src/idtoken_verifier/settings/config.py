from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _package_version(default: str = "0.1.0") -> str:
    try:
        return pkg_version("idtoken-verifier")
    except PackageNotFoundError:
        return default


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = "info"


class CorsSettings(BaseModel):
    allow_origins: str = "*"  # comma-separated or "*"
    allow_methods: str = "GET,POST"  # comma-separated
    allow_headers: str = "*"  # comma-separated or "*"

    def origins(self) -> List[str]:
        value = self.allow_origins.strip()
        if value in ("", "*"):
            return ["*"]
        return [part.strip() for part in value.split(",") if part.strip()]

    def methods(self) -> List[str]:
        value = self.allow_methods.strip()
        return [part.strip().upper() for part in value.split(",") if part.strip()]

    def headers(self) -> List[str]:
        value = self.allow_headers.strip()
        if value in ("", "*"):
            return ["*"]
        return [part.strip() for part in value.split(",") if part.strip()]


class JwksSettings(BaseModel):
    # Default endpoint used by POST /verify when the caller supplies none
    url: Optional[str] = None
    # Total deadline for one JWKS GET, in seconds
    timeout: float = Field(default=5.0, gt=0)
    # Let /verify callers name their own JWKS endpoint (server-side fetch)
    allow_url_override: bool = False


class VerifierSettings(BaseModel):
    # Decode the JWK "e" member instead of assuming 65537
    honor_key_exponent: bool = False


class LoggingSettings(BaseModel):
    as_json: bool = False


class Settings(BaseSettings):
    """Application settings loaded from environment (and .env)."""

    app_name: str = "ID Token Verifier"
    app_version: str = Field(default_factory=_package_version)

    server: ServerSettings = ServerSettings()
    cors: CorsSettings = CorsSettings()
    jwks: JwksSettings = JwksSettings()
    verifier: VerifierSettings = VerifierSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_prefix="IDTOKEN_VERIFIER_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
