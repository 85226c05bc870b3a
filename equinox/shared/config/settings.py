# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "dev-secret-change-me"
DEFAULT_TOKEN_TTL_SECONDS = 60 * 60 * 24 * 7

_INSECURE_SECRETS = (DEV_JWT_SECRET, "dev", "development", "test", "")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class ServerConfig(BaseSettings):
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(5174, ge=1, le=65535, alias="PORT")
    max_body_bytes: int = Field(32 * 1024, ge=1, alias="MAX_BODY_BYTES")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


class SecurityConfig(BaseSettings):
    # CORS
    client_origin: str = Field("http://localhost:5173", alias="CLIENT_ORIGIN")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _server_config_factory() -> ServerConfig:
    return ServerConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    jwt_secret: str | None = Field(None, alias="JWT_SECRET")
    token_ttl_seconds: int = Field(DEFAULT_TOKEN_TTL_SECONDS, ge=1, alias="TOKEN_TTL_SECONDS")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    server: ServerConfig = Field(default_factory=_server_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.jwt_secret is None or self.jwt_secret.strip() in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: JWT_SECRET is missing or insecure in production!\n"
                "   Tokens signed with a well-known secret can be forged by anyone.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if self.security.client_origin == "*":
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def uses_dev_secret(self) -> bool:
        return not self.jwt_secret

    @property
    def signing_secret(self) -> str:
        return self.jwt_secret or DEV_JWT_SECRET


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DEFAULT_TOKEN_TTL_SECONDS",
    "DEV_JWT_SECRET",
    "SecurityConfig",
    "ServerConfig",
    "load_config",
]
