"""Runtime settings for the DNS updater."""

import logging

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PUBLIC_DNS_TAG_KEY = "PublicDNS"
PRIVATE_DNS_TAG_KEY = "PrivateDNS"


class UpdaterSettings(BaseSettings):
    """Settings read from DNSUPDATER_* environment variables (and .env)."""

    model_config = SettingsConfigDict(env_prefix="DNSUPDATER_", env_file=".env", extra="ignore")

    aws_region: str | None = None  # None lets boto3 resolve it
    public_tag_key: str = PUBLIC_DNS_TAG_KEY
    private_tag_key: str = PRIVATE_DNS_TAG_KEY
    log_level: str = "INFO"
    dry_run: bool = False

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_tag_keys(self) -> "UpdaterSettings":
        if self.public_tag_key == self.private_tag_key:
            raise ValueError("Public and private tag keys must differ")
        return self


def load_settings() -> UpdaterSettings:
    """Load settings from .env and environment variables."""
    return UpdaterSettings()
