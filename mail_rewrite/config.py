"""Site mail configuration loaded from environment variables.

Uses pydantic-settings so every field can be overridden via env vars;
the variable names mirror the host's own setting keys
(``site_mail_domain``, ``site_mail``, ``site_replyto_mail``,
``site_mail_return_path``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

FALLBACK_SITE_MAIL = "admin@localhost"


class SiteMailConfig(BaseSettings):
    """Immutable snapshot of the site-wide mail policy settings."""

    model_config = {"env_prefix": "SITE_", "frozen": True}

    mail_domain: str = Field(
        default="",
        description="Domain every From address must belong to (empty = none configured)",
    )
    mail: str = Field(
        default="",
        description="Canonical site address used as replacement sender",
    )
    replyto_mail: str = Field(
        default="",
        description="Site-wide Reply-To when sending as the site address (empty = disabled)",
    )
    mail_return_path: str | None = Field(
        default=None,
        description="Bounce address; falls back to the site address when unset",
    )

    @property
    def return_path(self) -> str:
        """Effective Return-Path default."""
        return self.mail_return_path or self.mail

    @property
    def replyto_form_default(self) -> str:
        """Value the settings form pre-populates its Reply-To field with."""
        return self.replyto_mail or self.mail or FALLBACK_SITE_MAIL

    def in_domain(self, address: str) -> bool:
        """Return True if *address* belongs to the configured mail domain."""
        if not self.mail_domain or not address:
            return False
        return address.lower().endswith("@" + self.mail_domain.lower())


class LoggingConfig(BaseSettings):
    """Log output settings."""

    model_config = {"env_prefix": "LOG_"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level name",
    )
    json_output: bool = Field(
        default=True,
        description="Emit JSON lines instead of console output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
