"""Runtime configuration resolved from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from code_linter.github import DEFAULT_API_URL

TOKEN_ENV = "GITHUB_TOKEN"
API_URL_ENV = "CODE_LINTER_GITHUB_API_URL"
DISABLE_ENV = "CODE_LINTER_DISABLE"
LOG_LEVEL_ENV = "CODE_LINTER_LOG_LEVEL"

LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class ConfigurationError(ValueError):
    """Raised when required external input is missing or invalid."""


@dataclass(frozen=True, slots=True)
class LinterConfig:
    """Settings read once at startup."""

    github_token: str | None = None
    github_api_url: str = DEFAULT_API_URL
    disabled_rules: tuple[str, ...] = field(default_factory=tuple)
    log_level: str = "warning"

    def to_dict(self) -> dict[str, Any]:
        return {
            "github_token": "***" if self.github_token else None,
            "github_api_url": self.github_api_url,
            "disabled_rules": list(self.disabled_rules),
            "log_level": self.log_level,
        }


def load_config(environ: Mapping[str, str] | None = None) -> LinterConfig:
    """Build a config from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    token = (env.get(TOKEN_ENV) or "").strip() or None
    api_url = (env.get(API_URL_ENV) or "").strip() or DEFAULT_API_URL
    if not api_url.startswith(("https://", "http://")):
        raise ConfigurationError(f"{API_URL_ENV} must be an http(s) URL, got {api_url!r}")

    return LinterConfig(
        github_token=token,
        github_api_url=api_url,
        disabled_rules=tuple(_as_csv_list(env.get(DISABLE_ENV))),
        log_level=_as_choice(env.get(LOG_LEVEL_ENV) or "warning", LOG_LEVELS, LOG_LEVEL_ENV),
    )


def require_github_token(config: LinterConfig) -> str:
    if not config.github_token:
        raise ConfigurationError(f"{TOKEN_ENV} required")
    return config.github_token


def _as_csv_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _as_choice(raw: Any, allowed: set[str], field_name: str) -> str:
    value = str(raw).strip().lower()
    if value not in allowed:
        choices = ", ".join(sorted(allowed))
        raise ConfigurationError(f"{field_name} must be one of: {choices}")
    return value
