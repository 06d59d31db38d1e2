from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when a config file is malformed or holds invalid values."""


class LoggingSettings(BaseModel):
    level: LogLevel = Field(default="WARNING")
    json_output: bool = Field(default=False)  # one JSON object per line instead of console format


class LinesSettings(BaseModel):
    """How raw input lines become set members."""

    strip: bool = Field(default=True)  # drop surrounding whitespace
    skip_blank: bool = Field(default=True)
    sort: bool = Field(default=False)  # sort dedupe output; otherwise order is unspecified


class AppConfig(BaseSettings):
    """
    CLI settings.

    Source of truth:
      1) YAML file (structured config)
      2) Flat HASHSET_* env overrides, merged explicitly in from_yaml().
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="",  # no automatic prefixing
        extra="ignore",
        case_sensitive=False,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    lines: LinesSettings = Field(default_factory=LinesSettings)

    # ---------- YAML loader with explicit env merge ----------
    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """
        Load config from YAML, then overlay flat env values.
        Search order if path is not provided:
          ./hashset.yaml
          ~/.config/hashset/config.yaml
        """
        candidates: list[Path] = []
        if path is not None:
            candidates.append(path)
        else:
            candidates.extend(
                [Path("hashset.yaml"), Path.home() / ".config" / "hashset" / "config.yaml"]
            )

        raw: dict[str, object] = {}
        for p in candidates:
            if p.exists():
                text = p.read_text(encoding="utf-8")
                loaded = yaml.safe_load(text) or {}
                if not isinstance(loaded, dict):
                    raise ConfigError(f"YAML at {p} must define a mapping at the root")
                raw = loaded
                break

        # ---- explicit env merge, validated together with the file ----
        def _section(name: str) -> dict[str, object]:
            current = raw.get(name)
            if current is not None and not isinstance(current, dict):
                raise ConfigError(f"'{name}' must be a mapping")
            section = dict(current) if current else {}
            raw[name] = section
            return section

        level = _get_env("HASHSET_LOG_LEVEL")
        if level is not None:
            _section("logging")["level"] = level.strip().upper()

        json_raw = _get_env("HASHSET_LOG_JSON")
        if json_raw is not None:
            _section("logging")["json_output"] = json_raw.strip().lower() in _TRUTHY

        sort_raw = _get_env("HASHSET_SORT")
        if sort_raw is not None:
            _section("lines")["sort"] = sort_raw.strip().lower() in _TRUTHY

        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config: {exc}") from exc


def _get_env(*names: str) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v != "":
            return v
    return None


__all__ = [
    "AppConfig",
    "ConfigError",
    "LinesSettings",
    "LoggingSettings",
]
