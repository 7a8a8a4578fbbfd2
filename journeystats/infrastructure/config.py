"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to analytics, telemetry and logging settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Analytics stays disabled until a token is configured
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "journeystats.json"
DEFAULT_ENV_PREFIX = "JOURNEYSTATS"

_TOP_LEVEL_KEYS = ("log_level", "log_json")


@dataclass(frozen=True)
class AnalyticsConfig:
    """Mixpanel analytics configuration."""
    enabled: bool = False
    token: str = ""
    user_id: str = ""
    stage: str = "dev"
    endpoint: str = "https://api.mixpanel.com/track"
    timeout: int = 5

    @property
    def is_active(self) -> bool:
        return self.enabled and bool(self.token)


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False
    service_name: str = "journeystats"


@dataclass(frozen=True)
class JourneyStatsConfig:
    """Root configuration for the journeystats application."""
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"
    log_json: bool = False


def _env_override(data: dict, prefix: str = DEFAULT_ENV_PREFIX) -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern JOURNEYSTATS_SECTION_KEY.
    For example: JOURNEYSTATS_ANALYTICS_TOKEN=abc, JOURNEYSTATS_ANALYTICS_USER_ID=42
    Top-level keys use the full remainder: JOURNEYSTATS_LOG_LEVEL=DEBUG
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name in _TOP_LEVEL_KEYS:
            data[name] = value
            continue
        if "_" not in name:
            logger.debug("Ignoring environment variable %s", key)
            continue
        section, field_name = name.split("_", 1)
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain an object", path)
        return {}
    return data


def _coerce(type_name: str, value):
    if not isinstance(value, str):
        return value
    if type_name == "int":
        return int(value)
    if type_name == "bool":
        return value.lower() in ("true", "1", "yes")
    return value


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys.

    Raises:
        ValueError: If a value cannot be coerced to its field type
    """
    fields = {f.name: f for f in dataclasses.fields(cls)}
    filtered = {}
    for key, value in data.items():
        if key not in fields:
            continue
        try:
            filtered[key] = _coerce(fields[key].type, value)
        except ValueError as e:
            raise ValueError(f"invalid value for {cls.__name__}.{key}: {value!r}") from e
    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> JourneyStatsConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (JOURNEYSTATS_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to journeystats.json in CWD.
        env_prefix: Environment variable prefix. Defaults to JOURNEYSTATS.

    Raises:
        ValueError: If a numeric setting is not a number
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return JourneyStatsConfig(
        analytics=_build_sub_config(AnalyticsConfig, data.get("analytics") or {}),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry") or {}),
        log_level=str(data.get("log_level", "WARNING")),
        log_json=_coerce("bool", data.get("log_json", False)),
    )
