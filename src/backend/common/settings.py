from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from common.points_engine.config import ScoringConfig
from common.points_engine.models import ParseFailurePolicy
from common.points_engine.registry import registry


load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class AppConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    parse_failure_policy: ParseFailurePolicy = ParseFailurePolicy.STRICT
    rules: dict[str, dict[str, Any]] = field(default_factory=dict)

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(parse_failure_policy=self.parse_failure_policy, rules=self.rules)


def get_app_config() -> AppConfig:
    """
    Load service configuration from environment variables.

    Reads:
      APP_HOST, APP_PORT, LOG_LEVEL,
      POINTS_PARSE_FAILURE_POLICY (strict | default_zero),
      POINTS_RULES_CONFIG_PATH (optional JSON file of per-rule overrides)
    """
    rules_path = os.getenv("POINTS_RULES_CONFIG_PATH", "").strip()
    return AppConfig(
        host=os.getenv("APP_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_int_env("APP_PORT", 8080),
        log_level=_log_level_env("LOG_LEVEL", "INFO"),
        parse_failure_policy=parse_policy(os.getenv("POINTS_PARSE_FAILURE_POLICY", "strict")),
        rules=load_rules_config(Path(rules_path)) if rules_path else {},
    )


def parse_policy(value: str) -> ParseFailurePolicy:
    normalized = (value or "").strip().upper()
    try:
        return ParseFailurePolicy(normalized or ParseFailurePolicy.STRICT.value)
    except ValueError as exc:
        raise ValueError(
            "POINTS_PARSE_FAILURE_POLICY must be 'strict' or 'default_zero'."
        ) from exc


def load_rules_config(path: Path) -> dict[str, dict[str, Any]]:
    """Read per-rule overrides and check them against the registered rules.

    Unknown rule ids, misspelled fields and bad values fail here, at startup,
    instead of on the first points request.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except (OSError, ValueError) as exc:
        raise ValueError(f"POINTS_RULES_CONFIG_PATH {path} could not be read: {exc}") from exc
    if not isinstance(raw, dict) or not all(isinstance(v, dict) for v in raw.values()):
        raise ValueError(f"POINTS_RULES_CONFIG_PATH {path} must map rule ids to objects.")
    try:
        registry.validate_overrides(raw)
    except KeyError as exc:
        raise ValueError(f"POINTS_RULES_CONFIG_PATH {path}: {exc.args[0]}") from exc
    except ValidationError as exc:
        raise ValueError(f"POINTS_RULES_CONFIG_PATH {path}: {exc}") from exc
    return raw


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


def _log_level_env(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper() or default
    if value not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}.")
    return value
