from .models import AppConfig, LoggingConfig, CaseConfig
from pathlib import Path
from typing import Optional
import tomllib

from pydantic import ValidationError

from common.models import CaseStyle
from errors import ConfigError

def _deep_update(base: dict, updates: dict) -> dict:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _map_toml_config(data: dict) -> dict:
    mapped: dict = {}

    if "name" in data:
        mapped["name"] = data["name"]

    case_cfg = data.get("case", {})
    if case_cfg:
        mapped.setdefault("case", {})
        if "keep_digits" in case_cfg:
            mapped["case"]["keep_digits"] = case_cfg["keep_digits"]
        if "default_style" in case_cfg:
            try:
                mapped["case"]["default_style"] = CaseStyle(case_cfg["default_style"])
            except ValueError as e:
                raise ConfigError("Unknown case.default_style", source=e) from e

    logger_cfg = data.get("logger", {})
    if logger_cfg:
        mapped.setdefault("logging", {})
        if "level" in logger_cfg:
            mapped["logging"]["level"] = str(logger_cfg["level"]).upper()
        if "format" in logger_cfg:
            mapped["logging"]["format"] = str(logger_cfg["format"]).lower()

    return mapped


def _find_config_file() -> Optional[Path]:
    candidates = [
        Path.cwd() / "config.toml",
        Path(__file__).resolve().parents[2] / "config.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def load_settings(config_path: Optional[Path] = None) -> AppConfig:
    config_path = config_path or _find_config_file()
    try:
        if not config_path:
            return AppConfig()
        base = AppConfig().model_dump()
    except ValidationError as e:
        raise ConfigError("Invalid settings in environment", source=e) from e

    try:
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}", source=e) from e

    mapped = _map_toml_config(raw)
    merged = _deep_update(base, mapped)
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}", source=e) from e


# Global Config Instance (env + config.toml)
settings = load_settings()

def get_settings() -> AppConfig:
    return settings

def update_settings(new_settings: AppConfig):
    global settings
    settings = new_settings
