"""Process-wide settings, built once at startup and passed to the handler."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_MODEL_ID = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_TIMEOUT_S = 30.0

DEV_ENVS = ("development", "dev")

@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the suggestion service."""
    gemini_api_key: str | None = None
    model_id: str = DEFAULT_MODEL_ID
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    expose_error_detail: bool = False

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _from_mapping(base: Settings, cfg: Mapping[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    updates = {k: v for k, v in cfg.items() if k in known}
    if "timeout_s" in updates:
        updates["timeout_s"] = float(updates["timeout_s"])
    if "expose_error_detail" in updates:
        updates["expose_error_detail"] = bool(updates["expose_error_detail"])
    return replace(base, **updates)


def load_settings(
    environ: Mapping[str, str] | None = None,
    cfg_path: str | None = None,
) -> Settings:
    """
    Build settings from an optional YAML file, then environment variables.

    Environment variables win over the file.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.
        cfg_path: YAML config path; defaults to ``$AI_FILE_NAMER_CONFIG`` if set.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    path = cfg_path or env.get("AI_FILE_NAMER_CONFIG")
    if path:
        if not Path(path).exists():
            raise FileNotFoundError(f"Config file not found at {path}")
        settings = _from_mapping(settings, load_cfg(path))

    overrides: dict[str, Any] = {}
    if env.get("GEMINI_API_KEY"):
        overrides["gemini_api_key"] = env["GEMINI_API_KEY"]
    if env.get("GEMINI_MODEL_ID"):
        overrides["model_id"] = env["GEMINI_MODEL_ID"]
    if env.get("GEMINI_BASE_URL"):
        overrides["base_url"] = env["GEMINI_BASE_URL"]
    if env.get("GEMINI_TIMEOUT_S"):
        overrides["timeout_s"] = env["GEMINI_TIMEOUT_S"]
    if env.get("APP_ENV"):
        overrides["expose_error_detail"] = env["APP_ENV"].strip().lower() in DEV_ENVS
    return _from_mapping(settings, overrides)
