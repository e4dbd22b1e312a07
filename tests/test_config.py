from __future__ import annotations

from pathlib import Path

import pytest

from ai_file_namer.common.config import DEFAULT_MODEL_ID, DEFAULT_TIMEOUT_S, load_settings


def test_defaults_from_empty_env() -> None:
    s = load_settings(environ={})
    assert s.gemini_api_key is None
    assert not s.has_api_key
    assert s.model_id == DEFAULT_MODEL_ID
    assert s.timeout_s == DEFAULT_TIMEOUT_S
    assert s.expose_error_detail is False


def test_env_overrides() -> None:
    s = load_settings(environ={
        "GEMINI_API_KEY": "k",
        "GEMINI_MODEL_ID": "gemini-other",
        "GEMINI_TIMEOUT_S": "5",
        "APP_ENV": "development",
    })
    assert s.has_api_key
    assert s.model_id == "gemini-other"
    assert s.timeout_s == 5.0
    assert s.expose_error_detail is True


def test_production_env_hides_detail() -> None:
    assert load_settings(environ={"APP_ENV": "production"}).expose_error_detail is False


def test_yaml_file_then_env(tmp_path: Path) -> None:
    cfg = tmp_path / "namer.yaml"
    cfg.write_text("model_id: from-file\ntimeout_s: 12\nexpose_error_detail: true\nunknown: 1\n", encoding="utf-8")
    s = load_settings(environ={"AI_FILE_NAMER_CONFIG": str(cfg), "GEMINI_MODEL_ID": "from-env"})
    assert s.model_id == "from-env"
    assert s.timeout_s == 12.0
    assert s.expose_error_detail is True


def test_missing_yaml_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(environ={}, cfg_path=str(tmp_path / "nope.yaml"))
