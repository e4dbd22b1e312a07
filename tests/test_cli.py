from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from ai_file_namer import cli


class _FakeClient:
    def __init__(self, settings: Any) -> None:
        self.settings = settings

    def generate(self, request: Any) -> SimpleNamespace:
        return SimpleNamespace(text='["lease-agreement.pdf", "lease-2024.pdf"]')


def test_cli_prints_names(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    monkeypatch.delenv("AI_FILE_NAMER_CONFIG", raising=False)
    monkeypatch.setattr(cli, "GeminiClient", _FakeClient)
    assert cli.main(["--text", "Residential lease agreement for 2024"]) == 0
    assert capsys.readouterr().out.splitlines() == ["lease-agreement.pdf", "lease-2024.pdf"]


def test_cli_rejects_short_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--text", "short"]) == 1
    assert "at least 10 characters" in capsys.readouterr().err


def test_cli_reports_missing_key(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("AI_FILE_NAMER_CONFIG", raising=False)
    assert cli.main(["--text", "Residential lease agreement for 2024"]) == 1
    assert "missing API key" in capsys.readouterr().err
