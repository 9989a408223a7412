"""Tests for the unified CLI entrypoint and command handlers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest
from _pytest.monkeypatch import MonkeyPatch

from receipt_points.cli import main as unified_cli


def _write_receipt(tmp_path: Path, payload: dict[str, Any]) -> Path:
    path = tmp_path / "receipt.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_no_command_prints_help_and_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert unified_cli.main([]) == 1
    assert "serve" in capsys.readouterr().out


def test_points_prints_total(
    tmp_path: Path, target_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write_receipt(tmp_path, target_payload)

    exit_code = unified_cli.main(["points", str(path)])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "28"


def test_points_breakdown_lists_rules(
    tmp_path: Path, corner_market_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write_receipt(tmp_path, corner_market_payload)

    exit_code = unified_cli.main(["points", str(path), "--breakdown"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Retailer: M&M Corner Market" in out
    assert "round_total" in out
    assert out.rstrip().splitlines()[-1].split() == ["points", "109"]


def test_points_missing_file_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = unified_cli.main(["points", str(tmp_path / "nope.json")])

    assert exit_code == 1
    assert "Receipt file not found" in capsys.readouterr().out


def test_points_on_directory_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = unified_cli.main(["points", str(tmp_path)])

    assert exit_code == 1
    assert "Cannot read receipt file" in capsys.readouterr().out


def test_points_invalid_receipt_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_receipt(tmp_path, {"retailer": "Target"})

    exit_code = unified_cli.main(["points", str(path)])

    assert exit_code == 1
    assert "Invalid receipt format" in capsys.readouterr().out


def test_serve_uses_settings_and_cli_overrides(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    import uvicorn

    captured: dict[str, Any] = {}

    def fake_run(app: object, host: str, port: int) -> None:
        captured.update(app=app, host=host, port=port)

    config = tmp_path / "settings.toml"
    config.write_text('[server]\nhost = "127.0.0.1"\nport = 9000\n', encoding="utf-8")
    monkeypatch.delenv("RECEIPT_POINTS_HOST", raising=False)
    monkeypatch.delenv("RECEIPT_POINTS_PORT", raising=False)
    monkeypatch.delenv("RECEIPT_POINTS_LOG_LEVEL", raising=False)
    monkeypatch.setattr(uvicorn, "run", fake_run)

    exit_code = unified_cli.main(["serve", "--config", str(config), "--port", "9100"])

    from receipt_points.runtime import receipt_server

    assert exit_code == 0
    assert captured == {"app": receipt_server.app, "host": "127.0.0.1", "port": 9100}


def test_serve_with_bad_port_setting_exits_1(monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    import uvicorn

    monkeypatch.setenv("RECEIPT_POINTS_PORT", "eighty")
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: pytest.fail("server should not start"))

    exit_code = unified_cli.main(["serve"])

    assert exit_code == 1
    assert "Invalid port" in capsys.readouterr().out


def test_cli_does_not_mutate_sys_argv(
    monkeypatch: MonkeyPatch, tmp_path: Path, target_payload: dict[str, Any]
) -> None:
    sentinel_argv = ["sentinel", "keep-this"]
    monkeypatch.setattr(sys, "argv", sentinel_argv)

    unified_cli.main(["points", str(_write_receipt(tmp_path, target_payload))])

    assert sys.argv == sentinel_argv
