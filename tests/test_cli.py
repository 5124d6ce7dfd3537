"""Tests for the dealboard CLI."""

import sys
from pathlib import Path

import pytest

from dealboard.cli.main import main


class TestStatusCommand:
    def test_reports_csv_strategy(self, tmp_path: Path, monkeypatch, capsys) -> None:
        for var in ("GOOGLE_SERVICE_ACCOUNT_EMAIL", "GOOGLE_SERVICE_ACCOUNT_PRIVATE_KEY", "GOOGLE_API_KEY"):
            monkeypatch.delenv(var, raising=False)
        config = tmp_path / "config.yaml"
        config.write_text("sheet:\n  sheet_id: abc\n  gid: 0\n")
        monkeypatch.setattr(sys, "argv", ["dealboard", "--config", str(config), "status"])

        main()

        out = capsys.readouterr().out
        assert "[x] CRM sheet (via csv)" in out

    def test_missing_config_file(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(sys, "argv", ["dealboard", "--config", str(tmp_path / "nope.yaml"), "status"])
        with pytest.raises(SystemExit):
            main()
