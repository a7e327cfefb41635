from __future__ import annotations

import json

import pytest

from h2calc.cli import main


def test_production_command_prints_report(capsys) -> None:
    exit_code = main(["production", "--source", "solar"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Production Analysis:" in out
    assert "75.00%" in out
    assert "$4227.02" in out


def test_reverse_command_prints_report(capsys) -> None:
    exit_code = main(["reverse", "--target-production", "1000", "--target-efficiency", "75"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "73333.33 kWh" in out
    assert "$4000.00" in out


def test_curve_command_emits_csv(capsys) -> None:
    exit_code = main(["curve", "--source", "grid", "--csv"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert exit_code == 0
    assert lines[0].startswith("production_kg_per_day,")
    assert len(lines) == 11


def test_unknown_source_reports_error(capsys) -> None:
    exit_code = main(["production", "--source", "coal"])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "error:" in captured.err
    assert "coal" in captured.err


def test_constants_override_is_applied(tmp_path, capsys) -> None:
    path = tmp_path / "constants.json"
    path.write_text(json.dumps({"maintenance_factor": 0.0}), encoding="utf-8")

    exit_code = main(["--constants", str(path), "reverse"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "$0.05/kWh" in out


def test_missing_constants_file_reports_error(tmp_path, capsys) -> None:
    exit_code = main(["--constants", str(tmp_path / "missing.json"), "production"])

    assert exit_code == 2
    assert "does not exist" in capsys.readouterr().err


@pytest.mark.parametrize(
    "content",
    ["{not json", '{"maintenance_factor": "high"}', '{"curve_step_kg_per_day": NaN}'],
)
def test_bad_constants_file_reports_error(tmp_path, capsys, content: str) -> None:
    path = tmp_path / "constants.json"
    path.write_text(content, encoding="utf-8")

    exit_code = main(["--constants", str(path), "curve"])

    assert exit_code == 2
    assert capsys.readouterr().err.startswith("error: ")
