"""CLI — end-to-end tests for the passport-check entry point.

Tests cover:
    - Packaged data prints both counts on two stdout lines
    - --input override and --workers flag
    - Malformed input exits non-zero with the message on stderr
    - Missing input file exits with the IO error code
    - Flags override environment settings
    - Bad worker counts rejected without a traceback
    - Each error reported once on stderr; envelope logged at DEBUG
"""

import json

import pytest
from pydantic import ValidationError

from passport_check.main import build_parser, main, resolve_settings
from passport_check.config import Settings


def test_packaged_data_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Passports with valid keys: 10\n"
        "Passports with valid values: 5\n"
    )


def test_input_override(tmp_path, capsys, four_record_batch):
    path = tmp_path / "batch.txt"
    path.write_text(four_record_batch, encoding="utf-8")
    assert main(["--input", str(path), "--workers", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Passports with valid keys: 2",
        "Passports with valid values: 1",
    ]


def test_malformed_input_exits_with_parse_code(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("byr:1937 iyr2017\n", encoding="utf-8")
    assert main(["--input", str(path)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Malformed field 'iyr2017'" in captured.err


def test_missing_input_exits_with_io_code(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 3
    assert "Cannot read input" in capsys.readouterr().err


def test_environment_input_path(tmp_path, monkeypatch, capsys, valid_values_batch):
    path = tmp_path / "valid.txt"
    path.write_text(valid_values_batch, encoding="utf-8")
    monkeypatch.setenv("PASSPORT_CHECK_INPUT_PATH", str(path))
    assert main([]) == 0
    assert "Passports with valid values: 4" in capsys.readouterr().out


def test_flags_override_settings():
    args = build_parser().parse_args(["--workers", "3", "--log-level", "info"])
    settings = resolve_settings(args, Settings(workers=1, log_format="json"))
    assert settings.workers == 3
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.input_path is None




@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_bad_workers_flag_is_usage_error(value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--workers", value])
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert "--workers" in captured.err
    assert captured.out == ""


def test_bad_workers_environment_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setenv("PASSPORT_CHECK_WORKERS", "0")
    assert main([]) == 4
    captured = capsys.readouterr()
    assert "invalid configuration" in captured.err
    assert "workers" in captured.err
    assert captured.out == ""


def test_resolve_settings_still_validates_merged_values():
    args = build_parser().parse_args([])
    args.workers = 0
    with pytest.raises(ValidationError):
        resolve_settings(args, Settings())


def test_error_reported_once_on_stderr(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("byr:1937 iyr2017\n", encoding="utf-8")
    assert main(["--input", str(path), "--log-level", "info"]) == 2
    assert capsys.readouterr().err.count("Malformed field") == 1


def test_error_envelope_logged_at_debug(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("byr:1937 iyr2017\n", encoding="utf-8")
    assert main(["--input", str(path), "--log-level", "debug", "--log-format", "json"]) == 2
    lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    payloads = [json.loads(line) for line in lines]
    envelope = next(p["error"] for p in payloads if p.get("error_code") == "MALFORMED_FIELD")
    assert envelope["code"] == "MALFORMED_FIELD"
    assert envelope["context"]["token"] == "iyr2017"
    assert envelope["context"]["record_index"] == 0


def test_oversized_year_is_invalid_not_fatal(tmp_path, capsys):
    path = tmp_path / "huge.txt"
    path.write_text(
        f"byr:{'1' * 5000} iyr:2012 eyr:2030 hgt:74in hcl:#623a2f ecl:grn pid:087499704\n",
        encoding="utf-8",
    )
    assert main(["--input", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Passports with valid keys: 1",
        "Passports with valid values: 0",
    ]
