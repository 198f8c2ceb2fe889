import json

from progression.config import get_config
from progression.logging_utils import _format, get_logger


def test_key_value_format():
    line = _format("info", {"event": "level up", "level_to": 5, "skipped": None})
    assert line.startswith("level=info ts=")
    assert "event=level_up" in line
    assert "level_to=5" in line
    assert "skipped" not in line


def test_json_format():
    rec = json.loads(_format("warn", {"event": "x", "curve_id": 255, "skipped": None}, True))
    assert rec["level"] == "warn"
    assert rec["curve_id"] == 255
    assert "skipped" not in rec
    assert isinstance(rec["ts"], int)


def test_reserved_field_names_are_renamed():
    line = _format("warn", {"event": "x", "level": 7, "ts": "now"})
    assert line.startswith("level=warn ts=")
    assert "field_level=7" in line
    assert "field_ts=now" in line
    rec = json.loads(_format("warn", {"level": 7}, True))
    assert rec["level"] == "warn"
    assert rec["field_level"] == 7


def test_logger_accepts_level_field(capsys):
    get_logger("test").warn(event="band", level=3)
    err = capsys.readouterr().err
    assert err.startswith("level=warn ")
    assert "field_level=3" in err


def test_get_logger_is_cached():
    assert get_logger("growth") is get_logger("growth")
    assert get_logger("growth") is not get_logger("xp")


def test_threshold_filters(monkeypatch, capsys):
    monkeypatch.setenv("PROGRESSION_LOG_LEVEL", "error")
    get_config.cache_clear()
    log = get_logger("test")
    log.warn(event="hidden")
    log.error(event="shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "event=shown" in captured.err
    assert "logger=test" in captured.err


def test_info_goes_to_stdout(capsys):
    get_logger("test").info(event="hello")
    get_logger("test").debug(event="quiet")
    captured = capsys.readouterr()
    assert "event=hello" in captured.out
    assert "quiet" not in captured.out
