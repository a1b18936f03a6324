from asc_timetable.config import AscConfig
from asc_timetable.errors import AscXmlError, MissingFieldError
from asc_timetable.models import ParseOptions


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("ASC_STRICT", raising=False)
    monkeypatch.delenv("ASC_COERCE_NUMBERS", raising=False)
    assert AscConfig().parse_options() == ParseOptions()


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("ASC_STRICT", "0")
    monkeypatch.setenv("ASC_COERCE_NUMBERS", "false")
    monkeypatch.setenv("ASC_LOG_LEVEL", "debug")
    config = AscConfig()
    assert config.parse_options() == ParseOptions(strict=False, coerce_numbers=False)
    assert config.log_level == "debug"


def test_error_carries_code_and_path():
    err = MissingFieldError("Room missing id or name", "timetable.rooms[0]")
    assert isinstance(err, AscXmlError)
    assert err.code == "MISSING_FIELD"
    assert str(err) == "Room missing id or name (at timetable.rooms[0])"


def test_base_error_accepts_explicit_code():
    err = AscXmlError("boom", code="INVALID_XML")
    assert err.code == "INVALID_XML"
    assert err.path is None
    assert str(err) == "boom"
