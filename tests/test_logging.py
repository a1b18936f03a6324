import json

from asc_timetable.logging import get_logger, setup_logging


def test_json_logs_go_to_stderr(capsys):
    setup_logging(json_output=True, log_level="INFO")
    get_logger("asc_timetable.test").info("parse_started", input="a.xml")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "parse_started"
    assert event["level"] == "info"
    assert event["input"] == "a.xml"


def test_level_filters_lower_events(capsys):
    setup_logging(json_output=False, log_level="WARNING")
    log = get_logger("asc_timetable.test")
    log.info("hidden_event")
    log.warning("shown_event")

    err = capsys.readouterr().err
    assert "hidden_event" not in err
    assert "shown_event" in err
