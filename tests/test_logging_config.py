import logging

from er_save_copy.logging_config import append_error_log, get_logger


def test_error_log_entry(tmp_path):
    try:
        raise ValueError("bad slot data")
    except ValueError as e:
        log_path = append_error_log(tmp_path, "Copy failed", e)

    content = log_path.read_text(encoding="utf-8")
    assert log_path == tmp_path / "error.log"
    assert content.startswith("[")
    assert "Copy failed" in content
    assert "ValueError: bad slot data" in content


def test_error_log_appends(tmp_path):
    append_error_log(tmp_path, "first")
    append_error_log(tmp_path, "second")

    lines = (tmp_path / "error.log").read_text(encoding="utf-8").splitlines()
    assert [line.split("] ", 1)[1] for line in lines] == ["first", "second"]


def test_error_log_not_repeated_in_application_log(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="er_save_copy"):
        append_error_log(tmp_path, "Copy failed")

    assert not [record for record in caplog.records if record.name == "er_save_copy.error_log"]


def test_get_logger_is_child_of_application_logger():
    assert get_logger("transplant").name == "er_save_copy.transplant"
