import re

from spws.logger import Logger, LogLevel

LINE_RE = re.compile(
    r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(\w+)\] \[([^:\]]+):(\d+)\] - (.*)\n$"
)


def test_line_format(capsys):
    logger = Logger(LogLevel.DEBUG)
    line = logger.log(LogLevel.INFO, "hello")
    match = LINE_RE.match(line)
    assert match is not None
    assert match.group(1) == "INFO"
    assert match.group(2) == "test_logger.py"
    assert match.group(4) == "hello"
    assert capsys.readouterr().out == line


def test_severe_levels_go_to_stderr(capsys):
    logger = Logger(LogLevel.DEBUG)
    line = logger.log(LogLevel.ERROR, "broken")
    captured = capsys.readouterr()
    assert captured.err == line
    assert captured.out == ""


def test_warning_goes_to_stdout(capsys):
    logger = Logger(LogLevel.DEBUG)
    line = logger.log(LogLevel.WARNING, "careful")
    captured = capsys.readouterr()
    assert captured.out == line
    assert captured.err == ""


def test_filtered_levels_produce_nothing(capsys):
    logger = Logger(LogLevel.WARNING)
    assert logger.log(LogLevel.INFO, "quiet") is None
    assert capsys.readouterr().out == ""


def test_set_level_enables_debug(capsys):
    logger = Logger(LogLevel.INFO)
    assert logger.log(LogLevel.DEBUG, "hidden") is None
    logger.set_level(LogLevel.DEBUG)
    line = logger.log(LogLevel.DEBUG, "shown")
    assert LINE_RE.match(line).group(1) == "DEBUG"


def test_format_arguments(capsys):
    logger = Logger()
    line = logger.log(LogLevel.NOTICE, "value %d of %s", 5, "ten")
    assert LINE_RE.match(line).group(4) == "value 5 of ten"


def test_message_is_truncated(capsys):
    logger = Logger()
    line = logger.log(LogLevel.INFO, "x" * 5000)
    assert len(line) <= 1199
    assert "x" * 1023 in line
    assert "x" * 1024 not in line


def test_file_output_appends(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("old\n", encoding="utf-8")
    with Logger(LogLevel.INFO, path) as logger:
        first = logger.log(LogLevel.INFO, "one")
        second = logger.log(LogLevel.ERROR, "two")
    assert path.read_text(encoding="utf-8") == "old\n" + first + second


def test_close_stops_file_output(tmp_path, capsys):
    path = tmp_path / "log.txt"
    logger = Logger(LogLevel.INFO, path)
    first = logger.log(LogLevel.INFO, "kept")
    logger.close()
    logger.log(LogLevel.INFO, "console only")
    assert path.read_text(encoding="utf-8") == first


def test_unopenable_file_reports_and_continues(tmp_path, capsys):
    path = tmp_path / "missing" / "log.txt"
    logger = Logger(LogLevel.INFO, path)
    err = capsys.readouterr().err
    assert err.startswith("[LOGGER] Failed to open log file: ")
    line = logger.log(LogLevel.INFO, "still here")
    assert capsys.readouterr().out == line
    assert not path.exists()