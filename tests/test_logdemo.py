from spws.logdemo import clean_log, main, run_demo


def test_run_demo_writes_all_messages(tmp_path, capsys):
    path = tmp_path / "log.txt"
    run_demo(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0].endswith("- System initialized.")
    assert "[ERROR]" in lines[1]
    assert lines[2].endswith("- Low disk space.")
    assert "[DEBUG]" in lines[3]


def test_run_demo_splits_console_streams(tmp_path, capsys):
    run_demo(tmp_path / "log.txt")
    captured = capsys.readouterr()
    assert "Failed to open configuration file." in captured.err
    assert "Failed to open configuration file." not in captured.out
    assert "Debugging enabled." in captured.out


def test_clean_log_empties_file(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("content\n", encoding="utf-8")
    assert clean_log(path) is True
    assert path.read_text(encoding="utf-8") == ""
    assert capsys.readouterr().out == "Log file cleaned.\n"


def test_clean_log_failure(tmp_path, capsys):
    assert clean_log(tmp_path / "nope" / "log.txt") is False
    assert capsys.readouterr().err == "Failed to clean log file.\n"


def test_main_runs_demo_then_cleans(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert len((tmp_path / "log.txt").read_text(encoding="utf-8").splitlines()) == 4
    assert main(["clean"]) == 0
    assert (tmp_path / "log.txt").read_text(encoding="utf-8") == ""