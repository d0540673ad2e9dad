import io

import pytest

from levellog.file_client import QueueLogWorker, main, parse_level, run_session
from levellog.logger import FileLogger, Level


def _fields(path):
    return [line.split(" | ") for line in path.read_text(encoding="utf-8").splitlines()]


@pytest.mark.parametrize(
    "value, expected",
    [("1", Level.LOW), ("2", Level.STANDART), (3, Level.HIGH), (Level.LOW, Level.LOW)],
)
def test_parse_level_accepts_valid_values(value, expected):
    assert parse_level(value) is expected


@pytest.mark.parametrize("value", [0, 4, "-1", "abc", "", None])
def test_parse_level_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        parse_level(value)


def test_worker_logs_in_order_and_filters(tmp_path):
    path = tmp_path / "log.txt"
    with FileLogger(path, Level.STANDART) as logger:
        with QueueLogWorker(logger) as worker:
            worker.submit("first", Level.HIGH)
            worker.submit("dropped", Level.LOW)
            worker.submit("second", Level.STANDART)
    fields = _fields(path)
    assert [f[2] for f in fields] == ["first", "second"]
    assert [f[1] for f in fields] == ["high", "standart"]


def test_worker_threshold_change_is_ordered(tmp_path):
    path = tmp_path / "log.txt"
    with FileLogger(path, Level.HIGH) as logger:
        with QueueLogWorker(logger) as worker:
            worker.submit("before", Level.LOW)
            worker.set_default_level(Level.LOW)
            worker.submit("after", Level.LOW)
        assert logger.default_level is Level.LOW
    assert [f[2] for f in _fields(path)] == ["after"]


def test_worker_rejects_invalid_level(tmp_path):
    with FileLogger(tmp_path / "log.txt", Level.LOW) as logger:
        with QueueLogWorker(logger) as worker:
            with pytest.raises(ValueError):
                worker.submit("x", 7)


def test_worker_submit_after_close_raises(tmp_path):
    with FileLogger(tmp_path / "log.txt", Level.LOW) as logger:
        worker = QueueLogWorker(logger)
        worker.close()
        worker.close()
        with pytest.raises(RuntimeError):
            worker.submit("late", Level.HIGH)


def test_session_sends_message_and_exits(tmp_path):
    path = tmp_path / "log.txt"
    out = io.StringIO()
    with FileLogger(path, Level.STANDART) as logger:
        code = run_session(logger, Level.STANDART, ["2", "3", "hello", "3"], out)
    assert code == 0
    assert "The program is terminating its work." in out.getvalue()
    assert [f[1:] for f in _fields(path)] == [["high", "hello"]]


def test_session_threshold_and_default_choice(tmp_path):
    path = tmp_path / "log.txt"
    out = io.StringIO()
    lines = ["1", "3", "2", "2", "low msg", "2", "4", "kept", "3"]
    with FileLogger(path, Level.LOW) as logger:
        run_session(logger, Level.LOW, lines, out)
    assert [f[1:] for f in _fields(path)] == [["high", "kept"]]


def test_session_default_choice_uses_initial_default(tmp_path):
    path = tmp_path / "log.txt"
    with FileLogger(path, Level.STANDART) as logger:
        run_session(logger, Level.STANDART, ["2", "4", "plain", "3"], io.StringIO())
    assert [f[1:] for f in _fields(path)] == [["standart", "plain"]]


def test_session_reports_incorrect_level(tmp_path):
    path = tmp_path / "log.txt"
    out = io.StringIO()
    with FileLogger(path, Level.LOW) as logger:
        run_session(logger, Level.LOW, ["2", "9", "1", "0", "3"], out)
    assert out.getvalue().count("Incorrect importance level value") == 2
    assert path.read_text(encoding="utf-8") == ""


def test_session_reports_input_error(tmp_path):
    out = io.StringIO()
    with FileLogger(tmp_path / "log.txt", Level.LOW) as logger:
        run_session(logger, Level.LOW, ["7", "3"], out)
    text = out.getvalue()
    assert "Input error!" in text
    assert text.count("Select operation: ") == 2


def test_session_stops_at_end_of_input(tmp_path):
    out = io.StringIO()
    with FileLogger(tmp_path / "log.txt", Level.LOW) as logger:
        code = run_session(logger, Level.LOW, [], out)
    assert code == 0
    assert "The program is terminating its work." not in out.getvalue()


def test_main_rejects_bad_level(tmp_path, capsys):
    assert main([str(tmp_path / "log.txt"), "5"]) == 1
    assert "Incorrect importance level value" in capsys.readouterr().out


def test_main_requires_arguments():
    assert main([]) == 2


def test_main_runs_session_from_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "log.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\nhi there\n3\n"))
    assert main([str(path), "2"]) == 0
    assert "The program is terminating its work." in capsys.readouterr().out
    assert [f[1:] for f in _fields(path)] == [["high", "hi there"]]