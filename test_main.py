import pytest

import main
from main import _parse_args


@pytest.mark.parametrize(
    "args, expected",
    [
        (["file.bin"], ("file.bin", False)),
        (["-d", "file.bin"], ("file.bin", True)),
        (["file.bin", "--debug"], ("file.bin", True)),
        ([], (None, False)),
        (["-d"], (None, True)),
        (["a.bin", "b.bin"], (None, False)),
    ],
)
def test_parse_args(args, expected):
    assert _parse_args(args) == expected


def test_missing_path_prints_usage_and_exits(capsys, monkeypatch):
    monkeypatch.setattr(main.curses, "wrapper", _fail_wrapper)
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 1
    assert "Usage: hexl" in capsys.readouterr().err


def test_unreadable_file_fails_before_ui(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(main.curses, "wrapper", _fail_wrapper)
    with pytest.raises(SystemExit) as exc:
        main.main([str(tmp_path / "missing.bin")])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Load failed: ")


def test_empty_file_fails_before_ui(tmp_path, capsys, monkeypatch):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    monkeypatch.setattr(main.curses, "wrapper", _fail_wrapper)
    with pytest.raises(SystemExit):
        main.main([str(path)])
    assert "is empty" in capsys.readouterr().err


def test_loaded_bytes_reach_the_session(tmp_path, monkeypatch):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x01\x02\x03")
    seen = {}

    class FakeOrchestrator:
        def __init__(self, stdscr, state):
            seen["state"] = state

        def run(self):
            seen["ran"] = True

    monkeypatch.setattr(main, "Orchestrator", FakeOrchestrator)
    monkeypatch.setattr(main.curses, "wrapper", lambda fn: fn(object()))
    assert main.main([str(path)]) == 0
    assert seen["ran"]
    assert seen["state"].buffer == b"\x01\x02\x03"
    assert seen["state"].file_path == str(path)


def test_version_flag(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def _fail_wrapper(*_args, **_kwargs):
    raise AssertionError("curses UI must not start")
