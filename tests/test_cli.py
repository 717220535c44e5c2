import pytest

from watchcmd.cli import build_parser, main, run_watch, shell_command


def test_parser_reads_command_and_interval():
    args = build_parser().parse_args(["-n", "5", "date"])
    assert args.command == "date"
    assert args.interval == "5"


def test_parser_default_interval(monkeypatch):
    monkeypatch.delenv("WATCH_INTERVAL", raising=False)
    args = build_parser().parse_args(["date"])
    assert args.interval == "2"


def test_parser_interval_from_environment(monkeypatch):
    monkeypatch.setenv("WATCH_INTERVAL", "0.5")
    args = build_parser().parse_args(["date"])
    assert args.interval == "0.5"


def test_parser_accepts_long_prefix():
    args = build_parser().parse_args(["--inter", "3", "date"])
    assert args.interval == "3"


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 1


def test_shell_command_posix(monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    assert shell_command("ls -l") == ["sh", "-c", "ls -l"]


def test_shell_command_windows(monkeypatch):
    monkeypatch.setattr("sys.platform", "win32")
    monkeypatch.delenv("COMSPEC", raising=False)
    assert shell_command("dir") == ["cmd.exe", "/c", "dir"]


def test_shell_command_windows_uses_comspec(monkeypatch):
    monkeypatch.setattr("sys.platform", "win32")
    monkeypatch.setenv("COMSPEC", "shell.exe")
    assert shell_command("dir") == ["shell.exe", "/c", "dir"]


def test_run_watch_stops_on_failure(capsys):
    assert run_watch("exit 3", 0) == 3
    assert "watch: command failed" in capsys.readouterr().err


def test_run_watch_repeats_until_failure(tmp_path):
    counter = tmp_path / "runs"
    command = f'echo x >> "{counter}"; test "$(wc -l < "{counter}")" -lt 3'
    assert run_watch(command, 0) == 1
    assert counter.read_text().splitlines() == ["x", "x", "x"]


def test_main_reports_bad_interval(capsys):
    assert main(["-n", "abc", "true"]) == 1
    err = capsys.readouterr().err
    assert "watch: failed to parse argument: 'abc': Invalid argument" in err


def test_main_reports_bad_interval_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("WATCH_INTERVAL", "1.x")
    assert main(["true"]) == 1
    assert "'1.x'" in capsys.readouterr().err


def test_main_returns_zero_after_command_fails(capsys):
    assert main(["-n", "0.1", "exit 4"]) == 0
    assert "command failed" in capsys.readouterr().err