import io
import os
import sys

import pytest

from minish.simple import (
    ExitRequested,
    execute,
    exit_status,
    is_env_command,
    is_exit_command,
    iter_lines,
    main,
    print_environment,
    read_line,
    run_external,
    split_line,
)


def test_split_line_on_all_separators():
    assert split_line("ls\t-l \r\n/tmp\a x") == ["ls", "-l", "/tmp", "x"]


def test_split_line_blank():
    assert split_line("  \t\n") == []


def test_read_line_strips_newline():
    stream = io.StringIO("echo hi\nsecond")
    assert read_line(stream) == "echo hi"
    assert read_line(stream) == "second"
    assert read_line(stream) is None


def test_iter_lines_drops_unterminated_tail():
    stream = io.StringIO("one\ntwo\nthree")
    assert list(iter_lines(stream)) == ["one", "two"]


def test_iter_lines_keeps_empty_lines():
    assert list(iter_lines(io.StringIO("\na\n"))) == ["", "a"]


@pytest.mark.parametrize(
    "args, expected",
    [(["exit"], True), (["exit", "3"], True), (["env"], False), ([], False)],
)
def test_is_exit_command(args, expected):
    assert is_exit_command(args) is expected


@pytest.mark.parametrize(
    "args, expected",
    [(["env"], True), (["environment"], False), (["exit"], False), ([], False)],
)
def test_is_env_command(args, expected):
    assert is_env_command(args) is expected


def test_exit_status_without_argument():
    out = io.StringIO()
    assert exit_status(["exit"], out) == 0
    assert out.getvalue() == ""


@pytest.mark.parametrize("word, status", [("5", 5), ("0", 0), ("-3", -3), ("12ab", 12)])
def test_exit_status_numeric(word, status):
    out = io.StringIO()
    assert exit_status(["exit", word], out) == status
    assert out.getvalue() == ""


def test_exit_status_non_numeric_reports_error():
    out = io.StringIO()
    assert exit_status(["exit", "abc"], out) == 1
    assert out.getvalue() == "Error: exit: abc: numeric argument required\n"


def test_print_environment_lines():
    out = io.StringIO()
    print_environment({"A": "1", "B": "two"}, out)
    assert out.getvalue().splitlines() == ["A=1", "B=two"]


def test_execute_env_continues_and_prints():
    out = io.StringIO()
    assert execute(["env"], {"HOME": "/home/x"}, out) is True
    assert out.getvalue() == "HOME=/home/x\n"


def test_execute_exit_raises_with_status():
    with pytest.raises(ExitRequested) as info:
        execute(["exit", "9"], {}, io.StringIO())
    assert info.value.status == 9


def test_execute_empty_command_continues():
    out = io.StringIO()
    assert execute([], {}, out) is True
    assert out.getvalue() == ""


def test_run_external_not_found_in_path(tmp_path):
    out = io.StringIO()
    code = run_external(["no-such-program-here"], {"PATH": str(tmp_path)}, out)
    assert code == 1
    assert out.getvalue() == "./shell: No such file or directory\n"


def test_run_external_absolute_missing(tmp_path, capsys):
    code = run_external([str(tmp_path / "missing")], {}, io.StringIO())
    assert code == 1
    assert "execve error" in capsys.readouterr().err


def test_run_external_absolute_returns_exit_code():
    code = run_external(
        [sys.executable, "-c", "import sys; sys.exit(3)"], {}, io.StringIO()
    )
    assert code == 3


def test_run_external_searches_path():
    directory, name = os.path.split(sys.executable)
    code = run_external(
        [name, "-c", "import sys; sys.exit(4)"], {"PATH": directory}, io.StringIO()
    )
    assert code == 4


def test_run_external_uses_empty_environment():
    script = "import os, sys; sys.exit(0 if 'MARKER' not in os.environ else 7)"
    code = run_external([sys.executable, "-c", script], {"MARKER": "x"}, io.StringIO())
    assert code == 0


def test_main_arguments_exit_status():
    assert main(["prog", "exit 7"]) == 7


def test_main_arguments_env(monkeypatch, capsys):
    monkeypatch.setenv("MINISH_SAMPLE", "value")
    assert main(["prog", "env"]) == 0
    assert "MINISH_SAMPLE=value" in capsys.readouterr().out.splitlines()


def test_main_reads_stdin_until_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("env\nexit 2\nenv\n"))
    monkeypatch.setenv("MINISH_SAMPLE", "v")
    assert main(["prog"]) == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("MINISH_SAMPLE=v") == 1


def test_main_end_of_input_returns_zero(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["prog"]) == 0