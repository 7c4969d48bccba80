"""Test the console entrypoint."""
import io
import logging
import sys

from pydantic import ValidationError
import pytest

from simple_calculator.common.logger import logger
from simple_calculator.main import INCOMPLETE_INPUT_MESSAGE, CliArgs, main, parse_args


def test_parse_args_defaults() -> None:
    """No arguments means stdin input and WARNING logging."""
    args = parse_args([])
    assert args.input_file is None
    assert args.log_level == "WARNING"


def test_parse_args_log_level_case_insensitive() -> None:
    """--log-level accepts lower-case level names."""
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_parse_args_missing_input_file(tmp_path) -> None:
    """A missing --input file is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--input", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 2


def test_cli_args_is_frozen() -> None:
    """CliArgs cannot be modified after validation."""
    args = CliArgs()
    with pytest.raises(ValidationError):
        args.log_level = "DEBUG"


def test_main_reads_stdin(monkeypatch, capsys) -> None:
    """main runs a session on stdin and returns 0."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3\n+\n"))
    assert main([]) == 0
    assert "Result: 5.0 + 3.0 = 8.0" in capsys.readouterr().out


def test_main_reads_input_file(tmp_path, capsys) -> None:
    """--input answers the prompts from a file."""
    answers = tmp_path / "answers.txt"
    answers.write_text("abc\n10\n4\n/\n")
    assert main(["--input", str(answers)]) == 0
    output = capsys.readouterr().out
    assert "Please enter a valid number." in output
    assert "Result: 10.0 / 4.0 = 2.5" in output


def test_main_end_of_input(monkeypatch, capsys) -> None:
    """main returns 1 when the input ends before the operator."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3\n"))
    assert main([]) == 1
    assert INCOMPLETE_INPUT_MESSAGE in capsys.readouterr().out


def test_main_logs_to_stderr_only(monkeypatch, capsys) -> None:
    """The division-by-zero record goes to stderr, the dialogue stays on stdout."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n0\n/\n"))
    assert main(["--log-level", "debug"]) == 0
    captured = capsys.readouterr()
    assert "➗⚠️" in captured.err
    assert "➗⚠️" not in captured.out
    assert "Warning: Division by zero, returning 0" in captured.out


def test_main_default_level_hides_debug_records(monkeypatch, capsys) -> None:
    """At the default WARNING level the evaluation debug record is not written."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3\n+\n"))
    assert main([]) == 0
    assert "🧮 5.0 + 3.0 = 8.0" not in capsys.readouterr().err
    assert logger.level == logging.WARNING


def test_main_debug_level_shows_debug_records(monkeypatch, capsys) -> None:
    """--log-level debug lets the evaluation debug record through."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3\n+\n"))
    assert main(["--log-level", "debug"]) == 0
    assert "🧮 5.0 + 3.0 = 8.0" in capsys.readouterr().err
    assert logger.level == logging.DEBUG


def test_main_error_level_hides_division_warning(monkeypatch, capsys) -> None:
    """--log-level error drops the division-by-zero warning record."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n0\n/\n"))
    assert main(["--log-level", "error"]) == 0
    captured = capsys.readouterr()
    assert "➗⚠️" not in captured.err
    assert "Warning: Division by zero, returning 0" in captured.out


def test_logger_does_not_propagate() -> None:
    """Package records are not printed a second time by the root logger."""
    assert logger.propagate is False
