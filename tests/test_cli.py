import logging
import time

import pytest
from typer.testing import CliRunner

from ticker.cli import app, run
from ticker.logs import PACKAGE_LOGGER, configure_logging

USAGE = "Usage: ticker <seconds to sleep>"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "sleep", lambda _: None)


def test_cli_counts_to_target() -> None:
    result = runner.invoke(app, ["4"], prog_name="ticker")
    assert result.exit_code == 0
    assert result.output == "0\n1\n2\n3\n"


@pytest.mark.parametrize(
    "args",
    [[], ["0"], ["abc"], [""], ["-3"], ["1", "2"], ["--help"], ["--verbose"]],
)
def test_cli_usage_error(args: list[str]) -> None:
    result = runner.invoke(app, args, prog_name="ticker")
    assert result.exit_code == 1
    assert result.output.strip() == USAGE


def test_cli_usage_names_program() -> None:
    result = runner.invoke(app, [], prog_name="loop")
    assert result.exit_code == 1
    assert result.output.strip() == "Usage: loop <seconds to sleep>"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(logging.DEBUG)
    handlers = list(logger.handlers)
    configure_logging(logging.WARNING)
    assert logging.getLogger(PACKAGE_LOGGER).handlers == handlers
    assert logger.level == logging.WARNING


@pytest.mark.parametrize("argv", [["ticker", "--", "2"], ["ticker", "2", "--"], ["ticker", "--"]])
def test_run_rejects_separator_before_parsing(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(argv)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == USAGE


def test_run_counts_with_raw_argv(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["/tmp/__main__.py", "3"])
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "0\n1\n2\n"
    assert captured.err == ""
