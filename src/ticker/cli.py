"""Typer CLI for ticker."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

import typer
from rich.console import Console

from .config import DEFAULT_SETTINGS
from .exceptions import InvalidInvocationError
from .logs import configure_logging
from .loop import run_loop
from .models import Invocation
from .validator import validate_invocation

PROGRAM_NAME = "ticker"

app = typer.Typer(add_completion=False, help="Print one increasing integer per second.")

err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def _print_usage(program: str) -> None:
    err_console.print(DEFAULT_SETTINGS.usage(program), markup=False)


@app.command(
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
def main(
    ctx: typer.Context,
    arguments: Optional[List[str]] = typer.Argument(None, metavar="<seconds>"),
) -> None:
    """Count from 0 up to SECONDS - 1, sleeping one second after each line."""
    configure_logging(DEFAULT_SETTINGS.log_level)
    program = ctx.find_root().info_name or PROGRAM_NAME
    invocation = Invocation(program=program, arguments=[*(arguments or []), *ctx.args])
    try:
        target = validate_invocation(invocation, DEFAULT_SETTINGS)
    except InvalidInvocationError as exc:
        _print_usage(exc.program)
        raise typer.Exit(code=1) from exc
    run_loop(target, settings=DEFAULT_SETTINGS)


def run(argv: Sequence[str] | None = None) -> None:
    """Entry point. Checks the untouched argv before click strips ``--``."""
    invocation = Invocation.from_argv(sys.argv if argv is None else argv, program=PROGRAM_NAME)
    try:
        validate_invocation(invocation, DEFAULT_SETTINGS)
    except InvalidInvocationError as exc:
        _print_usage(exc.program)
        raise SystemExit(1) from exc
    app(args=invocation.arguments, prog_name=PROGRAM_NAME)


if __name__ == "__main__":
    run()
