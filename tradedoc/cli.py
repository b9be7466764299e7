"""Trade document layout commands.

Commands:
    tradedoc layout <source>          Print the layout plan as JSON
    tradedoc layout <source> --view   Print the display view model as JSON
"""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer

from tradedoc.layout import DocumentShapeError, build_layout_plan, plan_to_dict
from tradedoc.logging_config import configure_logging
from tradedoc.ui import build_document_vm

EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 2
EXIT_SHAPE_ERROR = 3

log = logging.getLogger("tradedoc.cli")

app = typer.Typer(
    name="tradedoc",
    help="Lay out verifiable-credential trade documents.",
    no_args_is_help=True,
)


def read_input(source: str) -> str:
    """Read a file path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def output(result: Any, indent: int) -> None:
    typer.echo(json.dumps(result, indent=indent or None, ensure_ascii=False))


def output_error(code: str, message: str, exit_code: int) -> None:
    """Write an error object to stderr and exit."""
    typer.echo(json.dumps({"error": {"code": code, "message": message}}), err=True)
    raise typer.Exit(code=exit_code)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="TRADEDOC_LOG_LEVEL",
        help="Log level for stderr JSON logs",
    ),
) -> None:
    """Lay out verifiable-credential trade documents."""
    configure_logging(log_level=log_level, stream=sys.stderr)


@app.command("layout")
def layout_cmd(
    source: str = typer.Argument(
        ...,
        help="Document JSON file path, or '-' for stdin",
    ),
    view: bool = typer.Option(
        False,
        "--view",
        help="Output the display view model instead of the layout plan",
    ),
    indent: int = typer.Option(
        2,
        "--indent",
        help="JSON indentation (0 for compact output)",
    ),
) -> None:
    """Build the layout plan for a trade document.

    Examples:
        tradedoc layout invoice.json
        cat invoice.json | tradedoc layout - --view
    """
    try:
        document = json.loads(read_input(source))
    except OSError as e:
        output_error("INPUT_UNREADABLE", str(e), EXIT_PARSE_ERROR)
        return  # unreachable, but helps type checker
    except json.JSONDecodeError as e:
        output_error("INPUT_INVALID_JSON", str(e), EXIT_PARSE_ERROR)
        return

    try:
        if view:
            result = asdict(build_document_vm(document))
        else:
            result = plan_to_dict(build_layout_plan(document))
    except DocumentShapeError as e:
        log.warning(f"layout_rejected source={source} reason={e}")
        output_error(e.code, str(e), EXIT_SHAPE_ERROR)
        return

    output(result, indent)


if __name__ == "__main__":
    app()
