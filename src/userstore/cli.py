"""userstore CLI - list, add, remove and find users in a JSON file."""

from __future__ import annotations

import sys
from typing import Annotated, Sequence

import typer

from . import __version__
from .config import FILE_ENV_VAR, OPERATIONS, Arguments, load_env
from .errors import UserStoreError
from .operations import perform

# Load environment variables from .env in the working directory if it exists
load_env()

app = typer.Typer(help="File-backed JSON user store", add_completion=False)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


def _note(verbose: bool, message: str) -> None:
    if verbose:
        typer.secho(message, fg=typer.colors.CYAN, err=True)


@app.command()
def userstore(
    operation: Annotated[
        str,
        typer.Option(
            "-operation", "--operation", help=f"One of: {', '.join(OPERATIONS)}"
        ),
    ] = "",
    file_name: Annotated[
        str,
        typer.Option(
            "-fileName",
            "--file-name",
            envvar=FILE_ENV_VAR,
            help="Path to the JSON file holding the users",
        ),
    ] = "",
    item: Annotated[
        str, typer.Option("-item", "--item", help="User JSON to add")
    ] = "",
    user_id: Annotated[
        str, typer.Option("-id", "--id", help="User id to remove or find")
    ] = "",
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Print diagnostics to stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("-v", "--version", is_eager=True, callback=version_callback),
    ] = False,
) -> None:
    """Perform one operation on the user file.

    Results are printed to stdout without a trailing newline. On failure the
    error message is printed and the exit code tells the kind of failure.
    """
    args = Arguments(operation=operation, file_name=file_name, item=item, id=user_id)
    _note(verbose, f"operation={args.operation or '-'} file={args.file_name or '-'}")

    try:
        perform(args, sys.stdout)
    except UserStoreError as e:
        typer.secho(str(e), fg=typer.colors.RED, nl=False)
        _note(verbose, f"failed: {type(e).__name__} (exit {e.exit_code})")
        raise typer.Exit(e.exit_code)

    sys.stdout.flush()
    _note(verbose, "ok")


def main(argv: Sequence[str] | None = None) -> int:
    rc = app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
    return rc or 0


def run() -> None:
    app()
