#!/usr/bin/env python3
"""
xreplace.cli.cli

Typer-based CLI for overwriting files by extension.

Examples
--------
Copy one file over every ``.obj`` file in ``models/``:

    xreplace --file cube.obj models/ .obj

Spread the ``.obj`` files of ``library/`` evenly over ``models/``, asking
before each overwrite:

    xreplace --ask --dir library/ models/ .obj

WARNING: overwritten files are not backed up. There is no undo.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence

import click
import typer

from xreplace import __version__
from xreplace.errors import ArgumentError, ReplaceError

app = typer.Typer(
    name="xreplace",
    help="Batch file content replacer.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

EPILOG = (
    "In --file mode the same source is copied into every matching target. "
    "In --dir mode targets are split evenly among the sources, e.g. "
    "3 sources and 200 targets give 67, 67 and 66 targets each. "
    "This program overwrites files permanently. There is no undo."
)


def _configure_logging(debug: bool) -> None:
    """Route library log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_replace_error(exc: Exception, debug: bool) -> int:
    """Print a user-facing error line and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"ERROR: {exc}", err=True)
    typer.echo("INFO: Try --help", err=True)
    overwritten = getattr(exc, "overwritten", None)
    if overwritten:
        typer.echo(f"INFO: Overwritten files: {overwritten}", err=True)
    if debug:
        typer.echo("Traceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"xreplace is running version {__version__}")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def replace_cmd(
    dest_dir: str | None = typer.Argument(
        None,
        metavar="DESTINATION_DIRECTORY",
        help="Folder containing the files to be overwritten.",
        show_default=False,
    ),
    extension: str | None = typer.Argument(
        None,
        metavar="EXTENSION",
        help="Extension (with dot) of files to replace and read from. Example: .obj",
        show_default=False,
    ),
    source_file: str | None = typer.Option(
        None, "--file", "-f", help="Use a single file as the replacement source."
    ),
    source_dir: str | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Use every file with the extension in a directory as sources.",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the initial confirmation."),
    ask: bool = typer.Option(
        False, "--ask", "-a", help="Ask before overwriting each target file."
    ),
    sort_files: bool = typer.Option(
        False,
        "--sort",
        "-s",
        help="Sort sources and targets by name instead of directory order.",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the planned overwrites without copying."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show program version and exit.",
    ),
) -> None:
    """Batch file content replacer.

    Overwrite files matching EXTENSION in DESTINATION_DIRECTORY. Exactly one
    of --file or --dir selects the source.
    """
    del version
    _configure_logging(debug)

    try:
        if dest_dir is None or extension is None:
            raise ArgumentError("Unfulfilled arguments")
        if source_file is not None and source_file.startswith("-"):
            raise ArgumentError("--file requires file")
        if source_dir is not None and source_dir.startswith("-"):
            raise ArgumentError("--dir requires path")

        from xreplace.application.use_cases import build_replace_options, run_replace

        options = build_replace_options(
            source_file=source_file,
            source_dir=source_dir,
            dest_dir=dest_dir,
            extension=extension,
            skip_confirmation=yes,
            confirm_each=ask,
            sort_files=sort_files,
            dry_run=dry_run,
        )
        result = run_replace(options)
    except ReplaceError as exc:
        raise typer.Exit(code=_print_replace_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_replace_error(exc, debug))

    if result.dry_run and result.plan is not None:
        for source, destination in result.plan.pairs():
            typer.echo(f"Target: {destination.name} <- {source.name}")
        typer.echo(f"INFO: Planned overwrites: {len(result.plan)}")
        return
    typer.echo(f"INFO: Overwritten files: {result.overwritten}")


def main(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point and the only place the process exits.

    Parser usage errors are reported like every other failure, with
    ``ERROR:`` and exit status 1.
    """
    try:
        code = app(args=argv, prog_name="xreplace", standalone_mode=False)
    except click.UsageError as exc:
        code = _print_replace_error(ArgumentError(exc.format_message()), debug=False)
    except typer.Abort:
        typer.echo("ERROR: Aborted", err=True)
        code = 1
    raise SystemExit(code if isinstance(code, int) else 0)


if __name__ == "__main__":
    main()
