"""Keyword-argument API for replace runs."""

from __future__ import annotations

from pathlib import Path

from xreplace.application.ports import ConfirmationGate
from xreplace.application.results import RunResult
from xreplace.application.use_cases import build_replace_options, run_replace


def replace_from_file(
    source_file: str | Path,
    dest_dir: str | Path,
    extension: str,
    *,
    skip_confirmation: bool = False,
    confirm_each: bool = False,
    sort_files: bool = False,
    dry_run: bool = False,
    gate: ConfirmationGate | None = None,
) -> RunResult:
    """Overwrite every matching file in ``dest_dir`` with ``source_file``.

    Parameters
    ----------
    source_file : str | Path
        File whose bytes are replicated.
    dest_dir : str | Path
        Directory holding the files to overwrite.
    extension : str
        Dot-prefixed suffix selecting destination files, e.g. ``.obj``.
    skip_confirmation : bool, default=False
        Skip the initial "Target directory" confirmation.
    confirm_each : bool, default=False
        Ask before every single overwrite.
    sort_files : bool, default=False
        Sort destinations by name instead of directory order.
    dry_run : bool, default=False
        Plan only, copy nothing.
    gate : ConfirmationGate | None, default=None
        Confirmation implementation; console prompt when omitted.

    Returns
    -------
    RunResult
        Overwrite count and plan summary.
    """
    options = build_replace_options(
        source_file=str(source_file),
        dest_dir=str(dest_dir),
        extension=extension,
        skip_confirmation=skip_confirmation,
        confirm_each=confirm_each,
        sort_files=sort_files,
        dry_run=dry_run,
    )
    return run_replace(options, gate=gate)


def replace_from_dir(
    source_dir: str | Path,
    dest_dir: str | Path,
    extension: str,
    *,
    skip_confirmation: bool = False,
    confirm_each: bool = False,
    sort_files: bool = False,
    dry_run: bool = False,
    gate: ConfirmationGate | None = None,
) -> RunResult:
    """Distribute matching files of ``source_dir`` evenly over ``dest_dir``.

    Both directories are filtered by ``extension``. Destinations are split
    into contiguous runs, earlier sources taking one extra file when the
    split is uneven. See :func:`replace_from_file` for the shared flags.
    """
    options = build_replace_options(
        source_dir=str(source_dir),
        dest_dir=str(dest_dir),
        extension=extension,
        skip_confirmation=skip_confirmation,
        confirm_each=confirm_each,
        sort_files=sort_files,
        dry_run=dry_run,
    )
    return run_replace(options, gate=gate)
