"""Application use-cases orchestrating replace workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError as SchemaValidationError

from xreplace.adapters.filesystem import ExtensionDirectoryScanner, StreamFileCopier
from xreplace.adapters.prompt import ConsoleConfirmationGate
from xreplace.application.options import ReplaceOptions
from xreplace.application.ports import ConfirmationGate, DirectoryScanner, FileCopier
from xreplace.application.results import RunResult
from xreplace.distribution import DistributionPlan, distribute_multi, distribute_single
from xreplace.errors import DeclinedError, ReplaceError, ValidationError
from xreplace.schemas import ReplaceRequestConfig
from xreplace.types import FileList

logger = logging.getLogger(__name__)


def _schema_messages(exc: SchemaValidationError) -> list[str]:
    messages: list[str] = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        message = str(cause) if cause is not None else error["msg"]
        if message not in messages:
            messages.append(message)
    return messages


def build_replace_options(
    *,
    dest_dir: str,
    extension: str,
    source_file: str | None = None,
    source_dir: str | None = None,
    skip_confirmation: bool = False,
    confirm_each: bool = False,
    sort_files: bool = False,
    dry_run: bool = False,
) -> ReplaceOptions:
    """Validate raw request strings and build immutable run options.

    Raises
    ------
    ValidationError
        If a string is empty, the extension lacks its leading dot, or not
        exactly one of ``source_file`` / ``source_dir`` is given.
    """
    try:
        config = ReplaceRequestConfig(
            source_file=source_file,
            source_dir=source_dir,
            dest_dir=dest_dir,
            extension=extension,
        )
    except SchemaValidationError as exc:
        raise ValidationError("; ".join(_schema_messages(exc))) from exc

    return ReplaceOptions(
        source=Path(config.source),
        dest_dir=Path(config.dest_dir),
        extension=config.extension,
        mode=config.mode,
        skip_confirmation=skip_confirmation,
        confirm_each=confirm_each,
        sort_files=sort_files,
        dry_run=dry_run,
    )


def validate_options(options: ReplaceOptions) -> None:
    """Check that source and destination paths have the expected kind.

    Raises
    ------
    ValidationError
        On the first path that is missing or of the wrong kind.
    """
    if options.mode == "single" and not options.source.is_file():
        raise ValidationError(f"File is invalid: {options.source}")
    if options.mode == "multi" and not options.source.is_dir():
        raise ValidationError(f"Directory is invalid: {options.source}")
    if not options.dest_dir.is_dir():
        raise ValidationError(f"Directory is invalid: {options.dest_dir}")


def collect_files(
    options: ReplaceOptions, scanner: DirectoryScanner
) -> tuple[FileList, FileList]:
    """Return ``(sources, destinations)`` for the configured mode."""
    if options.mode == "single":
        sources: list[Path] = [options.source.absolute()]
    else:
        sources = scanner.scan(options.source, options.extension)
    destinations = scanner.scan(options.dest_dir, options.extension)

    if options.sort_files:
        sources = sorted(sources, key=lambda path: path.name)
        destinations = sorted(destinations, key=lambda path: path.name)
    return sources, destinations


def plan_distribution(
    options: ReplaceOptions, sources: FileList, destinations: FileList
) -> DistributionPlan:
    """Pair sources with destinations according to the run mode."""
    if options.mode == "single":
        plan = distribute_single(sources[0], destinations)
    else:
        plan = distribute_multi(sources, destinations)
    logger.debug("distribution group sizes: %s", plan.sizes)
    return plan


def execute_plan(
    plan: DistributionPlan,
    *,
    copier: FileCopier,
    gate: ConfirmationGate | None = None,
    confirm_each: bool = False,
) -> int:
    """Copy every planned pair in order and return the overwritten count.

    A declined per-file confirmation or a failed copy stops the run. Files
    already overwritten stay overwritten; the count so far is attached to the
    raised error as ``overwritten``.
    """
    if confirm_each and gate is None:
        raise ValueError("a confirmation gate is required when confirm_each is set")

    overwritten = 0
    try:
        for source, destination in plan.pairs():
            if confirm_each and not gate.confirm(f"Target: {destination.name}"):
                raise DeclinedError("Operation cancelled by user")
            copier.copy(source, destination)
            overwritten += 1
            logger.debug("overwrote %s with %s", destination, source)
    except ReplaceError as exc:
        exc.overwritten = overwritten
        raise
    return overwritten


def run_replace(
    options: ReplaceOptions,
    *,
    scanner: DirectoryScanner | None = None,
    copier: FileCopier | None = None,
    gate: ConfirmationGate | None = None,
) -> RunResult:
    """Use-case: validate, confirm, scan, plan and overwrite.

    Parameters
    ----------
    options : ReplaceOptions
        Run configuration.
    scanner, copier, gate : optional
        Port implementations; filesystem and console adapters by default.

    Returns
    -------
    RunResult
        Number of overwritten files and the planned group sizes.
    """
    scanner = scanner or ExtensionDirectoryScanner()
    copier = copier or StreamFileCopier()
    gate = gate or ConsoleConfirmationGate()

    validate_options(options)

    if not options.skip_confirmation and not options.dry_run:
        if not gate.confirm(f"Target directory: {options.dest_dir}"):
            raise DeclinedError("Operation cancelled by user")

    sources, destinations = collect_files(options, scanner)
    plan = plan_distribution(options, sources, destinations)

    if options.dry_run:
        return RunResult(
            overwritten=0,
            mode=options.mode,
            group_sizes=plan.sizes,
            dry_run=True,
            plan=plan,
        )

    overwritten = execute_plan(
        plan, copier=copier, gate=gate, confirm_each=options.confirm_each
    )
    logger.info("overwrote %d file(s) in %s", overwritten, options.dest_dir)
    return RunResult(
        overwritten=overwritten,
        mode=options.mode,
        group_sizes=plan.sizes,
        plan=plan,
    )
