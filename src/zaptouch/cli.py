"""Command line entry point: ``zap``."""

from __future__ import annotations

import logging
from typing import Optional

import click

from zaptouch import __version__
from zaptouch.config import ZapConfig
from zaptouch.editor import open_in_editor
from zaptouch.errors import EditorError, ZapError
from zaptouch.executor import Executor
from zaptouch.fs import read_reference_times
from zaptouch.models import FileResult, FileTimeSpec
from zaptouch.parsing import format_timestamp, parse_adjustment, parse_date, parse_timestamp
from zaptouch.plan import Planner, PlannerOptions
from zaptouch.templates import TemplateRenderer

logger = logging.getLogger(__name__)

PROG = "zap"


def resolve_explicit_times(
    date: Optional[str],
    timestamp: Optional[str],
    reference: Optional[str],
) -> Optional[FileTimeSpec]:
    """
    Resolve at most one of -d/-t/-r into a FileTimeSpec.

    Raises:
        click.UsageError: if more than one source is given.
        ZapError: parse failure or missing reference file.
    """
    given = [flag for flag, value in (("-d", date), ("-t", timestamp), ("-r", reference)) if value]
    if len(given) > 1:
        raise click.UsageError(f"options {', '.join(given)} are mutually exclusive")

    if date:
        return FileTimeSpec.from_instant(parse_date(date))
    if timestamp:
        return FileTimeSpec.from_instant(parse_timestamp(timestamp))
    if reference:
        return read_reference_times(reference)
    return None


def confirm(message: str) -> bool:
    return click.confirm(message, default=False)


def _default_renderer() -> TemplateRenderer:
    return TemplateRenderer.from_config(ZapConfig.from_env())


def _report(result: FileResult) -> None:
    if result.status == "skipped":
        click.echo(f"Skipping {result.path}: {result.message}")
    elif result.status == "declined":
        click.echo(f"{PROG}: {result.path}: {result.message}", err=True)
    elif result.status == "failed":
        click.echo(f"{PROG}: {result.path}: {result.error_message}", err=True)


@click.command(name=PROG, context_settings={"help_option_names": ["--help"]})
@click.argument("filenames", nargs=-1, required=True, type=click.Path())
@click.option("-T", "--template", metavar="TEMPLATE_NAME",
              help="Template used to pre-populate the file (from <config>/templates).")
@click.option("-C", "--context", metavar="CONTEXT",
              help="Template context as key=value pairs, e.g. foo=bar,baz=qux.")
@click.option("-o", "--open", "open_editor", is_flag=True, help="Open the file(s) with $EDITOR.")
@click.option("-a", "access_only", is_flag=True, help="Only update the access time.")
@click.option("-m", "modification_only", is_flag=True, help="Only update the modification time.")
@click.option("-c", "--no-create", is_flag=True, help="Do not create missing files.")
@click.option("-p", "--create-intermediate-dirs", is_flag=True,
              help="Create missing parent directories without asking.")
@click.option("-A", "--adjust", metavar="[+|-][[hh]mm]SS",
              help="Adjust the file times by a signed offset (a leading + is optional).")
@click.option("-d", "--date", metavar="YYYY-MM-DDThh:mm:SS[.frac][tz]",
              help="Use this date instead of the current time.")
@click.option("-t", "--timestamp", metavar="[[CC]YY]MMDDhhmm[.SS]",
              help="Use this timestamp instead of the current time.")
@click.option("-r", "--reference", metavar="FILE", type=click.Path(),
              help="Use the times of FILE instead of the current time.")
@click.option("-h", "--symlink", "symlink_only", is_flag=True,
              help="Change the times of a symbolic link itself, not its target.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, "--version", prog_name=PROG)
@click.pass_context
def main(
    ctx: click.Context,
    filenames: tuple[str, ...],
    template: Optional[str],
    context: Optional[str],
    open_editor: bool,
    access_only: bool,
    modification_only: bool,
    no_create: bool,
    create_intermediate_dirs: bool,
    adjust: Optional[str],
    date: Optional[str],
    timestamp: Optional[str],
    reference: Optional[str],
    symlink_only: bool,
    verbose: bool,
) -> None:
    """touch, but with templates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        explicit_times = resolve_explicit_times(date, timestamp, reference)
        adjustment = parse_adjustment(adjust) if adjust is not None else None
    except ZapError as exc:
        click.echo(f"{PROG}: {exc}", err=True)
        ctx.exit(1)

    if explicit_times is not None and explicit_times.modification is not None:
        logger.debug("explicit time %s", format_timestamp(explicit_times.modification))

    update_access, update_modification = PlannerOptions.selection_from_flags(
        access_only, modification_only
    )
    options = PlannerOptions(
        no_create=no_create,
        adjust=adjustment,
        template_name=template,
        template_context=context,
        update_access=update_access,
        update_modification=update_modification,
        symlink_only=symlink_only,
        create_intermediate_dirs=create_intermediate_dirs,
    )
    executor = Executor(
        Planner(options),
        confirm=confirm,
        renderer_factory=_default_renderer,
    )

    run = executor.run(filenames, explicit_times)
    for result in run.results:
        _report(result)
    logger.debug("summary %s", run.summary)

    if open_editor:
        try:
            open_in_editor(list(filenames))
        except EditorError as exc:
            click.echo(f"{PROG}: warning: could not open editor: {exc}", err=True)

    ctx.exit(run.exit_code)
