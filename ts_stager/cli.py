"""CLI entry point: ts-stage.

Subcommands:
    ts-stage run App.csproj lib/     # Stage referenced TypeScript outputs into lib/
    ts-stage list App.csproj         # Show the sources that would be staged
"""

from __future__ import annotations

import sys

import click

from ts_stager.core.config import load_settings
from ts_stager.core.logging import setup_logging
from ts_stager.exceptions import StagerError
from ts_stager.orchestrator import StagingOrchestrator, execute
from ts_stager.progress import PhaseRecord

_STATUS_ICONS = {
    "completed": "+",
    "failed": "!",
    "running": "~",
    "pending": ".",
}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging for ts_stager and live phase output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """ts-stage: stage TypeScript outputs of referenced projects into one directory."""
    settings = load_settings()
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        package_level="DEBUG" if verbose else None,
    )
    ctx.obj = {"verbose": verbose}


def _echo_phase(record: PhaseRecord) -> None:
    icon = _STATUS_ICONS.get(record.status, "?")
    elapsed = f" ({record.elapsed}s)" if record.elapsed is not None else ""
    click.echo(f"[{icon}] {record.name}{elapsed}", err=True)


@main.command("run")
@click.argument("project", type=click.Path(dir_okay=False))
@click.argument("library_dir", type=click.Path(file_okay=False))
@click.option(
    "--strict-maps/--no-strict-maps",
    default=lambda: load_settings().strict_source_maps,
    show_default="TS_STAGER_STRICT_SOURCE_MAPS",
    help="Fail when a source map's 'sources' field is not a single .ts entry",
)
@click.pass_obj
def run(obj: dict, project: str, library_dir: str, strict_maps: bool) -> None:
    """Stage every referenced project's .d.ts/.js/.ts/.js.map into LIBRARY_DIR."""
    orchestrator = StagingOrchestrator(
        strict_source_maps=strict_maps,
        on_phase=_echo_phase if obj["verbose"] else None,
    )

    ok = execute(project, library_dir, orchestrator=orchestrator)

    progress = orchestrator.progress
    click.echo(f"Pipeline summary (total: {progress.total_elapsed}s):")
    for record in progress:
        status_icon = _STATUS_ICONS.get(record.status, "?")
        duration = f" ({record.elapsed}s)" if record.elapsed is not None else ""
        detail = f" - {record.detail}" if record.detail else ""
        error = f" - {record.error}" if record.error else ""
        click.echo(f"  [{status_icon}] {record.name}{duration}{detail}{error}")

    if not ok:
        click.echo("Error: staging failed, see log for details.", err=True)
        sys.exit(1)


@main.command("list")
@click.argument("project", type=click.Path(exists=True, dir_okay=False))
def list_sources(project: str) -> None:
    """Print the TypeScript sources that `run` would stage, without copying."""
    try:
        sources = StagingOrchestrator().discover(project)
    except StagerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not sources:
        click.echo("No TypeScript sources found in referenced projects.")
        return
    for source in sources:
        click.echo(str(source))


if __name__ == "__main__":
    main()
