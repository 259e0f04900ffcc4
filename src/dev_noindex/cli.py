import logging
import os

import click
from dotenv import load_dotenv

from . import event_log
from .config import NoIndexConfig
from .discovery import apply_to_root
from .exceptions import UsageError
from .fixed_paths import apply_groups, build_fixed_groups
from .marker import MarkResult
from .rebuild import rebuild_index
from .report import echo_processes, echo_rebuild, echo_results, echo_summary
from .status import report_top_processes

logger = logging.getLogger(__name__)

_EPILOG = """\b
Environment:
  DEV_NOINDEX_ROOTS            space-separated roots (default: ~/Developer ~/Projects ~/code)
  DEV_NOINDEX_EXTRA_NAMES      extra directory names to exclude
  DEV_NOINDEX_EDITOR_CACHES    editor caches (default: on)
  DEV_NOINDEX_BROWSER_CACHES   browser caches (default: on)
  DEV_NOINDEX_DOCKER_CACHES    Docker Desktop caches (default: off)
  DEV_NOINDEX_ORBSTACK_CACHES  OrbStack cache (default: on)
  DEV_NOINDEX_GLOBAL_CACHES    all of ~/Library/Caches (default: off)
"""


class NoIndexCommand(click.Command):
    """Command whose parse failures exit with status 1 instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            raise UsageError(exc.message, ctx=exc.ctx or ctx) from exc


def _configure_logging() -> None:
    log_level_str = os.getenv("DEV_NOINDEX_LOG_LEVEL", "WARNING").upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def _record(results: list[MarkResult], audit: bool) -> None:
    echo_results(results)
    if audit:
        for result in results:
            event_log.log_mark_result(result, dry_run=False)


def run(
    config: NoIndexConfig, *, dry_run: bool = False, rebuild: bool = False
) -> list[MarkResult]:
    """Mark dev roots and fixed cache paths, optionally rebuild, then report.

    Args:
        config: Resolved configuration.
        dry_run: Report every decision without writing markers or rebuilding.
        rebuild: Request a Spotlight rebuild of the root volume afterwards.

    Returns:
        Every MarkResult produced, dev roots first, then fixed-path groups.
    """
    if dry_run:
        click.echo("[dry run] No files will be written.")

    # A dry run writes nothing, the audit log included.
    audit = config.event_log and not dry_run

    echo_processes("Spotlight processes (before):", report_top_processes())

    results: list[MarkResult] = []

    if not config.roots:
        click.echo("\nNo dev roots found; set DEV_NOINDEX_ROOTS to choose some.")
    for root in config.roots:
        click.echo(f"\n==> Scanning {root}")
        root_results = apply_to_root(root, config.names, dry_run)
        _record(root_results, audit)
        results.extend(root_results)

    for group in build_fixed_groups(config):
        if not group.enabled:
            click.echo(f"\n==> {group.label} (disabled)")
            continue
        click.echo(f"\n==> {group.label}")
        group_results = apply_groups([group], dry_run)
        _record(group_results, audit)
        results.extend(group_results)

    if rebuild:
        click.echo("")
        rebuild_result = rebuild_index(dry_run, timeout=config.rebuild_timeout)
        echo_rebuild(rebuild_result)
        if audit:
            event_log.log_rebuild(rebuild_result)

    echo_processes("Spotlight processes (after):", report_top_processes())

    counts = echo_summary(results)
    if audit:
        event_log.log_run_summary(counts, dry_run=False, rebuild=rebuild)
    logger.debug("Run finished: %s", counts)
    return results


@click.command(
    cls=NoIndexCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.option(
    "--dry-run", is_flag=True, help="Show what would be marked without writing anything"
)
@click.option(
    "--rebuild", is_flag=True, help="Erase and rebuild the Spotlight index afterwards (sudo)"
)
def main(dry_run: bool, rebuild: bool) -> None:
    """Keep Spotlight out of build output, dependency trees and caches.

    Drops a .metadata_never_index marker into every matching directory under
    the dev roots and into well-known cache locations. Existing markers are
    left alone and nothing is ever deleted.
    """
    # Load .env from current directory or parents
    load_dotenv()
    _configure_logging()

    config = NoIndexConfig.from_env()
    logger.debug("Resolved config: %s", config)
    run(config, dry_run=dry_run, rebuild=rebuild)


if __name__ == "__main__":
    main()
