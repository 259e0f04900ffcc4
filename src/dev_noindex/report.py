from collections import Counter
from collections.abc import Iterable, Sequence

import click

from .marker import MarkOutcome, MarkResult
from .rebuild import RebuildResult
from .status import ProcessSnapshot

_OUTCOME_LABELS = {
    MarkOutcome.ALREADY_MARKED: "already",
    MarkOutcome.MARKED: "marked",
    MarkOutcome.WOULD_MARK: "would mark",
    MarkOutcome.SKIPPED_MISSING: "skip",
    MarkOutcome.WARNED: "warning",
}


def format_result(result: MarkResult) -> str:
    label = _OUTCOME_LABELS[result.outcome]
    if result.outcome is MarkOutcome.SKIPPED_MISSING:
        line = f"  [{label}] {result.path} (not found)"
    else:
        line = f"  [{label}] {result.path}"
    if result.error:
        line += f": {result.error}"
    return line


def echo_results(results: Iterable[MarkResult]) -> None:
    for result in results:
        click.echo(format_result(result), err=result.outcome is MarkOutcome.WARNED)


def summarize(results: Iterable[MarkResult]) -> dict[str, int]:
    counts = Counter(result.outcome for result in results)
    return {outcome.value: counts.get(outcome, 0) for outcome in MarkOutcome}


def echo_summary(results: Sequence[MarkResult]) -> dict[str, int]:
    counts = summarize(results)
    click.echo("\n" + "=" * 50)
    click.echo("SUMMARY")
    click.echo("=" * 50)
    for outcome in MarkOutcome:
        click.echo(f"{_OUTCOME_LABELS[outcome] + ':':<14}{counts[outcome.value]}")
    return counts


def echo_rebuild(result: RebuildResult) -> None:
    command = " ".join(result.command)
    if not result.requested:
        click.echo(f"[dry run] would run: {command}")
    elif result.accepted:
        click.echo(f"Spotlight rebuild requested: {command}")
        click.echo("Indexing continues in the background.")
    else:
        click.echo(f"Spotlight rebuild failed: {result.detail}", err=True)


def echo_processes(title: str, snapshots: Sequence[ProcessSnapshot]) -> None:
    click.echo(f"\n{title}")
    if not snapshots:
        click.echo("  (no Spotlight processes running)")
        return
    click.echo(f"  {'PID':>7}  {'%CPU':>6}  {'%MEM':>6}  NAME")
    for snap in snapshots:
        click.echo(
            f"  {snap.pid:>7}  {snap.cpu_percent:>6.1f}  {snap.memory_percent:>6.1f}  {snap.name}"
        )


__all__ = [
    "echo_processes",
    "echo_rebuild",
    "echo_results",
    "echo_summary",
    "format_result",
    "summarize",
]
