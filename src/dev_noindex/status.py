import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import psutil

from .config import TOP_PROCESS_LIMIT

logger = logging.getLogger(__name__)

# Spotlight daemons and importers; mdworker variants are matched by prefix.
SPOTLIGHT_PROCESS_NAMES = frozenset(
    {
        "mds",
        "mds_stores",
        "mdsync",
        "mdbulkimport",
        "mdutil",
        "corespotlightd",
        "Spotlight",
    }
)
SPOTLIGHT_PROCESS_PREFIXES = ("mdworker",)


@dataclass(frozen=True)
class ProcessSnapshot:
    pid: int
    name: str
    cpu_percent: float
    memory_percent: float


def is_spotlight_process(name: str) -> bool:
    return name in SPOTLIGHT_PROCESS_NAMES or name.startswith(SPOTLIGHT_PROCESS_PREFIXES)


def report_top_processes(
    limit: int = TOP_PROCESS_LIMIT,
    iterator: Callable[..., Iterable[Any]] = psutil.process_iter,
) -> list[ProcessSnapshot]:
    """Snapshot running Spotlight processes, busiest first.

    Args:
        limit: Maximum number of processes returned.
        iterator: Process source (psutil.process_iter by default).

    Returns:
        Up to ``limit`` snapshots sorted by CPU percent descending.
    """
    snapshots: list[ProcessSnapshot] = []
    for proc in iterator(["pid", "name", "cpu_percent", "memory_percent"]):
        try:
            info = proc.info
        except psutil.Error:
            continue
        name = info.get("name") or ""
        if not is_spotlight_process(name):
            continue
        snapshots.append(
            ProcessSnapshot(
                pid=int(info.get("pid") or 0),
                name=name,
                cpu_percent=float(info.get("cpu_percent") or 0.0),
                memory_percent=float(info.get("memory_percent") or 0.0),
            )
        )

    snapshots.sort(key=lambda snap: snap.cpu_percent, reverse=True)
    logger.debug("Found %d Spotlight processes", len(snapshots))
    return snapshots[:limit]


__all__ = ["ProcessSnapshot", "is_spotlight_process", "report_top_processes"]
