import json
import logging
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from .config import LOG_PATH, MAX_LOG_SIZE_BYTES
from .marker import MarkResult
from .rebuild import RebuildResult

logger = logging.getLogger(__name__)

# Number of rotated event logs kept next to the active one
MAX_ROTATED_LOGS = 5

# One id per process so all events of a run can be grouped
RUN_ID = str(uuid.uuid4())[:8]


def rotate_log_if_needed() -> None:
    """Rotate the event log once it exceeds the size cap and prune old rotations."""
    try:
        if LOG_PATH.exists() and LOG_PATH.stat().st_size > MAX_LOG_SIZE_BYTES:
            rotated_path = LOG_PATH.with_name(
                f"{LOG_PATH.stem}.{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}{LOG_PATH.suffix}"
            )
            LOG_PATH.rename(rotated_path)
            logger.info("Rotated event log to %s", rotated_path)

            rotated_logs = sorted(
                LOG_PATH.parent.glob(f"{LOG_PATH.stem}.*{LOG_PATH.suffix}"), reverse=True
            )
            for old_log in rotated_logs[MAX_ROTATED_LOGS:]:
                old_log.unlink(missing_ok=True)
                logger.debug("Cleaned up old event log: %s", old_log)
    except OSError as exc:
        logger.warning("Failed to rotate event log: %s", exc)


def log_event(event: dict[str, Any]) -> None:
    """Append one JSON event to the local audit log; failures never reach the caller."""
    try:
        event.setdefault("timestamp", datetime.now(UTC).isoformat())
        event.setdefault("run_id", RUN_ID)
        event.setdefault("level", "info")

        if LOG_PATH.is_dir():
            logger.warning("Event log path is a directory, skipping write: %s", LOG_PATH)
            return
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

        rotate_log_if_needed()

        with open(LOG_PATH, "a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Failed to write event log: %s", exc)


def log_mark_result(result: MarkResult, dry_run: bool) -> None:
    log_event(
        {
            "kind": "mark",
            "level": "warning" if result.error else "info",
            "path": str(result.path),
            "outcome": result.outcome.value,
            "group": result.group,
            "error": result.error,
            "dry_run": dry_run,
        }
    )


def log_rebuild(result: RebuildResult) -> None:
    log_event(
        {
            "kind": "rebuild",
            "level": "info" if result.accepted or not result.requested else "error",
            "command": result.command,
            "requested": result.requested,
            "accepted": result.accepted,
            "detail": result.detail,
        }
    )


def log_run_summary(counts: Mapping[str, int], dry_run: bool, rebuild: bool) -> None:
    log_event(
        {
            "kind": "run_summary",
            "counts": dict(counts),
            "dry_run": dry_run,
            "rebuild": rebuild,
        }
    )


__all__ = [
    "log_event",
    "log_mark_result",
    "log_rebuild",
    "log_run_summary",
    "rotate_log_if_needed",
]
