import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from .config import MARKER_NAME

logger = logging.getLogger(__name__)


class MarkOutcome(enum.Enum):
    ALREADY_MARKED = "already_marked"
    MARKED = "marked"
    WOULD_MARK = "would_mark"
    SKIPPED_MISSING = "skipped_missing"
    WARNED = "warned"


@dataclass(frozen=True)
class MarkResult:
    path: Path
    outcome: MarkOutcome
    error: str | None = None
    group: str | None = None  # fixed-path group name; None for discovered dirs

    @property
    def marker_path(self) -> Path:
        return self.path / MARKER_NAME


def mark_directory(directory: Path | str, dry_run: bool, group: str | None = None) -> MarkResult:
    """Ensure the never-index marker exists inside ``directory``.

    Filesystem errors are folded into the returned outcome and never raised:
    a vanished directory is SKIPPED_MISSING, anything else (permission denied,
    read-only mount) is WARNED with the error text attached.

    Args:
        directory: Directory to mark.
        dry_run: Report WOULD_MARK instead of writing.
        group: Fixed-path group this directory belongs to, if any.

    Returns:
        MarkResult describing what happened.
    """
    path = Path(directory)
    if not path.is_dir():
        return MarkResult(path, MarkOutcome.SKIPPED_MISSING, group=group)

    marker = path / MARKER_NAME
    if marker.exists():
        return MarkResult(path, MarkOutcome.ALREADY_MARKED, group=group)

    if dry_run:
        return MarkResult(path, MarkOutcome.WOULD_MARK, group=group)

    try:
        # "x" keeps a marker created concurrently by someone else untouched
        with open(marker, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return MarkResult(path, MarkOutcome.ALREADY_MARKED, group=group)
    except FileNotFoundError:
        return MarkResult(path, MarkOutcome.SKIPPED_MISSING, group=group)
    except OSError as exc:
        logger.debug("Failed to create marker %s: %s", marker, exc)
        return MarkResult(path, MarkOutcome.WARNED, error=str(exc), group=group)

    return MarkResult(path, MarkOutcome.MARKED, group=group)


__all__ = ["MarkOutcome", "MarkResult", "mark_directory"]
