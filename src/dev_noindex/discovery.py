import logging
import os
from collections.abc import Collection, Iterator, Sequence
from pathlib import Path

from .marker import MarkOutcome, MarkResult, mark_directory

logger = logging.getLogger(__name__)


def _log_walk_error(exc: OSError) -> None:
    # Directory vanished or became unreadable mid-walk; keep going.
    logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror or exc)


def find_excluded_dirs(root: Path, names: Collection[str]) -> Iterator[Path]:
    """Yield directories under root whose basename is in names.

    Matched directories are pruned: nothing beneath a match is visited, so
    nested matches (e.g. node_modules inside node_modules) are never yielded.
    Symlinked directories are neither followed nor matched.
    """
    if root.name in names:
        if not root.is_symlink():
            yield root
        return

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in dirnames:
            # A symlink named like an excluded dir points elsewhere; leave its target alone.
            if name in names and not os.path.islink(os.path.join(dirpath, name)):
                yield Path(dirpath) / name
        # Prune in place so os.walk never descends into matched subtrees.
        dirnames[:] = [d for d in dirnames if d not in names]


def apply_to_root(root: Path, names: Collection[str], dry_run: bool) -> list[MarkResult]:
    if not root.is_absolute():
        raise ValueError(f"Root must be an absolute path: {root}")
    if not root.is_dir():
        logger.debug("Root does not exist, skipping: %s", root)
        return [MarkResult(root, MarkOutcome.SKIPPED_MISSING)]

    return [mark_directory(match, dry_run) for match in find_excluded_dirs(root, names)]


def apply_to_roots(
    roots: Sequence[Path], names: Collection[str], dry_run: bool
) -> list[MarkResult]:
    """Walk each root and mark every matching directory.

    Args:
        roots: Absolute root paths, scanned in order (duplicates are rescanned).
        names: Directory basenames to exclude.
        dry_run: Report decisions without writing markers.

    Returns:
        One MarkResult per match, plus one SKIPPED_MISSING per missing root.
    """
    results: list[MarkResult] = []
    for root in roots:
        results.extend(apply_to_root(Path(root), names, dry_run))
    return results


__all__ = ["apply_to_root", "apply_to_roots", "find_excluded_dirs"]
