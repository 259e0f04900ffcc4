import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import (
    BROWSER_CACHE_PATHS,
    DOCKER_CACHE_PATHS,
    EDITOR_CACHE_PATHS,
    GLOBAL_CACHE_PATHS,
    ORBSTACK_CACHE_PATHS,
    NoIndexConfig,
)
from .marker import MarkResult, mark_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedPathGroup:
    name: str
    label: str
    paths: tuple[Path, ...]
    enabled: bool


def _under(home: Path, relative: Iterable[str]) -> tuple[Path, ...]:
    return tuple(home / rel for rel in relative)


def build_fixed_groups(config: NoIndexConfig) -> list[FixedPathGroup]:
    home = config.home
    return [
        FixedPathGroup(
            "editor", "Editor caches", _under(home, EDITOR_CACHE_PATHS), config.include_editors
        ),
        FixedPathGroup(
            "browser", "Browser caches", _under(home, BROWSER_CACHE_PATHS), config.include_browsers
        ),
        FixedPathGroup(
            "docker", "Docker caches", _under(home, DOCKER_CACHE_PATHS), config.include_docker
        ),
        FixedPathGroup(
            "orbstack",
            "OrbStack caches",
            _under(home, ORBSTACK_CACHE_PATHS),
            config.include_orbstack,
        ),
        FixedPathGroup(
            "global",
            "Global caches",
            _under(home, GLOBAL_CACHE_PATHS),
            config.mark_global_caches,
        ),
    ]


def apply_fixed(
    paths: Sequence[Path], dry_run: bool, group: str | None = None
) -> list[MarkResult]:
    return [mark_directory(path, dry_run, group=group) for path in paths]


def apply_groups(groups: Iterable[FixedPathGroup], dry_run: bool) -> list[MarkResult]:
    """Apply markers to every enabled group; disabled groups produce no results."""
    results: list[MarkResult] = []
    for group in groups:
        if not group.enabled:
            logger.debug("Fixed-path group disabled: %s", group.name)
            continue
        results.extend(apply_fixed(group.paths, dry_run, group=group.name))
    return results


__all__ = ["FixedPathGroup", "apply_fixed", "apply_groups", "build_fixed_groups"]
