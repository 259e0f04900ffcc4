import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_state_dir

from .compat import env_bool, env_float, env_list
from .fs_policy import DEFAULT_EXCLUDE_NAMES, default_roots

logger = logging.getLogger(__name__)

__all__ = [
    "LOG_DIR",
    "LOG_PATH",
    "MAX_LOG_SIZE_BYTES",
    "REBUILD_TIMEOUT_SECONDS",
    "TOP_PROCESS_LIMIT",
    "NoIndexConfig",
]

# Logging - Cross-platform state directory:
# - macOS: ~/Library/Application Support/dev-noindex
# - Linux: ~/.local/state/dev-noindex
# Note: Directory is created lazily in event_log.py when actually writing events
LOG_DIR = Path(user_state_dir("dev-noindex", appauthor=False))
LOG_PATH = LOG_DIR / "events.jsonl"
MAX_LOG_SIZE_BYTES = 10 * 1024 * 1024

# mdutil normally returns immediately; the timeout only guards a stuck sudo prompt
REBUILD_TIMEOUT_SECONDS = 60.0

TOP_PROCESS_LIMIT = 10


def _resolve_root(raw: str, home: Path) -> Path:
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = home / path
    return path


@dataclass(frozen=True)
class NoIndexConfig:
    roots: tuple[Path, ...] = ()
    exclude_names: tuple[str, ...] = DEFAULT_EXCLUDE_NAMES
    home: Path = field(default_factory=Path.home)
    include_editors: bool = True
    include_browsers: bool = True
    include_docker: bool = False
    include_orbstack: bool = True
    mark_global_caches: bool = False
    rebuild_timeout: float = REBUILD_TIMEOUT_SECONDS
    event_log: bool = False

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self.exclude_names)

    @classmethod
    def from_env(cls, home: Path | None = None) -> "NoIndexConfig":
        home = home if home is not None else Path.home()

        raw_roots = env_list("DEV_NOINDEX_ROOTS", old_name="DEV_ROOTS")
        if raw_roots:
            roots = tuple(_resolve_root(raw, home) for raw in raw_roots)
            logger.debug("Using DEV_NOINDEX_ROOTS: %s", " ".join(str(r) for r in roots))
        else:
            roots = tuple(default_roots(home))
            if not roots:
                logger.info("No default dev roots found under %s", home)

        extra_names = env_list("DEV_NOINDEX_EXTRA_NAMES", old_name="EXTRA_NAMES")

        return cls(
            roots=roots,
            exclude_names=(*DEFAULT_EXCLUDE_NAMES, *extra_names),
            home=home,
            include_editors=env_bool(
                "DEV_NOINDEX_EDITOR_CACHES", default=True, old_name="INCLUDE_EDITORS"
            ),
            include_browsers=env_bool(
                "DEV_NOINDEX_BROWSER_CACHES", default=True, old_name="INCLUDE_BROWSERS"
            ),
            include_docker=env_bool(
                "DEV_NOINDEX_DOCKER_CACHES", default=False, old_name="INCLUDE_DOCKER"
            ),
            include_orbstack=env_bool(
                "DEV_NOINDEX_ORBSTACK_CACHES", default=True, old_name="INCLUDE_ORBSTACK"
            ),
            mark_global_caches=env_bool(
                "DEV_NOINDEX_GLOBAL_CACHES", default=False, old_name="MARK_GLOBAL_CACHES"
            ),
            rebuild_timeout=env_float("DEV_NOINDEX_REBUILD_TIMEOUT", REBUILD_TIMEOUT_SECONDS),
            event_log=env_bool("DEV_NOINDEX_EVENT_LOG", default=False),
        )
