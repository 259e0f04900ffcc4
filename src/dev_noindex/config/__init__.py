"""Configuration module for dev-noindex."""

from .cache_paths import (
    BROWSER_CACHE_PATHS,
    DOCKER_CACHE_PATHS,
    EDITOR_CACHE_PATHS,
    GLOBAL_CACHE_PATHS,
    ORBSTACK_CACHE_PATHS,
)
from .fs_policy import DEFAULT_EXCLUDE_NAMES, MARKER_NAME, default_roots
from .settings import (
    LOG_DIR,
    LOG_PATH,
    MAX_LOG_SIZE_BYTES,
    REBUILD_TIMEOUT_SECONDS,
    TOP_PROCESS_LIMIT,
    NoIndexConfig,
)

__all__ = [
    # Settings
    "LOG_DIR",
    "LOG_PATH",
    "MAX_LOG_SIZE_BYTES",
    "REBUILD_TIMEOUT_SECONDS",
    "TOP_PROCESS_LIMIT",
    "NoIndexConfig",
    # Filesystem policy
    "DEFAULT_EXCLUDE_NAMES",
    "MARKER_NAME",
    "default_roots",
    # Fixed-path targets
    "BROWSER_CACHE_PATHS",
    "DOCKER_CACHE_PATHS",
    "EDITOR_CACHE_PATHS",
    "GLOBAL_CACHE_PATHS",
    "ORBSTACK_CACHE_PATHS",
]
