from pathlib import Path

# Reserved file name Spotlight honours as "do not index this directory".
MARKER_NAME = ".metadata_never_index"

# Basenames of build output, caches and dependency trees found inside projects.
DEFAULT_EXCLUDE_NAMES: tuple[str, ...] = (
    "node_modules",
    ".venv",
    "venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    ".tox",
    ".nox",
    "dist",
    "build",
    "target",
    ".next",
    ".nuxt",
    ".svelte-kit",
    ".turbo",
    ".parcel-cache",
    ".gradle",
    ".terraform",
    "coverage",
    "DerivedData",
    "Pods",
    ".build",
)

# Candidate dev roots, relative to the home directory; only existing ones are used.
DEFAULT_ROOT_NAMES: tuple[str, ...] = ("Developer", "Projects", "code")


def default_roots(home: Path | None = None) -> list[Path]:
    base = home if home is not None else Path.home()
    return [base / name for name in DEFAULT_ROOT_NAMES if (base / name).is_dir()]


__all__ = [
    "DEFAULT_EXCLUDE_NAMES",
    "DEFAULT_ROOT_NAMES",
    "MARKER_NAME",
    "default_roots",
]
