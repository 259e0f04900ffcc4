__version__ = "0.1.0"

from .cli import main, run
from .config import NoIndexConfig
from .discovery import apply_to_roots, find_excluded_dirs
from .fixed_paths import FixedPathGroup, apply_fixed, build_fixed_groups
from .marker import MarkOutcome, MarkResult, mark_directory
from .rebuild import RebuildResult, rebuild_index
from .status import ProcessSnapshot, report_top_processes

__all__ = [
    "__version__",
    "FixedPathGroup",
    "MarkOutcome",
    "MarkResult",
    "NoIndexConfig",
    "ProcessSnapshot",
    "RebuildResult",
    "apply_fixed",
    "apply_to_roots",
    "build_fixed_groups",
    "find_excluded_dirs",
    "main",
    "mark_directory",
    "rebuild_index",
    "report_top_processes",
    "run",
]
