import logging
import os
import warnings

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def getenv_with_fallback(new_name: str, old_name: str, default: str = "") -> str:
    """Read new_name, falling back to the legacy old_name, then default.

    Empty values count as unset. A value found only under old_name still
    works but raises a DeprecationWarning pointing at the caller's caller.
    """
    current = os.environ.get(new_name, "")
    if current:
        return current

    legacy = os.environ.get(old_name, "")
    if not legacy:
        return default

    warnings.warn(
        f"{old_name} is a legacy name for {new_name} and will stop working; rename it.",
        DeprecationWarning,
        stacklevel=3,
    )
    logger.warning("Read %s from legacy variable %s", new_name, old_name)
    return legacy


def _raw(name: str, old_name: str | None) -> str:
    if old_name:
        return getenv_with_fallback(name, old_name)
    return os.environ.get(name, "")


def parse_bool(raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    if value:
        logger.warning("Unrecognized boolean value %r, using default %s", raw, default)
    return default


def env_bool(name: str, default: bool, *, old_name: str | None = None) -> bool:
    """Read an on/off toggle; unset or unparseable values fall back to default."""
    return parse_bool(_raw(name, old_name), default)


def env_list(name: str, *, old_name: str | None = None) -> list[str]:
    """Read a space-separated list, preserving order and duplicates."""
    return _raw(name, old_name).split()


def env_float(name: str, default: float) -> float:
    """Read a positive number of seconds; anything else falls back to default."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using default %s", name, raw, default)
        return default
    if not value > 0:
        logger.warning("%s=%r must be positive, using default %s", name, raw, default)
        return default
    return value


__all__ = ["env_bool", "env_float", "env_list", "getenv_with_fallback", "parse_bool"]
