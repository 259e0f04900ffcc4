import logging
import subprocess  # nosec B404 - required to invoke mdutil
from dataclasses import dataclass, field

from .config import REBUILD_TIMEOUT_SECONDS
from .exceptions import RebuildError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RebuildResult:
    requested: bool
    accepted: bool
    command: list[str] = field(default_factory=list)
    detail: str = ""


def rebuild_command(volume: str = "/") -> list[str]:
    return ["sudo", "mdutil", "-E", volume]


def _format_cli_error_detail(stdout: str, stderr: str) -> str:
    stdout_text = (stdout or "").strip()
    stderr_text = (stderr or "").strip()
    if stderr_text and stdout_text and stdout_text != stderr_text:
        return f"{stderr_text}\n{stdout_text}"
    if stderr_text:
        return stderr_text
    if stdout_text:
        return stdout_text
    return "unknown error"


def _run_command(command: list[str], timeout: float) -> str:
    try:
        result = subprocess.run(  # nosec B603 - fixed command
            command,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise RebuildError(
            kind="timeout", message=f"timeout after {timeout}s: {exc}", command=command
        ) from exc
    except FileNotFoundError as exc:
        raise RebuildError(
            kind="not_found", message=f"{command[0]} not found: {exc}", command=command
        ) from exc
    except OSError as exc:
        raise RebuildError(kind="os_error", message=f"failed: {exc}", command=command) from exc

    if result.returncode != 0:
        detail = _format_cli_error_detail(result.stdout or "", result.stderr or "")
        raise RebuildError(
            kind="exit_status",
            message=f"exit {result.returncode}: {detail}",
            command=command,
        )

    return (result.stdout or "").strip()


def rebuild_index(
    dry_run: bool, volume: str = "/", timeout: float = REBUILD_TIMEOUT_SECONDS
) -> RebuildResult:
    """Ask Spotlight to erase and rebuild the index of ``volume``.

    The rebuild itself runs asynchronously inside Spotlight; this only reports
    whether mdutil accepted the request. Failures are returned, never raised.
    """
    command = rebuild_command(volume)
    if dry_run:
        logger.info("Dry run: would run %s", " ".join(command))
        return RebuildResult(requested=False, accepted=False, command=command, detail="dry run")

    logger.info("Requesting Spotlight rebuild: %s", " ".join(command))
    try:
        output = _run_command(command, timeout)
    except RebuildError as exc:
        logger.warning("Spotlight rebuild request failed (%s): %s", exc.kind, exc)
        return RebuildResult(requested=True, accepted=False, command=command, detail=str(exc))

    return RebuildResult(requested=True, accepted=True, command=command, detail=output)


__all__ = ["RebuildResult", "rebuild_command", "rebuild_index"]
