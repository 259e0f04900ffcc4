import click


class NoIndexError(Exception):
    """Base class for dev-noindex errors."""

    error_code: str = "NOINDEX_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageError(click.UsageError):
    """Unrecognized command-line flag or stray argument."""

    error_code = "USAGE_ERROR"
    exit_code = 1


class RebuildError(NoIndexError):
    """External index rebuild command failed or could not be started.

    Attributes:
        command: Command that was run.
        kind: Failure category ("not_found", "timeout", "exit_status", "os_error").
    """

    error_code = "REBUILD_FAILED"

    def __init__(self, *, kind: str, message: str, command: list[str] | None = None) -> None:
        self.kind = kind
        self.command = command or []
        super().__init__(message)
