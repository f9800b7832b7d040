class UnknownTaskStatusError(ValueError):
    """Raised when a task status has no display bucket."""

    def __init__(self, status: object) -> None:
        super().__init__(f"Unsupported status: {status!r}")
        self.status = status


class InvalidCronScheduleError(ValueError):
    """Raised when a cron expression cannot be parsed or projected."""

    def __init__(self, cron_schedule: str, reason: str | None = None) -> None:
        message = f"Invalid cron schedule '{cron_schedule}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.cron_schedule = cron_schedule
        self.reason = reason


class CollaboratorUnavailableError(RuntimeError):
    """Raised when a backing source of the role view cannot be read."""

    def __init__(self, collaborator: str, detail: str | None = None) -> None:
        message = f"{collaborator} is unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.collaborator = collaborator
        self.detail = detail
