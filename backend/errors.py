from typing import Optional


class UpdaterError(Exception):
    """Base error for the slug updater tools."""


class ConfigError(UpdaterError):
    pass


class UsageError(UpdaterError):
    """Bad command-line arguments. `message` is logged before the usage text."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "")
        self.message = message


class StoreError(UpdaterError):
    """A MongoDB call failed. The driver exception is chained as __cause__."""

    def __init__(self, operation: str, detail: str):
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail
