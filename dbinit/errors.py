from __future__ import annotations

from typing import Optional


class BootstrapError(Exception):
    """Base class for failures that abort the bootstrap."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class MissingDependencyError(BootstrapError):
    def __init__(self, client: str):
        super().__init__(f"Error: `{client}` is not installed.")
        self.client = client


class StepFailedError(BootstrapError):
    """A filesystem step (mkdir, touch, open) failed."""

    def __init__(self, step: str, message: str):
        super().__init__(f"{step}: {message}")
        self.step = step


class SessionError(BootstrapError):
    """The interactive client could not start or exited non-zero."""

    def __init__(self, client: str, exit_code: int, message: Optional[str] = None):
        super().__init__(message or f"{client} exited with status {exit_code}", exit_code)
        self.client = client
