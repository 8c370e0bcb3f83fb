"""Operation failures — the engine could not evaluate the request.

These are never findings: a report is only returned when the request was
well formed and its subject was inspected.
"""

from typing import Optional


class PluginError(Exception):
    """Base class for failures of a plugin operation."""

    reason: str = "plugin_error"


class InputMissingError(PluginError, ValueError):
    """A required input was not present in the request."""

    reason = "input_missing"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The [{name}] input is required")


class SubjectUnreadableError(PluginError):
    """The content referenced by an input could not be read."""

    reason = "subject_unreadable"

    def __init__(self, reference: str, cause: Optional[BaseException] = None):
        self.reference = reference
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Unable to read content at [{reference}]{detail}")


class CheckExecutionError(PluginError):
    """A check raised instead of returning findings."""

    reason = "check_failed"

    def __init__(self, check_name: str, cause: BaseException):
        self.check_name = check_name
        self.cause = cause
        super().__init__(f"Check '{check_name}' failed: {cause}")
