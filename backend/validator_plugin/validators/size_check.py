"""Size Check — classifies content by its size in bytes.

Placeholder for real content rules:
    - an error if larger than the error threshold
    - a warning if larger than the warning threshold
    - an information message otherwise
"""

from validator_plugin.validators.base import BaseCheck
from validator_plugin.validators.models import Finding, Severity
from validator_plugin.validators.subject import Subject


def _human_size(num_bytes: int) -> str:
    """Render 1024 as '1KB', 10240 as '10KB'; anything not a whole unit as 'N bytes'."""
    for unit, factor in (("GB", 1024 ** 3), ("MB", 1024 ** 2), ("KB", 1024)):
        if num_bytes >= factor and num_bytes % factor == 0:
            return f"{num_bytes // factor}{unit}"
    return f"{num_bytes} bytes"


class SizeThresholdCheck(BaseCheck):
    """Three-way size classification with two thresholds."""

    def __init__(self, warning_threshold: int = 1024, error_threshold: int = 10240):
        if warning_threshold < 0 or error_threshold < 0:
            raise ValueError("Size thresholds must not be negative")
        if warning_threshold >= error_threshold:
            raise ValueError(
                f"Warning threshold ({warning_threshold}) must be lower than "
                f"error threshold ({error_threshold})"
            )
        self.warning_threshold = warning_threshold
        self.error_threshold = error_threshold

    @property
    def name(self) -> str:
        return "SizeThresholdCheck"

    def run_checks(self, subject: Subject) -> list[Finding]:
        size = subject.size

        if size > self.error_threshold:
            return [self._finding(
                Severity.ERROR,
                f"The provided content exceeded {_human_size(self.error_threshold)} in size",
                subject,
            )]

        if size > self.warning_threshold:
            return [self._finding(
                Severity.WARNING,
                f"The provided content exceeded {_human_size(self.warning_threshold)} in size",
                subject,
            )]

        return [self._finding(
            Severity.INFO,
            f"The provided content is less than {_human_size(self.warning_threshold)}",
            subject,
        )]
