"""Base check — abstract class implementing the Strategy Pattern.

Each check is a standalone, independently testable unit.
New checks are added without modifying the engine or report synthesis.
"""

from abc import ABC, abstractmethod

from validator_plugin.validators.models import Finding, Severity
from validator_plugin.validators.subject import Subject


class BaseCheck(ABC):
    """Abstract base for all content checks.

    Contract:
        - run_checks() is deterministic: same subject → same findings
        - run_checks() returns findings in the order they should be reported
        - run_checks() keeps no state between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def run_checks(self, subject: Subject) -> list[Finding]:
        """Run the check against the subject.

        Args:
            subject: Resolved content referenced by the request

        Returns:
            Findings of any severity (empty if nothing to report)
        """
        ...

    # ── Helper Methods ──

    def _finding(
        self,
        severity: Severity,
        description: str,
        subject: Subject,
        index: int = 0,
        offset: int = 0,
    ) -> Finding:
        """Convenience method to create a Finding located in the subject's input."""
        return Finding(
            severity=severity,
            description=description,
            location=Finding.location_for(subject.input_name, index, offset),
        )
