"""Validation models — severity levels, findings, counters, and report structure.

The report mirrors a test assertion report (TAR): an overall result, counters
per severity, the ordered list of report items and an opaque context that the
core validator may use.
"""

from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable

from pydantic import (
    BaseModel,
    Field,
    NonNegativeInt,
    PrivateAttr,
    computed_field,
    model_validator,
)


class Severity(str, Enum):
    """Finding severity levels. Values are the report item element names."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class TestResult(str, Enum):
    """Overall verdict of a report, ordered SUCCESS < WARNING < FAILURE."""

    __test__ = False  # not a pytest test class

    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    FAILURE = "FAILURE"

    @property
    def rank(self) -> int:
        return _RESULT_RANK[self]

    @classmethod
    def worst(cls, results: Iterable["TestResult"]) -> "TestResult":
        """Most severe of the given results (SUCCESS when empty)."""
        return max(results, key=lambda r: r.rank, default=cls.SUCCESS)

    @classmethod
    def from_counters(cls, counters: "ValidationCounters") -> "TestResult":
        """Derive the result by severity priority: any error fails, any warning warns."""
        if counters.nr_of_errors > 0:
            return cls.FAILURE
        if counters.nr_of_warnings > 0:
            return cls.WARNING
        return cls.SUCCESS


_RESULT_RANK = {
    TestResult.SUCCESS: 0,
    TestResult.WARNING: 1,
    TestResult.FAILURE: 2,
}


class Finding(BaseModel):
    """A single report item. Immutable once created."""

    severity: Severity
    description: str
    location: str  # <inputName>:<index>:<offset>

    model_config = {"frozen": True}

    @staticmethod
    def location_for(input_name: str, index: int = 0, offset: int = 0) -> str:
        return f"{input_name}:{index}:{offset}"


class ValidationCounters(BaseModel):
    """Number of findings per severity.

    ``nr_of_assertions`` counts information items, as in the report format.
    """

    nr_of_errors: NonNegativeInt = 0
    nr_of_warnings: NonNegativeInt = 0
    nr_of_assertions: NonNegativeInt = 0

    model_config = {"frozen": True}

    @classmethod
    def of(cls, findings: Iterable[Finding]) -> "ValidationCounters":
        counts = Counter(f.severity for f in findings)
        return cls(
            nr_of_errors=counts[Severity.ERROR],
            nr_of_warnings=counts[Severity.WARNING],
            nr_of_assertions=counts[Severity.INFO],
        )


class ValidationReport(BaseModel):
    """Complete validation report — the output of the validation engine.

    ``counters`` and ``result`` are derived from ``reports`` and cannot be set
    independently. Declared values in input data must agree with the findings.
    """

    reports: tuple[Finding, ...] = ()
    context: dict[str, Any] = Field(default_factory=dict)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    _finalized: bool = PrivateAttr(default=False)

    @model_validator(mode="wrap")
    @classmethod
    def _check_declared_totals(cls, data: Any, handler: Any) -> "ValidationReport":
        declared: dict[str, Any] = {}
        if isinstance(data, dict):
            data = dict(data)
            for key in ("counters", "result"):
                if key in data:
                    declared[key] = data.pop(key)

        report = handler(data)

        if "counters" in declared:
            counters = ValidationCounters.model_validate(declared["counters"])
            if counters != report.counters:
                raise ValueError(
                    f"Declared counters {counters.model_dump()} do not match "
                    f"findings {report.counters.model_dump()}"
                )
        if "result" in declared and TestResult(declared["result"]) is not report.result:
            raise ValueError(
                f"Declared result {declared['result']} does not match findings ({report.result.value})"
            )
        return report

    @computed_field
    @property
    def counters(self) -> ValidationCounters:
        return ValidationCounters.of(self.reports)

    @computed_field
    @property
    def result(self) -> TestResult:
        return TestResult.from_counters(self.counters)

    @classmethod
    def create(cls) -> "ValidationReport":
        """Create an empty report with default values."""
        return cls()

    @classmethod
    def build(cls, findings: Iterable[Finding]) -> "ValidationReport":
        """Build a complete report from findings, keeping their order."""
        report = cls.create()
        for finding in findings:
            report.add_finding(finding)
        return report.finalize()

    def add_finding(self, finding: Finding) -> None:
        if self._finalized:
            raise RuntimeError("Cannot add findings to a finalized report")
        self.reports = (*self.reports, finding)

    def finalize(self) -> "ValidationReport":
        """Close the report once all findings are known."""
        self._finalized = True
        return self

    def _by_severity(self, severity: Severity) -> list[Finding]:
        return [f for f in self.reports if f.severity == severity]

    @property
    def errors(self) -> list[Finding]:
        return self._by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[Finding]:
        return self._by_severity(Severity.WARNING)

    @property
    def infos(self) -> list[Finding]:
        return self._by_severity(Severity.INFO)
