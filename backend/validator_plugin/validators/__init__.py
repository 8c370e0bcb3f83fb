"""Content validation — checks, report synthesis and result derivation.

Usage:
    from validator_plugin.validators import ValidationEngine

    report = ValidationEngine().validate(request)
    if report.result is TestResult.FAILURE:
        # report.errors holds the problems found
"""

from validator_plugin.validators.base import BaseCheck
from validator_plugin.validators.engine import ValidationEngine
from validator_plugin.validators.errors import (
    CheckExecutionError,
    InputMissingError,
    PluginError,
    SubjectUnreadableError,
)
from validator_plugin.validators.models import (
    Finding,
    Severity,
    TestResult,
    ValidationCounters,
    ValidationReport,
)
from validator_plugin.validators.size_check import SizeThresholdCheck
from validator_plugin.validators.subject import Subject, resolve_subject

__all__ = [
    "BaseCheck",
    "ValidationEngine",
    "SizeThresholdCheck",
    "Subject",
    "resolve_subject",
    "ValidationReport",
    "ValidationCounters",
    "Finding",
    "Severity",
    "TestResult",
    "PluginError",
    "InputMissingError",
    "SubjectUnreadableError",
    "CheckExecutionError",
]
