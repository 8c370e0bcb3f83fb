"""Validation Engine — resolves inputs, runs all checks, produces the report.

This is the main entry point for content validation. It runs all registered
checks against the referenced content and folds their findings into a
ValidationReport.

Usage:
    engine = ValidationEngine()
    report = engine.validate(request)
    if report.result is TestResult.FAILURE:
        # report.errors holds the problems found
"""

import time
from typing import Optional

import structlog

from validator_plugin.config import Settings, get_settings
from validator_plugin.models.requests import ValidateRequest
from validator_plugin.validators.base import BaseCheck
from validator_plugin.validators.errors import (
    CheckExecutionError,
    InputMissingError,
    SubjectUnreadableError,
)
from validator_plugin.validators.models import Finding, ValidationReport
from validator_plugin.validators.size_check import SizeThresholdCheck
from validator_plugin.validators.subject import resolve_subject

logger = structlog.get_logger()


class ValidationEngine:
    """Runs checks against the requested content and produces a report.

    Design principles:
        - Stateless: every call builds its own report
        - Extensible: add checks without modifying the engine
        - Honest: failures to evaluate raise, they never become findings
    """

    def __init__(
        self,
        checks: Optional[list[BaseCheck]] = None,
        input_name: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with default checks or a custom list.

        Args:
            checks: Optional list of checks. If None, uses the defaults from settings.
            input_name: Name of the input holding the content reference.
            settings: Settings to read defaults from. If None, uses get_settings().
        """
        settings = settings or get_settings()
        self.input_name = input_name or settings.INPUT_CONTENT_TO_VALIDATE
        if checks is None:
            checks = self._default_checks(settings)
        self.checks: tuple[BaseCheck, ...] = tuple(checks)

    @staticmethod
    def _default_checks(settings: Settings) -> list[BaseCheck]:
        return [
            SizeThresholdCheck(
                warning_threshold=settings.SIZE_WARNING_THRESHOLD,
                error_threshold=settings.SIZE_ERROR_THRESHOLD,
            ),
        ]

    def validate(self, request: ValidateRequest) -> ValidationReport:
        """Validate the content referenced by the request.

        Args:
            request: Inputs sent by the core validator

        Returns:
            ValidationReport with result, counters and findings

        Raises:
            InputMissingError: the content input is not in the request
            SubjectUnreadableError: the referenced content cannot be read
            CheckExecutionError: a check crashed
        """
        start_time = time.perf_counter()

        reference = request.get(self.input_name)
        if reference is None:
            logger.warning("input_missing", input=self.input_name, received=[i.name for i in request.inputs])
            raise InputMissingError(self.input_name)

        try:
            subject = resolve_subject(self.input_name, reference)
        except SubjectUnreadableError as e:
            logger.warning("subject_unreadable", reference=reference, error=str(e.cause))
            raise

        logger.debug("validation_started", reference=reference, size=subject.size)

        findings: list[Finding] = []
        check_timings: dict[str, float] = {}

        for check in self.checks:
            c_start = time.perf_counter()
            try:
                findings.extend(check.run_checks(subject))
            except Exception as e:
                logger.error("check_failed", check=check.name, error=str(e), error_type=type(e).__name__)
                raise CheckExecutionError(check.name, e) from e
            finally:
                check_timings[check.name] = round((time.perf_counter() - c_start) * 1000, 2)

        report = ValidationReport.build(findings)

        logger.info(
            "validation_complete",
            result=report.result.value,
            counters=report.counters.model_dump(),
            total_findings=len(report.reports),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            check_timings=check_timings,
        )

        return report

