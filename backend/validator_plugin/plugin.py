"""Content Validator Plugin — entry point called by the core validator.

The core validator identifies the plugin through ``get_module_definition``
and calls ``validate`` with a standard set of inputs. The response carries a
report whose findings are merged into the overall validation report.
"""

from typing import Optional

import structlog

from validator_plugin.config import Settings, get_settings
from validator_plugin.logging_config import configure_logging
from validator_plugin.models.requests import ValidateRequest
from validator_plugin.models.responses import (
    GetModuleDefinitionResponse,
    ValidationModule,
    ValidationResponse,
)
from validator_plugin.validators.engine import ValidationEngine

logger = structlog.get_logger()


class ValidationPlugin:
    """Identity provider and validation entry point.

    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(
        self,
        engine: Optional[ValidationEngine] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.plugin_id: Optional[str] = settings.PLUGIN_ID or None
        self.engine = engine or ValidationEngine(settings=settings)

    def identify(self) -> Optional[str]:
        """The plugin's identification (may be None)."""
        return self.plugin_id

    def get_module_definition(self) -> GetModuleDefinitionResponse:
        """Identify the plugin so the core validator can attribute unexpected errors to it."""
        logger.debug("plugin_identified", plugin_id=self.plugin_id)
        return GetModuleDefinitionResponse(module=ValidationModule(id=self.plugin_id))

    def validate(self, request: ValidateRequest) -> ValidationResponse:
        """Validate the request's content and return this plugin's report.

        Raises the engine's PluginError subclasses when the request cannot be
        evaluated; these are not reported as findings.
        """
        with structlog.contextvars.bound_contextvars(plugin_id=self.plugin_id):
            report = self.engine.validate(request)
        return ValidationResponse(report=report)


def create_plugin(settings: Optional[Settings] = None) -> ValidationPlugin:
    """Configure logging and build a plugin from settings."""
    settings = settings or get_settings()
    configure_logging(settings)
    return ValidationPlugin(settings=settings)
