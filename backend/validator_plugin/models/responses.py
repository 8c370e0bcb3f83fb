"""Plugin response models."""

from typing import Optional

from pydantic import BaseModel

from validator_plugin.validators.models import ValidationReport


class ValidationModule(BaseModel):
    """Identification of the plugin as a validation module."""

    id: Optional[str] = None


class GetModuleDefinitionResponse(BaseModel):
    """Response to a module definition (identify) call."""

    module: ValidationModule


class ValidationResponse(BaseModel):
    """The plugin's contribution to the overall validation report."""

    report: ValidationReport
