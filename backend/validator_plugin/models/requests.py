"""Plugin request models."""

from typing import Iterable, Optional

from pydantic import BaseModel, Field


class Input(BaseModel):
    """A named input value sent by the core validator."""

    name: str
    value: str  # usually a reference (file path), not inline content


class ValidateRequest(BaseModel):
    """Inputs for a validate call, in the order the caller sent them."""

    inputs: list[Input] = Field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "ValidateRequest":
        return cls(inputs=[Input(name=name, value=value) for name, value in pairs])

    def as_mapping(self) -> dict[str, str]:
        """Name → value lookup. The first input wins when names repeat."""
        mapping: dict[str, str] = {}
        for item in self.inputs:
            mapping.setdefault(item.name, item.value)
        return mapping

    def get(self, name: str) -> Optional[str]:
        return self.as_mapping().get(name)
