"""
genotype/schema.py - Pydantic models for parameter set structure.

Parameter sets serialize to plain dicts of unscaled component values
({"x": ..., "y": ...[, "z": ...]}); these models validate that structure
before a set is rebuilt from it.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SchemaError


class ParamSet2dModel(BaseModel):
    """Structure of a 2D parameter set."""

    model_config = ConfigDict(extra="forbid")

    x: float = Field(..., description="Unscaled x component")
    y: float = Field(..., description="Unscaled y component")


class ParamSet3dModel(BaseModel):
    """Structure of a 3D parameter set."""

    model_config = ConfigDict(extra="forbid")

    x: float = Field(..., description="Unscaled x component")
    y: float = Field(..., description="Unscaled y component")
    z: float = Field(..., description="Unscaled z component")


def validate_components(model: Type[BaseModel], data: Any) -> Dict[str, float]:
    """
    Validate structured data against a parameter set model.

    Returns:
        Component name -> unscaled value

    Raises:
        SchemaError: If data does not match the model
    """
    try:
        parsed = model.model_validate(data)
    except ValidationError as e:
        raise SchemaError(
            f"Invalid {model.__name__} data: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e
    return parsed.model_dump()
