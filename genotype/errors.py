"""
genotype/errors.py - Error taxonomy.

Structured exception types raised by the parameter access layer,
the shared handle and the configuration loader.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from .enums import GenotypeErrorCategory


class GenotypeError(Exception):
    """
    Base class for genotype errors.

    Carries an error code for programmatic handling, a category,
    a message and a free-form details dict.
    """

    code: str = "GEN_000"
    category: GenotypeErrorCategory = GenotypeErrorCategory.CONTRACT

    def __init__(
        self,
        message: str = "",
        *,
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Genotype error"
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ParamIndexError(GenotypeError, IndexError):
    """Gene index outside the holder's index space."""

    code = "GEN_001"
    category = GenotypeErrorCategory.CONTRACT

    def __init__(self, index: Any, count: int, holder: str = "", **kwargs):
        message = f"Bad param index {index!r}: holder has {count} params"
        if holder:
            message = f"{message} ({holder})"

        self.index = index
        self.count = count

        super().__init__(message=message, index=index, count=count, holder=holder, **kwargs)


class BorrowError(GenotypeError):
    """Conflicting borrow on a shared handle."""

    code = "GEN_002"
    category = GenotypeErrorCategory.BORROW

    def __init__(self, requested: str, shared: int, exclusive: bool, message: str = "", **kwargs):
        if not message:
            if exclusive:
                held = "an exclusive borrow"
            else:
                held = f"{shared} shared borrow(s)"
            message = f"Cannot take {requested} borrow: value already has {held}"

        self.requested = requested

        super().__init__(
            message=message,
            requested=requested,
            shared=shared,
            exclusive=exclusive,
            **kwargs,
        )


class ConfigurationError(GenotypeError, ValueError):
    """Invalid configuration value."""

    code = "GEN_003"
    category = GenotypeErrorCategory.CONFIGURATION


class SchemaError(GenotypeError, ValueError):
    """Structured data does not describe a valid parameter set."""

    code = "GEN_004"
    category = GenotypeErrorCategory.SCHEMA
