"""
genotype/enums.py - Genotype enumerations.
"""

from enum import Enum


class GenotypeErrorCategory(Enum):
    """Categories of genotype errors."""
    CONTRACT = "contract"            # Holder index contract violated
    BORROW = "borrow"                # Shared handle borrow conflict
    CONFIGURATION = "configuration"  # Invalid config value
    SCHEMA = "schema"                # Structured data failed validation


class GeneratorKind(Enum):
    """Ready-made mutation offset generators."""
    CONSTANT = "constant"    # Same offset every call
    UNIFORM = "uniform"      # Uniform in [-scale, scale]
    GAUSSIAN = "gaussian"    # Normal(0, sigma), clipped to [-1, 1]
