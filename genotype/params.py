"""
genotype/params.py - Gene access and scaling.

A gene is a single normalized parameter. Its raw ("unscaled") value is kept
between 0.0 and 1.0 by the clamped update path, and is expressed in the
phenotype by scaling it into the range declared by the gene's type.

Example:
    class Weight(Gene):
        RANGE = (40.0, 100.0)  # kg

    weight = Weight(0.5)
    weight.get_scaled()         # 70.0

    weight.get_mut().value += 0.05
    weight.get_scaled()         # 73.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import math
from typing import Any, Dict, Tuple


Param = float
"""The type of a single gene."""

UNIT_RANGE: Tuple[Param, Param] = (0.0, 1.0)


def clamp_unit(value: Param) -> Param:
    """Clamp value to [0.0, 1.0]."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


class RangedParam(ABC):
    """
    Access to a gene's unscaled value and its scaled value, i.e. the phenotype.

    Concrete gene types implement get() and set(); range() defaults to the
    unit interval, which makes the scaled value equal the unscaled one.
    """

    def range(self) -> Tuple[Param, Param]:
        """The range of phenotype values, in the form (min, max)."""
        return UNIT_RANGE

    @abstractmethod
    def get(self) -> Param:
        """Returns the *unscaled* parameter value."""

    @abstractmethod
    def set(self, value: Param) -> None:
        """Writes the raw parameter value. No clamping is applied."""

    def get_mut(self) -> "ParamRef":
        """Returns a mutable handle on the raw parameter value."""
        return ParamRef(self)

    def get_scaled(self) -> Param:
        """
        Returns the parameter value scaled to range().

        Not clamped: an unscaled value outside [0, 1] extrapolates
        outside (min, max).
        """
        lo, hi = self.range()
        return (hi - lo) * self.get() + lo

    def add_clamped(self, delta: Param) -> Param:
        """
        Add delta to the unscaled value, clamping the result to [0, 1].

        Raises:
            ValueError: If delta is NaN or infinite
        """
        if not math.isfinite(delta):
            raise ValueError(f"Mutation offset must be finite, got {delta!r}")
        value = clamp_unit(self.get() + delta)
        self.set(value)
        return value


class ParamRef:
    """
    Mutable handle on the raw value of a gene.

    Writes through the handle bypass clamping; the caller owns the
    [0, 1] invariant when using it.
    """

    __slots__ = ("_param",)

    def __init__(self, param: RangedParam):
        self._param = param

    @property
    def param(self) -> RangedParam:
        return self._param

    @property
    def value(self) -> Param:
        return self._param.get()

    @value.setter
    def value(self, value: Param) -> None:
        self._param.set(value)

    def get(self) -> Param:
        return self._param.get()

    def set(self, value: Param) -> None:
        self._param.set(value)

    def __iadd__(self, delta: Param) -> "ParamRef":
        self._param.set(self._param.get() + delta)
        return self

    def __float__(self) -> float:
        return float(self._param.get())

    def __repr__(self) -> str:
        return f"ParamRef({self._param!r})"


def apply_clamped_offset(param: RangedParam, delta: Param) -> Param:
    """
    Apply the clamped additive update to any gene.

    Args:
        param: Gene of any concrete type
        delta: Offset added to the unscaled value

    Returns:
        The new unscaled value, in [0.0, 1.0]
    """
    return param.add_clamped(delta)


class Gene(RangedParam):
    """
    Ready-made gene holding a single float.

    Subclasses declare their phenotype range with RANGE:

        class Rotation(Gene):
            RANGE = (0.0, 360.0)
    """

    RANGE: Tuple[Param, Param] = UNIT_RANGE

    def __init__(self, unscaled: Param = 0.0):
        self.unscaled = float(unscaled)

    def range(self) -> Tuple[Param, Param]:
        return self.RANGE

    def get(self) -> Param:
        return self.unscaled

    def set(self, value: Param) -> None:
        self.unscaled = float(value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.unscaled == other.unscaled

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unscaled!r})"

    def to_dict(self) -> Dict[str, Any]:
        lo, hi = self.range()
        return {
            "unscaled": self.unscaled,
            "scaled": self.get_scaled(),
            "range": [lo, hi],
        }
