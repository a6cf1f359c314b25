"""
genotype/param_set.py - Fixed-arity parameter sets.

Helpers to represent groups of related genes of one type, e.g. a position
or a size in space.

Example:
    class Length(Gene):
        RANGE = (0.0, 10.0)

    class Cuboid(ParamHolder):
        def __init__(self, size):
            self.size = size

        def param_count(self):
            return self.size.param_count()

        def get_param(self, index):
            return self.size.get_param(check_index(self, index))

    cuboid = Cuboid(ParamSet3d(Length(0.25), Length(0.5), Length(0.75)))
    cuboid.size.components_scaled()   # (2.5, 5.0, 7.5)

Indices passed to a set are local to it: a composite embedding a set must
subtract the preceding genes before delegating. Indices outside the set's
own window raise ParamIndexError, they never wrap around.
"""

from __future__ import annotations
import copy
from typing import Any, Dict, Generic, Tuple, Type, TypeVar

from .errors import SchemaError
from .holder import ParamHolder, check_index
from .params import Param, RangedParam
from .schema import ParamSet2dModel, ParamSet3dModel, validate_components

P = TypeVar("P", bound=RangedParam)


class ParamSet(ParamHolder, Generic[P]):
    """A collection of related parameters of the same gene type."""

    FIELDS: Tuple[str, ...] = ()

    def param_count(self) -> int:
        return len(self.FIELDS)

    def get_param(self, index: int) -> P:
        index = check_index(self, index)
        return getattr(self, self.FIELDS[index])

    def components(self) -> Tuple[Param, ...]:
        """Unscaled value of each component."""
        return tuple(getattr(self, name).get() for name in self.FIELDS)

    def components_scaled(self) -> Tuple[Param, ...]:
        """Each component scaled with get_scaled()."""
        return tuple(getattr(self, name).get_scaled() for name in self.FIELDS)

    def copy(self):
        """Copy of the set with each component copied."""
        return type(self)(*(copy.copy(getattr(self, name)) for name in self.FIELDS))

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name).get() for name in self.FIELDS}

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.FIELDS)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.FIELDS)
        return f"{type(self).__name__}({inner})"


def _build_components(gene_type: Type[P], values: Dict[str, float], fields: Tuple[str, ...]):
    if not (isinstance(gene_type, type) and issubclass(gene_type, RangedParam)):
        raise SchemaError(
            f"gene_type must be a RangedParam subclass, got {gene_type!r}",
            gene_type=repr(gene_type),
        )
    return [gene_type(values[name]) for name in fields]


class ParamSet2d(ParamSet[P]):
    """A 2D parameter set containing x and y."""

    FIELDS = ("x", "y")

    def __init__(self, x: P, y: P):
        self.x = x
        self.y = y

    @classmethod
    def from_dict(cls, data: Dict[str, Any], gene_type: Type[P]) -> "ParamSet2d[P]":
        """
        Rebuild a set from to_dict() output.

        Args:
            data: {"x": unscaled, "y": unscaled}
            gene_type: Gene class, constructed from an unscaled value

        Raises:
            SchemaError: If data or gene_type is invalid
        """
        values = validate_components(ParamSet2dModel, data)
        return cls(*_build_components(gene_type, values, cls.FIELDS))


class ParamSet3d(ParamSet[P]):
    """A 3D parameter set containing x, y and z."""

    FIELDS = ("x", "y", "z")

    def __init__(self, x: P, y: P, z: P):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_dict(cls, data: Dict[str, Any], gene_type: Type[P]) -> "ParamSet3d[P]":
        """
        Rebuild a set from to_dict() output.

        Raises:
            SchemaError: If data or gene_type is invalid
        """
        values = validate_components(ParamSet3dModel, data)
        return cls(*_build_components(gene_type, values, cls.FIELDS))
