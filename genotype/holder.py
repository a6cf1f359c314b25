"""
genotype/holder.py - Flat, indexed access to an entity's genes.

A holder is any entity exposing its genes as a flat, 0-indexed sequence,
possibly delegating to nested holders. The index space of a composite holder
is the concatenation, in declared order, of its children's index spaces.

Example:
    class Weight(Gene):
        RANGE = (40.0, 100.0)

    class Height(Gene):
        RANGE = (140.0, 185.0)

    class Human(ParamHolder):
        def __init__(self, weight, height):
            self.weight = weight
            self.height = height

        def param_count(self):
            return 2

        def get_param(self, index):
            index = check_index(self, index)
            return (self.weight, self.height)[index]
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence, Tuple, Union
import operator

import numpy as np

from .errors import ParamIndexError
from .params import Param, RangedParam


class ParamHolder(ABC):
    """An entity with multiple parameters, i.e. a chromosome."""

    @abstractmethod
    def param_count(self) -> int:
        """The number of genes on this chromosome, nested holders included."""

    @abstractmethod
    def get_param(self, index: int) -> RangedParam:
        """
        Returns the gene at the given index.

        Raises:
            ParamIndexError: If index is outside [0, param_count())
        """


def check_index(holder: ParamHolder, index: int) -> int:
    """
    Validate a flat gene index against a holder.

    Returns:
        The index as a plain int (numpy integers are accepted)

    Raises:
        ParamIndexError: If index is not an int in [0, param_count())
    """
    count = holder.param_count()
    if isinstance(index, bool):
        raise ParamIndexError(index, count, holder=type(holder).__name__)
    try:
        position = operator.index(index)
    except TypeError:
        raise ParamIndexError(index, count, holder=type(holder).__name__) from None
    if not 0 <= position < count:
        raise ParamIndexError(index, count, holder=type(holder).__name__)
    return position


Child = Union[RangedParam, ParamHolder]


def _child_count(child: Child) -> int:
    if isinstance(child, ParamHolder):
        return child.param_count()
    return 1


class ParamGroup(ParamHolder):
    """
    Composite holder over an ordered list of genes and nested holders.

    A bare gene occupies one index; a nested holder occupies
    param_count() indices and receives indices local to itself.
    """

    def __init__(self, *children: Child):
        for child in children:
            if not isinstance(child, (RangedParam, ParamHolder)):
                raise TypeError(
                    f"ParamGroup children must be genes or holders, got {type(child).__name__}"
                )
        self.children: Tuple[Child, ...] = children

    def param_count(self) -> int:
        return sum(_child_count(child) for child in self.children)

    def get_param(self, index: int) -> RangedParam:
        index = check_index(self, index)

        offset = index
        for child in self.children:
            count = _child_count(child)
            if offset < count:
                if isinstance(child, ParamHolder):
                    return child.get_param(offset)
                return child
            offset -= count

        # check_index guarantees a child owns the index
        raise ParamIndexError(index, self.param_count(), holder=type(self).__name__)

    def __repr__(self) -> str:
        inner = ", ".join(repr(child) for child in self.children)
        return f"{type(self).__name__}({inner})"


def iter_params(holder: ParamHolder) -> Iterator[RangedParam]:
    """Yield every gene of holder in index order."""
    for i in range(holder.param_count()):
        yield holder.get_param(i)


def unscaled_values(holder: ParamHolder) -> List[Param]:
    """Unscaled value of every gene, in index order."""
    return [param.get() for param in iter_params(holder)]


def scaled_values(holder: ParamHolder) -> List[Param]:
    """Scaled (phenotype) value of every gene, in index order."""
    return [param.get_scaled() for param in iter_params(holder)]


def unscaled_array(holder: ParamHolder) -> np.ndarray:
    """Unscaled genome as a 1-d float array."""
    return np.asarray(unscaled_values(holder), dtype=np.float64)


def set_unscaled(holder: ParamHolder, values: Sequence[Param]) -> None:
    """
    Write raw unscaled values into holder, in index order.

    No clamping is applied.

    Raises:
        ValueError: If len(values) differs from param_count()
    """
    count = holder.param_count()
    if len(values) != count:
        raise ValueError(f"Expected {count} values, got {len(values)}")
    for i, value in enumerate(values):
        holder.get_param(i).set(float(value))
