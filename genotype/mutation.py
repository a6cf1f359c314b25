"""
genotype/mutation.py - Gene mutation operators.

mutate() walks every gene of a holder in index order and adds one offset
from a MutationGen to each, clamping the unscaled result to [0, 1].

Example:
    class Weight(Gene):
        RANGE = (40.0, 100.0)

    class Human(ParamHolder):
        ...

    human = Shared(Human(weight=Weight(0.1)))   # scaled weight 46.0
    mutate(human.clone(), ConstGen(0.4))         # scaled weight 70.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union, TYPE_CHECKING
import itertools
import logging
import random

import numpy as np

from .enums import GeneratorKind
from .errors import ConfigurationError
from .holder import ParamHolder
from .params import Param, apply_clamped_offset
from .shared import Shared

if TYPE_CHECKING:
    from .config import MutationConfig

logger = logging.getLogger(__name__)


class MutationGen(ABC):
    """
    Produces values to add to an unscaled gene value.

    Values are expected in [-1.0, 1.0]; the unscaled result is clamped
    between 0.0 and 1.0 regardless.
    """

    @abstractmethod
    def gen(self) -> Param:
        """Returns a value that is added to an unscaled gene."""


class ConstGen(MutationGen):
    """Always mutates by the same amount."""

    def __init__(self, value: Param):
        self.value = float(value)

    def gen(self) -> Param:
        return self.value

    def __repr__(self) -> str:
        return f"ConstGen({self.value!r})"


class SequenceGen(MutationGen):
    """Replays a fixed sequence of offsets, cycling when exhausted."""

    def __init__(self, values: Iterable[Param]):
        values = [float(v) for v in values]
        if not values:
            raise ValueError("SequenceGen requires at least one value")
        self.values = values
        self._cycle = itertools.cycle(values)
        self.calls = 0

    def gen(self) -> Param:
        self.calls += 1
        return next(self._cycle)


class UniformGen(MutationGen):
    """Uniform offsets in [-scale, scale]."""

    def __init__(
        self,
        scale: float = 1.0,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= scale <= 1.0:
            raise ValueError(f"scale must be in [0, 1], got {scale}")
        self.scale = scale
        self.rng = rng or random.Random(seed)

    def gen(self) -> Param:
        return self.rng.uniform(-self.scale, self.scale)


class GaussianGen(MutationGen):
    """Normal offsets with standard deviation sigma, clipped to [-1, 1]."""

    def __init__(
        self,
        sigma: float = 0.1,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if sigma < 0.0:
            raise ValueError(f"sigma must be >= 0, got {sigma}")
        self.sigma = sigma
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def gen(self) -> Param:
        return float(np.clip(self.rng.normal(0.0, self.sigma), -1.0, 1.0))


def create_mutation_gen(config: "MutationConfig") -> MutationGen:
    """
    Build the generator described by a MutationConfig.

    Raises:
        ConfigurationError: If the generator kind is not supported
    """
    if config.generator == GeneratorKind.CONSTANT:
        return ConstGen(config.constant)
    if config.generator == GeneratorKind.UNIFORM:
        return UniformGen(scale=config.scale, seed=config.seed)
    if config.generator == GeneratorKind.GAUSSIAN:
        return GaussianGen(sigma=config.sigma, seed=config.seed)
    raise ConfigurationError(f"Unsupported generator: {config.generator!r}")


def mutate(param_holder: Union[Shared, ParamHolder], mut_gen: MutationGen) -> int:
    """
    Mutate every gene of a holder in place.

    The gene count is read once. Each gene then gets one call to mut_gen,
    in ascending index order, under its own exclusive borrow which is
    released before the next gene. A failure aborts the pass; genes
    already visited keep their new value.

    Args:
        param_holder: Shared handle to the holder (a bare holder is wrapped)
        mut_gen: Offset source, called exactly once per gene

    Returns:
        Number of genes mutated

    Raises:
        ParamIndexError: If the holder's get_param disagrees with param_count
        BorrowError: If the handle is borrowed elsewhere during the pass
    """
    if not isinstance(param_holder, Shared):
        param_holder = Shared(param_holder)

    with param_holder.borrow() as holder:
        n = holder.param_count()

    for i in range(n):
        with param_holder.borrow_mut() as holder:
            param = holder.get_param(i)
            apply_clamped_offset(param, mut_gen.gen())

    logger.debug(f"Mutated {n} genes with {type(mut_gen).__name__}")
    return n
