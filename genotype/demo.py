"""
genotype/demo.py - Demo entity and command line entry point.

A 2D cuboid shape with a rotation: two dimensions ranging 1m-20m and a
rotation ranging 0-360 degrees, three genes in total.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

from .config import load_config
from .holder import ParamHolder, check_index, scaled_values
from .logging_setup import setup_logging, setup_logging_from_config
from .mutation import create_mutation_gen, mutate
from .param_set import ParamSet2d
from .params import Gene
from .shared import Shared

logger = logging.getLogger(__name__)


class Dimension(Gene):
    """A length in space in one dimension (m)."""
    RANGE = (1.0, 20.0)


class Rotation(Gene):
    """Rotation in degrees."""
    RANGE = (0.0, 360.0)


class Shape(ParamHolder):
    """A 2D cuboid shape in space with a rotation."""

    def __init__(self, dimensions: ParamSet2d[Dimension], rotation: Rotation):
        self.dimensions = dimensions
        self.rotation = rotation

    def param_count(self) -> int:
        # 2 for dimensions + 1 for rotation
        return self.dimensions.param_count() + 1

    def get_param(self, index: int):
        index = check_index(self, index)
        if index < 2:
            return self.dimensions.get_param(index)
        return self.rotation

    def to_dict(self):
        width, height = self.dimensions.components_scaled()
        return {
            "width_m": round(width, 6),
            "height_m": round(height, 6),
            "rotation_deg": round(self.rotation.get_scaled(), 6),
        }

    def __repr__(self) -> str:
        return f"Shape(dimensions={self.dimensions!r}, rotation={self.rotation!r})"


def default_shape() -> Shape:
    return Shape(
        dimensions=ParamSet2d(Dimension(0.5), Dimension(0.5)),
        rotation=Rotation(0.0),
    )


def main(args: Optional[List[str]] = None) -> int:
    """
    Mutate the demo shape and print its phenotype as JSON.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Mutate a demo genotype and print its phenotype",
        prog="genotype-demo",
    )
    parser.add_argument("-c", "--config", help="Path to JSON configuration file", default=None)
    parser.add_argument("-n", "--rounds", type=int, default=1, help="Number of mutation passes")
    parser.add_argument("--seed", type=int, default=None, help="Override the generator seed")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )

    parsed = parser.parse_args(args)
    if parsed.rounds < 0:
        parser.error("--rounds must be >= 0")

    config = load_config(parsed.config)
    if parsed.log_level:
        setup_logging(level=parsed.log_level)
    else:
        setup_logging_from_config(config.logging)

    if parsed.seed is not None:
        config.mutation.seed = parsed.seed

    mut_gen = create_mutation_gen(config.mutation)
    shape = Shared(default_shape())

    history = []
    for round_no in range(parsed.rounds):
        mutate(shape.clone(), mut_gen)
        with shape.borrow() as s:
            logger.info(f"Round {round_no + 1}: {scaled_values(s)}")
            history.append(s.to_dict())

    with shape.borrow() as s:
        result = {
            "generator": config.mutation.generator.value,
            "rounds": parsed.rounds,
            "history": history,
            "final": s.to_dict(),
        }

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
