"""
genotype/ - Genotype access and mutation.

Independent of the phenotype, genes remain between 0 and 1 and can be
indexed, iterated or modified in place. Consumers describe their entities
with RangedParam genes and ParamHolder composites; mutate() applies one
clamped offset per gene.

Example:
    class Dimension(Gene):
        RANGE = (1.0, 20.0)

    class Rotation(Gene):
        RANGE = (0.0, 360.0)

    shape = Shared(ParamGroup(
        ParamSet2d(Dimension(0.5), Dimension(0.5)),
        Rotation(0.0),
    ))
    mutate(shape.clone(), ConstGen(0.1))
"""

from .enums import (
    GenotypeErrorCategory,
    GeneratorKind,
)

from .errors import (
    GenotypeError,
    ParamIndexError,
    BorrowError,
    ConfigurationError,
    SchemaError,
)

from .params import (
    Param,
    UNIT_RANGE,
    RangedParam,
    ParamRef,
    Gene,
    clamp_unit,
    apply_clamped_offset,
)

from .holder import (
    ParamHolder,
    ParamGroup,
    check_index,
    iter_params,
    unscaled_values,
    scaled_values,
    unscaled_array,
    set_unscaled,
)

from .param_set import ParamSet, ParamSet2d, ParamSet3d
from .schema import ParamSet2dModel, ParamSet3dModel
from .shared import Shared, BorrowGuard

from .mutation import (
    MutationGen,
    ConstGen,
    SequenceGen,
    UniformGen,
    GaussianGen,
    create_mutation_gen,
    mutate,
)

from .config import (
    GenotypeConfig,
    MutationConfig,
    LoggingConfig,
    load_config,
    get_config,
)

__version__ = "0.2.0"

__all__ = [
    # Enums
    "GenotypeErrorCategory",
    "GeneratorKind",
    # Errors
    "GenotypeError",
    "ParamIndexError",
    "BorrowError",
    "ConfigurationError",
    "SchemaError",
    # Genes
    "Param",
    "UNIT_RANGE",
    "RangedParam",
    "ParamRef",
    "Gene",
    "clamp_unit",
    "apply_clamped_offset",
    # Holders
    "ParamHolder",
    "ParamGroup",
    "check_index",
    "iter_params",
    "unscaled_values",
    "scaled_values",
    "unscaled_array",
    "set_unscaled",
    # Parameter sets
    "ParamSet",
    "ParamSet2d",
    "ParamSet3d",
    "ParamSet2dModel",
    "ParamSet3dModel",
    # Ownership
    "Shared",
    "BorrowGuard",
    # Mutation
    "MutationGen",
    "ConstGen",
    "SequenceGen",
    "UniformGen",
    "GaussianGen",
    "create_mutation_gen",
    "mutate",
    # Config
    "GenotypeConfig",
    "MutationConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
]
