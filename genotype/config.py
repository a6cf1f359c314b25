"""
genotype/config.py - Library configuration.

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from .enums import GeneratorKind
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_kind(value: Any) -> GeneratorKind:
    if isinstance(value, GeneratorKind):
        return value
    try:
        return GeneratorKind(str(value).lower())
    except ValueError:
        valid = ", ".join(k.value for k in GeneratorKind)
        raise ConfigurationError(
            f"Unknown mutation generator '{value}' (expected one of: {valid})",
            value=value,
        ) from None


def _apply_overrides(target: Any, values: Dict[str, Any]) -> None:
    """Set dataclass fields from a dict, ignoring keys that are not fields."""
    names = {f.name for f in fields(target)}
    for key, value in values.items():
        if key in names:
            setattr(target, key, value)
        else:
            logger.warning(f"Ignoring unknown config key: {type(target).__name__}.{key}")


def _parse_number(name: str, value: Any, cast=float):
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}", value=value) from None


@dataclass
class MutationConfig:
    """Default mutation offset generator settings."""

    generator: GeneratorKind = GeneratorKind.UNIFORM
    scale: float = 0.1      # uniform offsets in [-scale, scale]
    sigma: float = 0.1      # gaussian standard deviation
    constant: float = 0.0   # offset for the constant generator
    seed: Optional[int] = None

    def __post_init__(self):
        self.generator = _parse_kind(self.generator)
        self.validate()

    def validate(self) -> None:
        """Coerce numeric fields and check value ranges."""
        self.scale = _parse_number("scale", self.scale)
        self.sigma = _parse_number("sigma", self.sigma)
        self.constant = _parse_number("constant", self.constant)
        if self.seed is not None:
            self.seed = _parse_number("seed", self.seed, int)

        if not 0.0 <= self.scale <= 1.0:
            raise ConfigurationError(f"scale must be in [0, 1], got {self.scale}", value=self.scale)
        if self.sigma < 0.0:
            raise ConfigurationError(f"sigma must be >= 0, got {self.sigma}", value=self.sigma)

    @classmethod
    def from_env(cls) -> "MutationConfig":
        seed = os.getenv("GENOTYPE_MUTATION_SEED")
        return cls(
            generator=_parse_kind(os.getenv("GENOTYPE_MUTATION_GENERATOR", "uniform")),
            scale=_parse_number("scale", os.getenv("GENOTYPE_MUTATION_SCALE", "0.1")),
            sigma=_parse_number("sigma", os.getenv("GENOTYPE_MUTATION_SIGMA", "0.1")),
            constant=_parse_number("constant", os.getenv("GENOTYPE_MUTATION_CONSTANT", "0.0")),
            seed=_parse_number("seed", seed, int) if seed else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generator": self.generator.value,
            "scale": self.scale,
            "sigma": self.sigma,
            "constant": self.constant,
            "seed": self.seed,
        }


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("GENOTYPE_LOG_LEVEL", "INFO"),
            format=os.getenv("GENOTYPE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("GENOTYPE_LOG_FILE"),
            json_logs=os.getenv("GENOTYPE_JSON_LOGS", "false").lower() == "true",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "format": self.format,
            "log_file": self.log_file,
            "json_logs": self.json_logs,
        }


@dataclass
class GenotypeConfig:
    """Root configuration."""

    mutation: MutationConfig = field(default_factory=MutationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "GenotypeConfig":
        """Create configuration from environment variables."""
        return cls(
            mutation=MutationConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "GenotypeConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {filepath}: {e}", path=str(path)) from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "GenotypeConfig":
        """Create config from dictionary, overriding environment values."""
        config = cls.from_env()

        if "mutation" in data:
            _apply_overrides(config.mutation, data["mutation"])
            config.mutation.generator = _parse_kind(config.mutation.generator)
            config.mutation.validate()

        if "logging" in data:
            _apply_overrides(config.logging, data["logging"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "mutation": self.mutation.to_dict(),
            "logging": self.logging.to_dict(),
        }


# Global config instance
_config: Optional[GenotypeConfig] = None


def load_config(filepath: str = None) -> GenotypeConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        GenotypeConfig instance
    """
    global _config

    if filepath:
        _config = GenotypeConfig.from_file(filepath)
    else:
        default_paths = [
            "./genotype.json",
            os.path.expanduser("~/.genotype/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = GenotypeConfig.from_file(path)
                return _config

        _config = GenotypeConfig.from_env()

    logger.debug(f"Configuration loaded: generator={_config.mutation.generator.value}")
    return _config


def get_config() -> GenotypeConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config
    _config = None
