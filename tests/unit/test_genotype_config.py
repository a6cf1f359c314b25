"""
Unit tests for configuration loading and logging setup.
"""

import json
import logging

import pytest

from genotype import config as config_module
from genotype.config import (
    GenotypeConfig,
    LoggingConfig,
    MutationConfig,
    get_config,
    load_config,
)
from genotype.enums import GeneratorKind
from genotype.errors import ConfigurationError
from genotype.logging_setup import JSONFormatter, setup_logging, setup_logging_from_config


class TestMutationConfig:
    """Tests for MutationConfig."""

    def test_defaults(self):
        cfg = MutationConfig()
        assert cfg.generator == GeneratorKind.UNIFORM
        assert cfg.scale == 0.1
        assert cfg.seed is None

    def test_string_generator(self):
        assert MutationConfig(generator="GAUSSIAN").generator == GeneratorKind.GAUSSIAN

    def test_unknown_generator(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MutationConfig(generator="cauchy")
        assert "cauchy" in str(exc_info.value)

    def test_bad_scale(self):
        with pytest.raises(ConfigurationError):
            MutationConfig(scale=1.5)

    def test_bad_sigma(self):
        with pytest.raises(ConfigurationError):
            MutationConfig(sigma=-1.0)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            MutationConfig(scale="wide")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GENOTYPE_MUTATION_GENERATOR", "constant")
        monkeypatch.setenv("GENOTYPE_MUTATION_CONSTANT", "0.25")
        monkeypatch.setenv("GENOTYPE_MUTATION_SEED", "42")
        cfg = MutationConfig.from_env()
        assert cfg.generator == GeneratorKind.CONSTANT
        assert cfg.constant == 0.25
        assert cfg.seed == 42

    def test_from_env_bad_number(self, monkeypatch):
        monkeypatch.setenv("GENOTYPE_MUTATION_SCALE", "lots")
        with pytest.raises(ConfigurationError):
            MutationConfig.from_env()

    def test_to_dict(self):
        data = MutationConfig(generator="gaussian", sigma=0.2).to_dict()
        assert data["generator"] == "gaussian"
        assert data["sigma"] == 0.2


class TestGenotypeConfig:
    """Tests for the root configuration."""

    def test_from_env_defaults(self):
        cfg = GenotypeConfig.from_env()
        assert cfg.mutation.generator == GeneratorKind.UNIFORM
        assert cfg.logging.level == "INFO"
        assert cfg.logging.json_logs is False

    def test_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("GENOTYPE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GENOTYPE_JSON_LOGS", "true")
        cfg = LoggingConfig.from_env()
        assert cfg.level == "DEBUG"
        assert cfg.json_logs is True

    def test_from_file(self, tmp_path):
        path = tmp_path / "genotype.json"
        path.write_text(json.dumps({
            "mutation": {"generator": "gaussian", "sigma": 0.3, "seed": 5},
            "logging": {"level": "WARNING"},
        }))
        cfg = GenotypeConfig.from_file(str(path))
        assert cfg.mutation.generator == GeneratorKind.GAUSSIAN
        assert cfg.mutation.sigma == 0.3
        assert cfg.mutation.seed == 5
        assert cfg.logging.level == "WARNING"

    def test_file_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GENOTYPE_MUTATION_SCALE", "0.5")
        path = tmp_path / "genotype.json"
        path.write_text(json.dumps({"mutation": {"generator": "constant"}}))
        cfg = GenotypeConfig.from_file(str(path))
        assert cfg.mutation.generator == GeneratorKind.CONSTANT
        assert cfg.mutation.scale == 0.5

    def test_file_invalid_value(self, tmp_path):
        path = tmp_path / "genotype.json"
        path.write_text(json.dumps({"mutation": {"scale": 3.0}}))
        with pytest.raises(ConfigurationError):
            GenotypeConfig.from_file(str(path))

    def test_file_keys_naming_methods_ignored(self, tmp_path, caplog):
        """Test only dataclass fields are taken from the file."""
        path = tmp_path / "genotype.json"
        path.write_text(json.dumps({
            "mutation": {"validate": 1, "to_dict": 2, "scale": 0.3},
            "logging": {"from_env": 3, "level": "DEBUG"},
        }))
        with caplog.at_level(logging.WARNING, logger="genotype.config"):
            cfg = GenotypeConfig.from_file(str(path))
        assert cfg.mutation.scale == 0.3
        assert cfg.mutation.to_dict()["scale"] == 0.3
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.to_dict()["level"] == "DEBUG"
        assert "MutationConfig.validate" in caplog.text
        assert "LoggingConfig.from_env" in caplog.text

    def test_file_invalid_json(self, tmp_path):
        path = tmp_path / "genotype.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            GenotypeConfig.from_file(str(path))

    def test_missing_file_falls_back(self, tmp_path):
        cfg = GenotypeConfig.from_file(str(tmp_path / "missing.json"))
        assert cfg.mutation.generator == GeneratorKind.UNIFORM

    def test_to_dict(self):
        data = GenotypeConfig().to_dict()
        assert set(data) == {"mutation", "logging"}
        assert data["mutation"]["generator"] == "uniform"


class TestGlobalConfig:
    """Tests for load_config / get_config."""

    def test_get_config_caches(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        first = get_config()
        assert get_config() is first

    def test_load_config_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "genotype.json").write_text(json.dumps({"mutation": {"generator": "constant"}}))
        cfg = load_config()
        assert cfg.mutation.generator == GeneratorKind.CONSTANT
        assert config_module.get_config() is cfg

    def test_load_config_explicit(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"mutation": {"scale": 0.2}}))
        assert load_config(str(path)).mutation.scale == 0.2


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_level_and_handler(self):
        root = logging.getLogger()
        before = len(root.handlers)
        setup_logging(level="DEBUG")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == before + 1

    def test_json_formatter(self):
        setup_logging(level="INFO", json_format=True)
        handler = logging.getLogger().handlers[-1]
        assert isinstance(handler.formatter, JSONFormatter)

        record = logging.LogRecord("genotype.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        data = json.loads(handler.formatter.format(record))
        assert data["message"] == "hello world"
        assert data["logger"] == "genotype.test"

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "genotype.log"
        setup_logging_from_config(LoggingConfig(level="INFO", log_file=str(log_file)))
        logging.getLogger("genotype.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written" in log_file.read_text()
