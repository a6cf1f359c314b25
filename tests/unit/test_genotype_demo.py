"""
Unit tests for the demo shape and command line entry point.
"""

import json

import pytest

from genotype.demo import Dimension, Rotation, Shape, default_shape, main
from genotype.errors import ParamIndexError
from genotype.mutation import ConstGen, mutate
from genotype.param_set import ParamSet2d
from genotype.shared import Shared


class TestShape:
    """Tests for the demo Shape holder."""

    def test_count_and_routing(self):
        shape = default_shape()
        assert shape.param_count() == 3
        assert shape.get_param(0) is shape.dimensions.x
        assert shape.get_param(1) is shape.dimensions.y
        assert shape.get_param(2) is shape.rotation

    def test_bad_index(self):
        with pytest.raises(ParamIndexError):
            default_shape().get_param(3)

    def test_mutate_in_place(self):
        shape = Shared(Shape(ParamSet2d(Dimension(0.5), Dimension(0.5)), Rotation(0.0)))
        mutate(shape.clone(), ConstGen(0.1))
        with shape.borrow() as s:
            assert s.dimensions.components() == pytest.approx((0.6, 0.6))
            assert s.rotation.get_scaled() == pytest.approx(36.0)

    def test_to_dict(self):
        data = default_shape().to_dict()
        assert data == {"width_m": 10.5, "height_m": 10.5, "rotation_deg": 0.0}


class TestMain:
    """Tests for the demo entry point."""

    def test_constant_rounds(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GENOTYPE_MUTATION_GENERATOR", "constant")
        monkeypatch.setenv("GENOTYPE_MUTATION_CONSTANT", "0.25")

        assert main(["--rounds", "2", "--log-level", "WARNING"]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out["generator"] == "constant"
        assert out["rounds"] == 2
        assert len(out["history"]) == 2
        assert out["final"]["rotation_deg"] == pytest.approx(180.0)
        assert out["final"]["width_m"] == pytest.approx(20.0)

    def test_seeded_runs_repeat(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["--rounds", "3", "--seed", "9", "--log-level", "ERROR"])
        first = json.loads(capsys.readouterr().out)
        main(["--rounds", "3", "--seed", "9", "--log-level", "ERROR"])
        second = json.loads(capsys.readouterr().out)
        assert first == second

    def test_config_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "demo.json"
        path.write_text(json.dumps({
            "mutation": {"generator": "constant", "constant": -0.5},
            "logging": {"level": "ERROR"},
        }))
        assert main(["-c", str(path)]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["final"]["width_m"] == pytest.approx(1.0)
        assert out["final"]["rotation_deg"] == pytest.approx(0.0)

    def test_negative_rounds(self, capsys):
        with pytest.raises(SystemExit):
            main(["--rounds", "-1"])
