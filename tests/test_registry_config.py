import logging

import pytest

import curve_interp
from curve_interp import (
    BoundaryCondition,
    CubicInterpolation,
    InvalidInputError,
    LinearInterpolation,
    SplineConfig,
)
from curve_interp import interpolators as interp


# --------------------------------------------------------------------------- #
# registry
# --------------------------------------------------------------------------- #


class TestRegistry:
    def test_builtin_backends(self):
        assert set(interp.available) == {"linear", "cubic", "backward_flat", "forward_flat"}
        assert interp.get("cubic") is CubicInterpolation
        assert curve_interp.interpolator("linear") is LinearInterpolation

    def test_available_is_read_only(self):
        with pytest.raises(TypeError):
            interp.available["spam"] = object

    def test_unknown_tag(self):
        with pytest.raises(KeyError, match="Available"):
            interp.get("akima")

    def test_duplicate_tag(self):
        with pytest.raises(ValueError):
            interp.register("cubic", CubicInterpolation)

    def test_register_new_backend(self, monkeypatch):
        monkeypatch.setitem(interp._REGISTRY, "other_linear", LinearInterpolation)
        f = interp.get("other_linear")([0.0, 1.0], [0.0, 2.0])
        assert f(0.5) == pytest.approx(1.0)
        assert "other_linear" in interp.available


class TestCloseEnough:
    def test_rounding_noise(self):
        assert interp.close_enough(0.1 + 0.2, 0.3)
        assert not interp.close_enough(1.0, 1.0 + 1e-10)

    def test_zero(self):
        assert interp.close_enough(0.0, 0.0)
        assert interp.close_enough(0.0, 1e-300)
        assert not interp.close_enough(0.0, 1e-10)


# --------------------------------------------------------------------------- #
# SplineConfig
# --------------------------------------------------------------------------- #


class TestSplineConfig:
    def test_defaults(self):
        cfg = SplineConfig.from_mapping(None)
        assert cfg.kind == "cubic"
        assert cfg.left_condition is BoundaryCondition.SECOND_DERIVATIVE
        assert cfg.extrapolate is False

    def test_strings_are_normalised(self):
        cfg = SplineConfig.from_mapping(
            {"left_condition": "not-a-knot", "right_condition": "FIRST_DERIVATIVE", "right_value": 1}
        )
        assert cfg.left_condition is BoundaryCondition.NOT_A_KNOT
        assert cfg.right_condition is BoundaryCondition.FIRST_DERIVATIVE
        assert isinstance(cfg.right_value, float)

    def test_round_trip_mapping(self):
        cfg = SplineConfig(kind="cubic", monotonic=True, left_condition="first_derivative")
        data = cfg.to_mapping()
        assert data["left_condition"] == "first_derivative"
        assert SplineConfig.from_mapping(data) == cfg

    @pytest.mark.parametrize(
        "data",
        [{"kind": "akima"}, {"tension": 2.0}, ["cubic"], {"left_condition": "periodic"}],
        ids=["kind", "unknown-key", "not-a-mapping", "condition"],
    )
    def test_rejects_bad_config(self, data):
        with pytest.raises(InvalidInputError):
            SplineConfig.from_mapping(data)

    def test_frozen(self):
        cfg = SplineConfig()
        with pytest.raises(AttributeError):
            cfg.kind = "linear"

    def test_build_cubic(self, rpn15a):
        x, y = rpn15a
        cfg = SplineConfig(
            monotonic=True,
            left_condition="first_derivative",
            right_condition="first_derivative",
        )
        f = cfg.build(x, y)
        assert isinstance(f, CubicInterpolation)
        assert f.value(11.0) < 1.0
        assert abs(f.derivative(x[0])) <= 1e-14

    def test_build_linear_warns_on_monotonic(self, step_samples, caplog):
        cfg = SplineConfig(kind="linear", monotonic=True, extrapolate=True)
        with caplog.at_level(logging.WARNING, logger="curve_interp.config"):
            f = cfg.build(*step_samples)
        assert isinstance(f, LinearInterpolation)
        assert f(-1.0) == pytest.approx(6.0)
        assert "ignored" in caplog.text
