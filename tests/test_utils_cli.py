import json

import numpy as np
import pandas as pd
import pytest
import yaml

from conftest import RPN15A_X, RPN15A_Y, gaussian, x_range
from curve_interp import InvalidInputError, LinearInterpolation, NaturalCubicSpline
from curve_interp.cli.interpolate import _parse_args, _resolve_config, evaluate_grid, main
from curve_interp.utils import data as udata
from curve_interp.utils import diagnostics, plots


@pytest.fixture
def samples_csv(tmp_path):
    path = tmp_path / "samples.csv"
    pd.DataFrame({"x": RPN15A_X, "y": RPN15A_Y}).to_csv(path, index=False)
    return path


# --------------------------------------------------------------------------- #
# utils.data
# --------------------------------------------------------------------------- #


class TestData:
    def test_load_samples(self, samples_csv):
        x, y = udata.load_samples(samples_csv)
        np.testing.assert_array_equal(x, RPN15A_X)
        np.testing.assert_array_equal(y, RPN15A_Y)
        assert x.dtype == float

    def test_load_samples_sort_and_dropna(self, tmp_path):
        path = tmp_path / "raw.csv"
        path.write_text("t,v\n2.0,4.0\n0.0,0.0\n1.0,\n1.5,2.25\n")
        x, y = udata.load_samples(path, x_col="t", y_col="v", sort=True)
        np.testing.assert_array_equal(x, [0.0, 1.5, 2.0])
        np.testing.assert_array_equal(y, [0.0, 2.25, 4.0])

    def test_load_samples_missing_column(self, samples_csv):
        with pytest.raises(InvalidInputError, match="missing column"):
            udata.load_samples(samples_csv, y_col="rate")

    def test_load_yaml_and_json(self, tmp_path):
        cfg = {"kind": "cubic", "monotonic": True}
        (tmp_path / "a.yaml").write_text(yaml.safe_dump(cfg))
        (tmp_path / "a.json").write_text(json.dumps(cfg))
        assert udata.load_yaml(tmp_path / "a.yaml") == cfg
        assert udata.load_yaml(tmp_path / "a.json") == cfg

    def test_dump_grid_creates_parents(self, tmp_path):
        frame = pd.DataFrame({"x": [0.0, 1.0], "value": [1.0, 2.0]})
        out = udata.dump_grid(frame, tmp_path / "nested" / "grid.csv")
        assert out.exists()
        pd.testing.assert_frame_equal(pd.read_csv(out), frame)


# --------------------------------------------------------------------------- #
# utils.diagnostics
# --------------------------------------------------------------------------- #


class TestDiagnostics:
    def test_l2_error_of_exact_fit_is_zero(self):
        x = np.linspace(0.0, 3.0, 7)
        f = LinearInterpolation(x, 2.0 * x + 1.0)
        assert diagnostics.l2_error(f, lambda t: 2.0 * t + 1.0, 0.0, 3.0) < 1e-14

    def test_l2_error_decreases_with_refinement(self):
        coarse = NaturalCubicSpline(x_range(-1.7, 1.9, 9), gaussian(x_range(-1.7, 1.9, 9)))
        fine = NaturalCubicSpline(x_range(-1.7, 1.9, 33), gaussian(x_range(-1.7, 1.9, 33)))
        assert diagnostics.l2_error(fine, gaussian, -1.7, 1.9) < diagnostics.l2_error(
            coarse, gaussian, -1.7, 1.9
        )

    def test_max_abs_error(self):
        f = LinearInterpolation([0.0, 2.0], [0.0, 4.0])
        # chord of x² at x = 1 misses by 1
        assert diagnostics.max_abs_error(f, [0.0, 1.0, 2.0], [0.0, 1.0, 4.0]) == pytest.approx(1.0)

    def test_overshoot_intervals(self, rpn15a):
        x, y = rpn15a
        assert diagnostics.overshoot_intervals(LinearInterpolation(x, y)) == []
        assert 5 in diagnostics.overshoot_intervals(NaturalCubicSpline(x, y))


# --------------------------------------------------------------------------- #
# utils.plots
# --------------------------------------------------------------------------- #


class TestPlots:
    def test_plot_interpolant_saves_png(self, rpn15a, tmp_path):
        out = tmp_path / "curve.png"
        plots.plot_interpolant(NaturalCubicSpline(*rpn15a), save_to=str(out), derivative=True)
        assert out.stat().st_size > 0

    def test_compare(self, rpn15a):
        x, y = rpn15a
        fig = plots.compare(
            {"natural": NaturalCubicSpline(x, y), "MC": NaturalCubicSpline(x, y, monotonic=True)}
        )
        ax = fig.axes[0]
        assert len(ax.get_lines()) == 2


# --------------------------------------------------------------------------- #
# CLI
# --------------------------------------------------------------------------- #


class TestCLI:
    def test_evaluate_grid_columns(self, rpn15a):
        grid = np.linspace(8.0, 19.0, 5)
        table = evaluate_grid(NaturalCubicSpline(*rpn15a), grid)
        assert list(table.columns) == ["x", "value", "derivative", "second_derivative", "primitive"]
        assert len(table) == 5

    def test_end_to_end(self, samples_csv, tmp_path):
        cfg = tmp_path / "spline.yaml"
        cfg.write_text(
            yaml.safe_dump(
                {
                    "kind": "cubic",
                    "left_condition": "not_a_knot",
                    "right_condition": "not_a_knot",
                }
            )
        )
        out = tmp_path / "build" / "grid.csv"
        png = tmp_path / "build" / "curve.png"
        code = main(
            [
                str(samples_csv),
                "--config", str(cfg),
                "--monotonic",
                "--points", "51",
                "--out", str(out),
                "--plot", str(png),
            ]
        )
        assert code == 0
        table = pd.read_csv(out)
        assert len(table) == 51
        assert table["x"].iloc[0] == pytest.approx(RPN15A_X[0])
        assert table["x"].iloc[-1] == pytest.approx(RPN15A_X[-1])
        assert table["value"].iloc[0] == pytest.approx(RPN15A_Y[0], abs=1e-15)
        assert table["value"].iloc[-1] == pytest.approx(RPN15A_Y[-1], abs=1e-14)
        assert png.exists()

    def test_extrapolation_error_exit_code(self, samples_csv, tmp_path):
        out = tmp_path / "grid.csv"
        code = main([str(samples_csv), "--to", "25", "--out", str(out)])
        assert code == 2
        assert not out.exists()

    def test_extrapolate_flag(self, samples_csv, tmp_path):
        out = tmp_path / "grid.csv"
        code = main(
            [str(samples_csv), "--kind", "linear", "--extrapolate", "--to", "25", "--out", str(out)]
        )
        assert code == 0
        assert pd.read_csv(out)["x"].iloc[-1] == pytest.approx(25.0)

    def test_bad_samples_exit_code(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("x,y\n1.0,1.0\n0.0,2.0\n")
        assert main([str(path), "--out", str(tmp_path / "g.csv")]) == 2

    @pytest.fixture
    def switched_on_yaml(self, tmp_path):
        path = tmp_path / "on.yaml"
        path.write_text(yaml.safe_dump({"kind": "cubic", "monotonic": True, "extrapolate": True}))
        return path

    @pytest.mark.parametrize(
        "flags, monotonic, extrapolate",
        [
            ([], True, True),
            (["--no-monotonic"], False, True),
            (["--no-extrapolate"], True, False),
            (["--no-monotonic", "--no-extrapolate"], False, False),
        ],
    )
    def test_flags_override_config_both_ways(
        self, samples_csv, switched_on_yaml, flags, monotonic, extrapolate
    ):
        args = _parse_args([str(samples_csv), "--config", str(switched_on_yaml), *flags])
        cfg = _resolve_config(args)
        assert cfg.monotonic is monotonic
        assert cfg.extrapolate is extrapolate

    def test_no_extrapolate_beats_config(self, samples_csv, switched_on_yaml, tmp_path):
        out = tmp_path / "grid.csv"
        argv = [str(samples_csv), "--config", str(switched_on_yaml), "--to", "25", "--out", str(out)]
        assert main(argv) == 0
        assert main([*argv, "--no-extrapolate"]) == 2
