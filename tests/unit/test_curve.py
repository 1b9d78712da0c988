"""Tests for the profit curve engine."""

import numpy as np
import pytest

from profit_curves import (
    CostModel,
    EmptyCurveError,
    InvalidInputError,
    OutOfRangeError,
    ProfitCurve,
    ProfitCurvePoint,
    ScoredDataset,
    confusion_at_cut,
    fraction_grid,
    profit_at_cut,
    profit_by_cut,
    profit_curve,
)
from profit_curves.curve import targeted_counts
from tests.fixtures.assertions import assert_curves_identical, assert_valid_curve
from tests.fixtures.data_generators import generate_scored_leads, make_ranked_population


class TestFractionGrid:
    def test_default_has_101_points(self):
        grid = fraction_grid()

        assert grid.size == 101
        assert grid[0] == 0.0
        assert grid[-1] == 1.0

    def test_points_match_decimal_literals(self):
        grid = fraction_grid(0.01)

        assert grid[24] == 0.24
        assert grid[29] == 0.29

    def test_step_sizes(self, grid_step):
        grid = fraction_grid(grid_step)

        assert grid.size == round(1 / grid_step) + 1
        assert np.all(np.diff(grid) > 0)

    @pytest.mark.parametrize("step", [0.0, -0.1, 1.5, np.nan])
    def test_step_out_of_range(self, step):
        with pytest.raises(OutOfRangeError):
            fraction_grid(step)

    def test_step_must_divide_one(self):
        with pytest.raises(InvalidInputError, match="divide 1"):
            fraction_grid(0.3)


class TestTargetedCounts:
    def test_rounding(self):
        k = targeted_counts([0.0, 0.24, 0.29, 0.5, 1.0], 100)

        assert k.tolist() == [0, 24, 29, 50, 100]

    def test_halves_round_up(self):
        # 0.05 * 10 = 0.5 and 0.25 * 10 = 2.5
        assert targeted_counts([0.05, 0.25], 10).tolist() == [1, 3]


class TestProfitCurve:
    def test_default_grid(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model)

        assert len(curve) == 101
        assert curve.model_name == "Model"
        assert_valid_curve(curve, n_records=10)

    def test_matches_direct_recount(self, sample_binary_dataset, lead_cost_model):
        curve = profit_curve(sample_binary_dataset, lead_cost_model, step=0.05)

        for point in curve:
            c = confusion_at_cut(sample_binary_dataset, point.targeted_count)
            expected = lead_cost_model.profit(c.tp, c.fp, c.tn, c.fn)
            assert point.profit == pytest.approx(expected)

    def test_points(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model, grid=[0.0, 0.3, 1.0])

        # ranked labels: 1 1 0 1 1 0 1 0 1 0
        assert curve.points() == [
            ProfitCurvePoint(0.0, 0, 0.0, "Model"),
            ProfitCurvePoint(0.3, 3, 2 * 400 - 600, "Model"),
            ProfitCurvePoint(1.0, 10, 6 * 400 - 4 * 600, "Model"),
        ]

    def test_custom_model_name(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model, model_name="Random Forest")

        assert {p.model_name for p in curve} == {"Random Forest"}

    def test_arrays_read_only(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model)
        with pytest.raises(ValueError):
            curve.profits[0] = 1.0

    def test_caller_grid_not_aliased(self, small_dataset, lead_cost_model):
        grid = np.array([0.0, 0.5, 1.0])
        curve = profit_curve(small_dataset, lead_cost_model, grid=grid)
        grid[1] = 0.6

        assert curve.fractions[1] == 0.5

    def test_caller_arrays_stay_writable(self, lead_cost_model):
        fractions = np.array([0.0, 1.0])
        counts = np.array([0, 4])
        profits = np.array([0.0, 800.0])
        curve = ProfitCurve("Model", fractions, counts, profits, 4, lead_cost_model)

        profits[1] = -1.0

        assert fractions.flags.writeable
        assert curve.profits[1] == 800.0
        assert not curve.profits.flags.writeable

    def test_records_population_positives(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model)

        assert curve.n_positive == 6

    def test_empty_grid(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model, grid=[])

        assert len(curve) == 0
        assert curve.points() == []

    def test_deterministic(self, sample_binary_dataset, lead_cost_model):
        first = profit_curve(sample_binary_dataset, lead_cost_model)
        second = profit_curve(sample_binary_dataset, lead_cost_model)

        assert_curves_identical(first, second)

    def test_to_records(self, small_dataset, lead_cost_model):
        rows = profit_curve(small_dataset, lead_cost_model, grid=[0.5]).to_records()

        assert rows == [
            {"fraction": 0.5, "targeted_count": 5, "profit": 1000.0, "model_name": "Model"}
        ]


class TestConcreteScenarios:
    """Sale nets 400, wasted contact costs 600."""

    def test_top_ten_with_eight_buyers(self, lead_cost_model):
        labels = [1] * 8 + [0] * 2 + [0] * 90
        scores, labels = make_ranked_population(labels)
        ds = ScoredDataset.from_predictions(scores, labels)

        curve = profit_curve(ds, lead_cost_model)

        assert curve[10].targeted_count == 10
        assert curve[10].profit == 2000.0

    def test_top_twenty_with_eighteen_buyers(self, lead_cost_model):
        labels = [1] * 18 + [0] * 2 + [0, 1] * 40
        scores, labels = make_ranked_population(labels)
        ds = ScoredDataset.from_predictions(scores, labels)

        assert profit_at_cut(ds, lead_cost_model, 20) == 6000.0
        assert profit_curve(ds, lead_cost_model)[20].profit == 6000.0


class TestProfitByCut:
    def test_endpoints(self, small_dataset, lead_cost_model):
        profits = profit_by_cut(small_dataset, lead_cost_model)

        assert profits.shape == (11,)
        assert profits[0] == 0.0
        assert profits[-1] == 6 * 400 + 4 * -600

    def test_profit_at_cut_range(self, small_dataset, lead_cost_model):
        with pytest.raises(OutOfRangeError):
            profit_at_cut(small_dataset, lead_cost_model, 11)


class TestArea:
    def test_mean_profit_of_linear_curve(self, small_dataset):
        # Every targeted lead pays 1, so profit rises linearly from 0 to 10
        cm = CostModel(1, 1)
        curve = profit_curve(small_dataset, cm, step=0.1)

        assert curve.area() == pytest.approx(5.0)

    def test_single_point(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model, grid=[0.2])

        assert curve.area() == curve.profits[0]

    def test_empty(self, small_dataset, lead_cost_model):
        curve = profit_curve(small_dataset, lead_cost_model, grid=[])
        with pytest.raises(EmptyCurveError):
            curve.area()


@pytest.mark.slow
def test_larger_population_sweep(lead_cost_model):
    scores, labels = generate_scored_leads(5000, conversion_rate=0.2, random_state=3)
    ds = ScoredDataset.from_predictions(scores, labels)
    curve = profit_curve(ds, lead_cost_model)

    assert_valid_curve(curve, n_records=5000)
    assert curve.targeted_counts[-1] == 5000
