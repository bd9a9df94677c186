import unittest

import numpy as np

from whatif.core.path_simulator import (
    contribution_future_value,
    simulate_path,
    simulate_paths,
    total_contributions,
)
from whatif.core.returns import SequenceReturnSampler
from whatif.core.validator import InvalidParameters
from whatif.models.parameters import SimulationParameters


class PathSimulatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lump_sum = SimulationParameters(amount=10000, years=10, fixed_rate=0.07)
        self.monthly = SimulationParameters(
            amount=100, recurring=True, frequency=12, years=5, fixed_rate=0.05
        )

    def test_path_length_is_horizon_plus_one(self) -> None:
        for years in (1, 2, 10, 40):
            params = SimulationParameters(amount=500, years=years, use_historical=True)
            result = simulate_path(params, rng=np.random.default_rng(years))
            self.assertEqual(len(result.path), years + 1)

    def test_lump_sum_starts_invested(self) -> None:
        result = simulate_path(self.lump_sum)
        self.assertEqual(result.path[0], 10000)
        self.assertEqual(result.total_contributions, 10000)

    def test_recurring_starts_empty(self) -> None:
        result = simulate_path(self.monthly)
        self.assertEqual(result.path[0], 0)
        self.assertEqual(result.total_contributions, 100 * 12 * 5)

    def test_fixed_rate_matches_compound_interest(self) -> None:
        result = simulate_path(self.lump_sum)
        for year, value in enumerate(result.path):
            self.assertAlmostEqual(value, 10000 * 1.07 ** year, places=6)

    def test_lump_sum_end_to_end(self) -> None:
        result = simulate_path(self.lump_sum)
        self.assertAlmostEqual(result.final_value, 19671.51, places=2)

    def test_zero_rate_recurring_adds_contributions_only(self) -> None:
        params = SimulationParameters(amount=100, recurring=True, frequency=12, years=5, fixed_rate=0.0)
        result = simulate_path(params)
        for year in range(1, 6):
            self.assertEqual(result.path[year], result.path[year - 1] + 1200)
        self.assertAlmostEqual(result.final_value, 6000.0)

    def test_zero_rate_is_finite_for_every_frequency(self) -> None:
        for frequency in (12, 52, 365):
            params = SimulationParameters(
                amount=10, recurring=True, frequency=frequency, years=2, fixed_rate=0.0
            )
            result = simulate_path(params)
            self.assertAlmostEqual(result.final_value, 10 * frequency * 2)

    def test_recurring_growth_compounds_within_year(self) -> None:
        result = simulate_path(self.monthly)
        self.assertGreater(result.final_value, result.total_contributions)
        # Year one: contributions grow, previous balance is zero.
        self.assertAlmostEqual(result.path[1], contribution_future_value(100, 0.05, 12))

    def test_injected_sampler_drives_each_year(self) -> None:
        params = SimulationParameters(amount=1000, years=3, use_historical=True)
        result = simulate_path(params, sampler=SequenceReturnSampler([0.1, -0.2, 0.05]))
        expected = [1000.0, 1100.0, 880.0, 924.0]
        for actual, target in zip(result.path, expected):
            self.assertAlmostEqual(actual, target)

    def test_batch_draws_are_laid_out_per_run(self) -> None:
        params = SimulationParameters(amount=100, years=2, use_historical=True)
        values = simulate_paths(params, 2, sampler=SequenceReturnSampler([0.1, 0.2, 0.0, 0.0]))
        self.assertEqual(values.shape, (2, 3))
        np.testing.assert_allclose(values[0], [100.0, 110.0, 132.0])
        np.testing.assert_allclose(values[1], [100.0, 100.0, 100.0])

    def test_total_contributions_helper(self) -> None:
        self.assertEqual(total_contributions(self.lump_sum), 10000)
        self.assertEqual(total_contributions(self.monthly), 6000)

    def test_invalid_parameters_rejected(self) -> None:
        invalid = [
            SimulationParameters(amount=100, years=0),
            SimulationParameters(amount=-1, years=5),
            SimulationParameters(amount=100, years=5, recurring=True, frequency=4),
            SimulationParameters(amount=100, years=5, fixed_rate=-1.0),
            SimulationParameters(amount=float("nan"), years=5),
        ]
        for params in invalid:
            with self.assertRaises(InvalidParameters):
                simulate_path(params)

    def test_fractional_horizon_and_frequency_rejected(self) -> None:
        invalid = [
            SimulationParameters(amount=100, years=0.5),
            SimulationParameters(amount=100, years=2.5),
            SimulationParameters(amount=100, years=5, recurring=True, frequency=12.5),
            SimulationParameters(amount=100, years=float("inf")),
        ]
        for params in invalid:
            with self.assertRaises(InvalidParameters):
                simulate_path(params)

    def test_whole_number_floats_accepted(self) -> None:
        params = SimulationParameters(amount=100, recurring=True, frequency=12.0, years=3.0, fixed_rate=0.0)
        result = simulate_path(params)
        self.assertEqual(len(result.path), 4)
        self.assertAlmostEqual(result.final_value, 3600.0)


class ContributionFutureValueTests(unittest.TestCase):
    def test_matches_explicit_annuity_sum(self) -> None:
        amount, annual_rate, frequency = 250.0, 0.08, 12
        period_rate = (1 + annual_rate) ** (1 / frequency) - 1
        explicit = sum(amount * (1 + period_rate) ** (frequency - k) for k in range(1, frequency + 1))
        self.assertAlmostEqual(contribution_future_value(amount, annual_rate, frequency), explicit, places=6)

    def test_zero_rate_is_simple_sum(self) -> None:
        self.assertEqual(contribution_future_value(100.0, 0.0, 52), 5200.0)

    def test_negative_rate(self) -> None:
        value = contribution_future_value(100.0, -0.2, 12)
        self.assertLess(value, 1200.0)
        self.assertGreater(value, 0.0)

    def test_vectorised_rates(self) -> None:
        values = contribution_future_value(100.0, np.array([0.0, 0.1]), 12)
        self.assertEqual(values.shape, (2,))
        self.assertEqual(values[0], 1200.0)
        self.assertGreater(values[1], 1200.0)


if __name__ == "__main__":
    unittest.main()
