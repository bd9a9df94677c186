import unittest

import numpy as np

from whatif.core.returns import (
    HISTORICAL_RETURNS,
    FixedReturnSampler,
    HistoricalReturnSampler,
    SequenceReturnSampler,
    build_sampler,
)
from whatif.models.parameters import SimulationParameters


class ReturnSamplerTests(unittest.TestCase):
    def test_historical_series_shape(self) -> None:
        self.assertEqual(len(HISTORICAL_RETURNS), 30)
        self.assertAlmostEqual(HISTORICAL_RETURNS[0], 0.103)
        self.assertAlmostEqual(min(HISTORICAL_RETURNS), -0.404)
        self.assertIsInstance(HISTORICAL_RETURNS, tuple)

    def test_fixed_sampler_repeats_rate(self) -> None:
        draws = FixedReturnSampler(0.05).sample(4)
        np.testing.assert_array_equal(draws, [0.05, 0.05, 0.05, 0.05])

    def test_historical_draws_come_from_series(self) -> None:
        sampler = HistoricalReturnSampler(seed=7)
        draws = sampler.sample(500)
        self.assertEqual(draws.shape, (500,))
        self.assertTrue(set(draws.tolist()) <= set(HISTORICAL_RETURNS))

    def test_historical_sampling_is_with_replacement(self) -> None:
        draws = HistoricalReturnSampler(seed=1).sample(200)
        self.assertLess(len(set(draws.tolist())), len(draws))

    def test_seeded_samplers_are_reproducible(self) -> None:
        first = HistoricalReturnSampler(rng=np.random.default_rng(11)).sample(10)
        second = HistoricalReturnSampler(rng=np.random.default_rng(11)).sample(10)
        np.testing.assert_array_equal(first, second)

    def test_rng_and_seed_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            HistoricalReturnSampler(rng=np.random.default_rng(1), seed=1)

    def test_sequence_sampler_wraps_and_keeps_position(self) -> None:
        sampler = SequenceReturnSampler([0.1, 0.2, 0.3])
        np.testing.assert_allclose(sampler.sample(2), [0.1, 0.2])
        np.testing.assert_allclose(sampler.sample(3), [0.3, 0.1, 0.2])

    def test_build_sampler_selects_mode(self) -> None:
        fixed = SimulationParameters(amount=1, years=1, fixed_rate=0.04)
        historical = SimulationParameters(amount=1, years=1, use_historical=True)
        self.assertIsInstance(build_sampler(fixed), FixedReturnSampler)
        self.assertIsInstance(build_sampler(historical), HistoricalReturnSampler)


if __name__ == "__main__":
    unittest.main()
