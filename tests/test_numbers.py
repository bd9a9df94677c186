import unittest

from whatif.models.parameters import ContributionFrequency, SimulationParameters
from whatif.utils.numbers import clamp, format_currency, from_percent


class NumberHelperTests(unittest.TestCase):
    def test_from_percent(self) -> None:
        self.assertAlmostEqual(from_percent(7), 0.07)
        self.assertIsNone(from_percent(None))

    def test_clamp(self) -> None:
        self.assertEqual(clamp(5, 100, 5000), 100)
        self.assertEqual(clamp(9000, 100, 5000), 5000)
        self.assertEqual(clamp(1000, 100, 5000), 1000)

    def test_format_currency(self) -> None:
        self.assertEqual(format_currency(19671.51), "€19,672")
        self.assertEqual(format_currency(-250.0), "-€250")
        self.assertEqual(format_currency(None), "—")


class FrequencyTests(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual(ContributionFrequency.MONTHLY.label, "Monthly")
        self.assertEqual(ContributionFrequency.DAILY.label, "Daily")

    def test_from_name(self) -> None:
        self.assertIs(ContributionFrequency.from_name("weekly"), ContributionFrequency.WEEKLY)
        self.assertIs(ContributionFrequency.from_name("365"), ContributionFrequency.DAILY)
        with self.assertRaises(ValueError):
            ContributionFrequency.from_name("fortnightly")

    def test_parameters_are_immutable(self) -> None:
        params = SimulationParameters(amount=1, years=1)
        with self.assertRaises(Exception):
            params.years = 5
        self.assertEqual(params.frequency_label, "Monthly")


if __name__ == "__main__":
    unittest.main()
