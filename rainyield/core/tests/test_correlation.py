import unittest

from parameterized import parameterized

from core.correlation import classify_strength, correlate_series, pearson_correlation
from rainyield.models import CorrelationResult, StrengthLabel

RAINFALL = [10, 20, 30, 40]
YIELDS = [1, 2, 3, 4]


class TestPearsonCorrelation(unittest.TestCase):
    def test_perfect_positive_relation(self):
        self.assertEqual(pearson_correlation(RAINFALL, YIELDS), 1.0)

    def test_perfect_negative_relation(self):
        self.assertAlmostEqual(
            pearson_correlation(RAINFALL, list(reversed(YIELDS))), -1.0
        )

    def test_matches_known_value(self):
        # numerator 12, denominator sqrt(20 * 20)
        r = pearson_correlation([1, 2, 3, 4], [2, 1, 4, 3])
        self.assertAlmostEqual(r, 0.6, places=6)

    def test_zero_variance_in_yield(self):
        self.assertIsNone(pearson_correlation([10, 20], [5, 5]))

    def test_zero_variance_in_rainfall(self):
        self.assertIsNone(pearson_correlation([7, 7, 7], [1, 2, 3]))

    def test_fewer_than_two_points(self):
        self.assertIsNone(pearson_correlation([], []))
        self.assertIsNone(pearson_correlation([10], [1]))

    def test_mismatched_lengths(self):
        with self.assertRaises(ValueError):
            pearson_correlation([1, 2, 3], [1, 2])

    def test_result_stays_within_bounds(self):
        rainfall = [0.1 * i for i in range(1, 11)]
        yields = [3 * value + 0.3 for value in rainfall]
        r = pearson_correlation(rainfall, yields)

        assert r is not None  # required for type checker
        self.assertLessEqual(r, 1.0)
        self.assertGreaterEqual(r, -1.0)
        self.assertAlmostEqual(r, 1.0)


class TestClassifyStrength(unittest.TestCase):
    @parameterized.expand(
        [
            (1.0, StrengthLabel.STRONG_POSITIVE),
            (0.7, StrengthLabel.STRONG_POSITIVE),
            (0.69, StrengthLabel.MODERATE_POSITIVE),
            (0.3, StrengthLabel.MODERATE_POSITIVE),
            (0.29, StrengthLabel.WEAK),
            (0.0, StrengthLabel.WEAK),
            (-0.29, StrengthLabel.WEAK),
            (-0.3, StrengthLabel.MODERATE_NEGATIVE),
            (-0.69, StrengthLabel.MODERATE_NEGATIVE),
            (-0.7, StrengthLabel.STRONG_NEGATIVE),
            (-1.0, StrengthLabel.STRONG_NEGATIVE),
        ]
    )
    def test_thresholds(self, r, expected):
        self.assertEqual(classify_strength(r), expected)

    def test_label_values(self):
        self.assertEqual(StrengthLabel.STRONG_POSITIVE.value, "strong positive")
        self.assertEqual(StrengthLabel.UNDEFINED.value, "undefined correlation")

    def test_only_strong_labels_are_strong(self):
        strong = {label for label in StrengthLabel if label.is_strong}
        self.assertEqual(
            strong, {StrengthLabel.STRONG_POSITIVE, StrengthLabel.STRONG_NEGATIVE}
        )


class TestCorrelateSeries(unittest.TestCase):
    def test_strong_positive(self):
        result = correlate_series(RAINFALL, YIELDS)

        assert result is not None
        self.assertIsInstance(result, CorrelationResult)
        self.assertEqual(result.r, 1.0)
        self.assertEqual(result.strength, StrengthLabel.STRONG_POSITIVE)
        self.assertEqual(
            result.summary,
            "There is a significant relationship between rainfall and yield.",
        )

    def test_undefined_correlation(self):
        result = correlate_series([10, 20], [5, 5])

        assert result is not None
        self.assertIsNone(result.r)
        self.assertEqual(result.strength, StrengthLabel.UNDEFINED)
        self.assertEqual(
            result.summary,
            "The relationship between rainfall and yield is weak or moderate.",
        )

    def test_not_enough_samples(self):
        self.assertIsNone(correlate_series([10], [1]))
