from django.test import SimpleTestCase

from apps.analytics.comparison import compare_periods, percent_change


class PercentChangeTest(SimpleTestCase):
    def test_documented_cases(self):
        cases = [
            (0, 0, 0),
            (50, 0, 100),
            (150, 100, 50),
            (50, 100, -50),
        ]
        for current, prior, expected in cases:
            with self.subTest(current=current, prior=prior):
                self.assertEqual(percent_change(current, prior), expected)

    def test_rounds_to_two_places(self):
        self.assertEqual(percent_change(2, 3), -33.33)


class ComparePeriodsTest(SimpleTestCase):
    def test_delta_and_percent_per_metric(self):
        comparison = compare_periods(
            {'delivered': 14968, 'openRate': 37.78},
            {'delivered': 10000, 'openRate': 40.0},
        )
        self.assertEqual(comparison['delivered'], {'delta': 4968, 'percentChange': 49.68})
        self.assertEqual(comparison['openRate']['delta'], -2.22)
        self.assertEqual(comparison['openRate']['percentChange'], -5.55)

    def test_metric_missing_from_prior_counts_as_zero(self):
        comparison = compare_periods({'opens': 10}, {})
        self.assertEqual(comparison['opens'], {'delta': 10, 'percentChange': 100})
