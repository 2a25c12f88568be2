from datetime import date

from django.test import SimpleTestCase, override_settings

from apps.analytics.date_range import DateRange, resolve_date_range
from apps.analytics.exceptions import InvalidRangeError


class ResolveDateRangeTest(SimpleTestCase):
    def test_defaults_to_trailing_thirty_days(self):
        window = resolve_date_range(today=date(2025, 4, 30))
        self.assertEqual(window, DateRange(date(2025, 3, 31), date(2025, 4, 30)))

    @override_settings(KIRK_DEFAULT_RANGE_DAYS=7)
    def test_default_window_follows_setting(self):
        window = resolve_date_range(today=date(2025, 4, 30))
        self.assertEqual(window.start, date(2025, 4, 23))

    def test_blank_strings_count_as_absent(self):
        window = resolve_date_range('', '', today=date(2025, 4, 30))
        self.assertEqual(window.end, date(2025, 4, 30))

    def test_explicit_bounds(self):
        window = resolve_date_range('2025-04-15', '2025-04-17')
        self.assertEqual(window.start, date(2025, 4, 15))
        self.assertEqual(window.end, date(2025, 4, 17))
        self.assertEqual(window.days, 3)

    def test_single_day_window(self):
        window = resolve_date_range('2025-04-15', '2025-04-15')
        self.assertEqual(window.days, 1)

    def test_one_missing_bound_is_rejected(self):
        with self.assertRaises(InvalidRangeError):
            resolve_date_range('2025-04-15', None)
        with self.assertRaises(InvalidRangeError):
            resolve_date_range(None, '2025-04-15')

    def test_malformed_dates_are_rejected(self):
        for bad in ['2025/04/15', '15-04-2025', '2025-4-15', '2025-02-30', 'yesterday']:
            with self.subTest(value=bad), self.assertRaises(InvalidRangeError):
                resolve_date_range(bad, '2025-04-30')

    def test_inverted_range_is_rejected(self):
        with self.assertRaises(InvalidRangeError):
            resolve_date_range('2025-04-17', '2025-04-15')


class PreviousYearTest(SimpleTestCase):
    def test_both_bounds_move_back_one_calendar_year(self):
        windows = [
            DateRange(date(2025, 4, 15), date(2025, 4, 17)),
            DateRange(date(2026, 1, 1), date(2026, 12, 31)),
            DateRange(date(2025, 12, 20), date(2026, 1, 10)),
            DateRange(date(2025, 3, 1), date(2025, 3, 1)),
        ]
        for window in windows:
            with self.subTest(window=window):
                prior = window.previous_year()
                self.assertEqual(prior.start, window.start.replace(year=window.start.year - 1))
                self.assertEqual(prior.end, window.end.replace(year=window.end.year - 1))
                self.assertEqual(prior.days, window.days)

    def test_leap_february_maps_to_whole_prior_february(self):
        prior = DateRange(date(2024, 2, 1), date(2024, 2, 29)).previous_year()
        self.assertEqual(prior, DateRange(date(2023, 2, 1), date(2023, 2, 28)))
        self.assertEqual(prior.days, 28)

    def test_prior_window_keeps_leap_day_when_it_falls_inside(self):
        prior = DateRange(date(2025, 2, 1), date(2025, 3, 1)).previous_year()
        self.assertEqual(prior, DateRange(date(2024, 2, 1), date(2024, 3, 1)))
        self.assertEqual(prior.days, 30)

    def test_leap_day_start_maps_to_feb_28(self):
        prior = DateRange(date(2024, 2, 29), date(2024, 3, 31)).previous_year()
        self.assertEqual(prior, DateRange(date(2023, 2, 28), date(2023, 3, 31)))

    def test_contains(self):
        window = DateRange(date(2025, 4, 15), date(2025, 4, 17))
        self.assertIn(date(2025, 4, 17), window)
        self.assertNotIn(date(2025, 4, 18), window)
