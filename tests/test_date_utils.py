import sys
import os
import unittest
from unittest.mock import patch
from datetime import datetime, date

# Add the parent directory to sys.path to import the togglpy package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from togglpy.errors import ParseError
from togglpy.utils.date_utils import parse_human_date, resolve_date_range, day_str

class TestParseHumanDate(unittest.TestCase):
    """Test natural-language date parsing."""

    def setUp(self):
        self.now = datetime(2024, 3, 10, 12, 30)

    def test_relative_expressions(self):
        test_cases = [
            ("today", date(2024, 3, 10)),
            ("yesterday", date(2024, 3, 9)),
            ("3 days ago", date(2024, 3, 7)),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(parse_human_date(text, now=self.now), expected)

    def test_explicit_dates_are_day_first(self):
        test_cases = [
            ("25/12/2023", date(2023, 12, 25)),
            ("05/03/2024", date(2024, 3, 5)),
            ("5 March 2024", date(2024, 3, 5)),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(parse_human_date(text, now=self.now), expected)

    def test_year_first_dates_are_iso(self):
        test_cases = [
            ("2024-03-05", date(2024, 3, 5)),
            ("2023-12-25", date(2023, 12, 25)),
            (" 2024/03/05 ", date(2024, 3, 5)),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(parse_human_date(text, now=self.now), expected)

    def test_next_and_last_weekday(self):
        # self.now is a Sunday
        test_cases = [
            ("next friday", date(2024, 3, 15)),
            ("Next Sunday", date(2024, 3, 17)),
            ("last friday", date(2024, 3, 8)),
            ("last sunday", date(2024, 3, 3)),
            ("next monday", date(2024, 3, 11)),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(parse_human_date(text, now=self.now), expected)

    def test_time_of_day_is_discarded(self):
        result = parse_human_date("yesterday", now=self.now)
        self.assertIsInstance(result, date)
        self.assertNotIsInstance(result, datetime)

    def test_unrecognised_text(self):
        for text in ("xyzzy plugh", "", "   ", "10", "2024", "march", "Mar"):
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    parse_human_date(text, now=self.now)

    @patch('togglpy.utils.date_utils.dateparser.parse', return_value=None)
    def test_parser_failure_becomes_parse_error(self, mock_parse):
        with self.assertRaises(ParseError):
            parse_human_date("someday")
        mock_parse.assert_called_once()

class TestResolveDateRange(unittest.TestCase):
    """Test defaulting of the summary date range."""

    def test_defaults_to_today(self):
        start, end = resolve_date_range(today=date(2024, 3, 10))
        self.assertEqual(start, date(2024, 3, 10))
        self.assertEqual(end, date(2024, 3, 11))

    def test_end_defaults_to_day_after_start(self):
        start, end = resolve_date_range(date(2023, 12, 31), today=date(2024, 3, 10))
        self.assertEqual((start, end), (date(2023, 12, 31), date(2024, 1, 1)))

    def test_explicit_range_is_kept(self):
        start, end = resolve_date_range(date(2024, 3, 1), date(2024, 3, 8))
        self.assertEqual((start, end), (date(2024, 3, 1), date(2024, 3, 8)))

    def test_uses_local_today(self):
        start, end = resolve_date_range()
        self.assertEqual(start, date.today())
        self.assertEqual((end - start).days, 1)

    def test_day_str(self):
        self.assertEqual(day_str(date(2024, 3, 5)), "(Tue)2024-03-05")

if __name__ == '__main__':
    unittest.main()
