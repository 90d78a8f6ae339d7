"""
Unit tests for years found in free text.
"""
from finna_dates.dates.years import year_span_from_string, year_strings_from_string, years_from_string


class TestYearsFromString:
    """Tests for years_from_string()."""

    def test_plain_years(self):
        assert years_from_string("Kirjeitä 1985-1995") == [1985, 1995]

    def test_negative_years(self):
        assert years_from_string("-2022/-21") == [-2022, -21]
        assert years_from_string("-2020 - 15") == [-2020, 15]

    def test_full_dates_reduce_to_year(self):
        assert years_from_string("2021-05-03") == [2021]
        assert years_from_string("3.5.2021") == [2021]

    def test_year_month_reduces_to_year(self):
        assert years_from_string("2021-05") == [2021]
        assert years_from_string("1950-06/1951") == [1950, 1951]

    def test_two_digit_end_year_is_not_a_month(self):
        assert years_from_string("1800-1801") == [1800, 1801]
        assert years_from_string("1985-95") == [1985, 95]

    def test_no_years(self):
        assert years_from_string("") == []
        assert years_from_string("ajoittamaton") == []

    def test_long_numbers_are_not_years(self):
        assert years_from_string("12345") == []

    def test_year_strings_are_padded(self):
        assert year_strings_from_string("vuonna 4 ja -25") == ["0004", "-0025"]


class TestYearSpan:
    """Tests for year_span_from_string()."""

    def test_min_max(self):
        assert year_span_from_string("1801, 1800, 1850") == (1800, 1850)

    def test_none(self):
        assert year_span_from_string("n.d.") is None
