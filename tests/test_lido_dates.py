"""
Unit tests for LIDO display date parsing.

Covers Finnish decade/century shorthand, BCE ranges, named eras, the
future-date guard and earliest/latest completion.
"""
import pytest

from finna_dates.dates import lido
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.dates.rules import match_rule, rule_names


class TestLidoDisplayDates:
    """Tests for lido.parse_date_range() on free text."""

    @pytest.mark.parametrize("raw,expected", [
        ("1930-luku", "[1930-01-01 TO 1939-12-31]"),
        ("1930-luvulta", "[1930-01-01 TO 1939-12-31]"),
        ("1930-luku alkupuoli", "[1930-01-01 TO 1933-12-31]"),
        ("1930-luvun puoliväli", "[1933-01-01 TO 1937-12-31]"),
        ("1930-luvun loppupuoli", "[1937-01-01 TO 1939-12-31]"),
        ("1800-luvun alkupuoli", "[1800-01-01 TO 1829-12-31]"),
        ("1800-luvun loppu", "[1870-01-01 TO 1899-12-31]"),
        ("1900-luku", "[1900-01-01 TO 1999-12-31]"),
        ("1940-1960-luku", "[1940-01-01 TO 1969-12-31]"),
        ("30-40-luku", "[1930-01-01 TO 1949-12-31]"),
        ("1920-1930-luvun loppupuoli", "[1920-01-01 TO 1939-12-31]"),
        ("1980-1999", "[1980-01-01 TO 1999-12-31]"),
        ("1930 jälkeen", "[1930-01-01 TO 1939-12-31]"),
        ("1930", "[1930-01-01 TO 1930-12-31]"),
        ("30", "[1930-01-01 TO 1930-12-31]"),
        ("1930?", "[1930-01-01 TO 1930-12-31]"),
        ("1930, 1940", "[1930-01-01 TO 1930-12-31]"),
        ("vuosien 1931 ja 1943 välillä", "[1931-01-01 TO 1943-12-31]"),
    ])
    def test_year_ranges(self, ctx, raw, expected):
        assert date_range_to_str(lido.parse_date_range(raw, ctx)) == expected
        assert ctx.sink.warnings == []

    @pytest.mark.parametrize("raw,expected", [
        ("12.5.1930", "1930-05-12"),
        ("5.1930", "[1930-05-01 TO 1930-05-31]"),
        ("1.1.1930 - 31.12.1935", "[1930-01-01 TO 1935-12-31]"),
        ("1930 kesäkuu", "[1930-06-01 TO 1930-06-30]"),
        ("193006", "[1930-06-01 TO 1930-06-30]"),
        ("1930-05-12", "1930-05-12"),
    ])
    def test_dates(self, ctx, raw, expected):
        assert date_range_to_str(lido.parse_date_range(raw, ctx)) == expected

    def test_case_and_whitespace(self, ctx):
        result = lido.parse_date_range("  1930-LUKU ", ctx)
        assert date_range_to_str(result) == "[1930-01-01 TO 1939-12-31]"


class TestLidoBceAndEras:
    """Tests for BCE years and named eras."""

    def test_bce_to_ce(self, ctx):
        result = lido.parse_date_range("150 ekr - 100 jkr", ctx)
        assert result.as_pair() == ("-0150-01-01T00:00:00Z", "0100-12-31T23:59:59Z")

    def test_bce_to_bce(self, ctx):
        result = lido.parse_date_range("100 ekr - 50 ekr", ctx)
        assert result.as_pair() == ("-0100-01-01T00:00:00Z", "-0050-12-31T23:59:59Z")
        assert ctx.sink.warnings == []

    def test_negative_year(self, ctx):
        result = lido.parse_date_range("-500", ctx)
        assert result.as_pair() == ("-0500-01-01T00:00:00Z", "-0500-12-31T23:59:59Z")

    def test_eras(self, ctx):
        assert lido.parse_date_range("Kivikausi", ctx).as_pair() == (
            "-8600-01-01T00:00:00Z", "-1501-12-31T23:59:59Z")
        assert lido.parse_date_range("keskiaika", ctx).as_pair() == (
            "1300-01-01T00:00:00Z", "1550-12-31T23:59:59Z")

    def test_undated(self, ctx):
        assert lido.parse_date_range("ajoittamaton", ctx) is None
        assert lido.parse_date_range("tuntematon", ctx) is None
        assert ctx.sink.warnings == []


class TestLidoInvalidValues:
    """Tests for rejected and repaired values."""

    def test_future_year_is_dropped(self, ctx):
        assert lido.parse_date_range("2100", ctx) is None
        assert lido.parse_date_range("1990-2100", ctx) is None
        assert ctx.sink.warnings == []

    def test_inverted_range(self, ctx):
        result = lido.parse_date_range("2013-1943", ctx)
        assert result.as_pair() == ("2013-01-01T00:00:00Z", "2013-12-31T23:59:59Z")
        assert ctx.sink.kinds() == ["invalid date range"]

    def test_invalid_month(self, ctx):
        assert lido.parse_date_range("13.1930", ctx) is None
        assert ctx.sink.kinds() == ["invalid end date"]

    def test_invalid_day(self, ctx):
        assert lido.parse_date_range("31.2.1930", ctx) is None
        assert ctx.sink.kinds() == ["invalid date range"]

    def test_invalid_end_repaired(self, ctx):
        result = lido.parse_date_range("1.1.1930 - 31.2.1931", ctx)
        assert result.as_pair() == ("1930-01-01T00:00:00Z", "1930-12-31T23:59:59Z")
        assert ctx.sink.kinds() == ["invalid date range"]

    def test_no_date(self, ctx):
        assert lido.parse_date_range("", ctx) is None
        assert lido.parse_date_range("ei tiedossa", ctx) is None


class TestLidoRuleOrder:
    """The rule table is tried in order."""

    def test_decade_shorthand_before_plain_year(self):
        names = rule_names(lido.LIDO_RULES)
        assert names.index("early_decade") < names.index("decade") < names.index("year")
        assert names.index("years_to_late_decade") < names.index("year_to_year")
        assert names[-1] == "year"

    def test_matching_rules(self):
        assert match_rule(lido.LIDO_RULES, "1930-luku alkupuoli").name == "early_decade"
        assert match_rule(lido.LIDO_RULES, "1920-1930-luvun loppupuoli").name == "years_to_late_decade"
        assert match_rule(lido.LIDO_RULES, "150 ekr - 100 jkr").name == "bce_to_ce"


class TestResolveDateValues:
    """Tests for earliest/latest completion and fallbacks."""

    def test_earliest_latest(self, ctx):
        result = lido.resolve_date_values("1897", "1897", None, None, ctx)
        assert result.as_pair() == ("1897-01-01T00:00:00Z", "1897-12-31T23:59:59Z")

    def test_partial_dates(self, ctx):
        result = lido.resolve_date_values("1930-05", "1931-02", None, None, ctx)
        assert result.as_pair() == ("1930-05-01T00:00:00Z", "1931-02-28T23:59:59Z")

    def test_inverted_earliest_latest(self, ctx):
        result = lido.resolve_date_values("1950", "1940", None, None, ctx)
        assert result.as_pair() == ("1950-01-01T00:00:00Z", "1950-12-31T23:59:59Z")
        assert ctx.sink.kinds() == ["invalid date range"]

    def test_invalid_earliest(self, ctx):
        assert lido.resolve_date_values("noin 1950", "1960", "1950-luku", None, ctx) is None
        assert "invalid date" in ctx.sink.kinds()

    def test_display_date_fallback(self, ctx):
        result = lido.resolve_date_values(None, None, "1930-luku", "1800-luku", ctx)
        assert date_range_to_str(result) == "[1930-01-01 TO 1939-12-31]"

    def test_period_name_fallback(self, ctx):
        result = lido.resolve_date_values(None, None, None, "keskiaika", ctx)
        assert result.start == "1300-01-01T00:00:00Z"

    def test_nothing(self, ctx):
        assert lido.resolve_date_values(None, None, None, None, ctx) is None
