"""
Tests for the format drivers and the driver registry.

Each driver maps a record's raw date fields onto the output field map;
the registry dispatches by record format and isolates failures.
"""
import pytest

from finna_dates.config import Settings
from finna_dates.drivers import (
    SEARCH_DATERANGE_FIELD,
    DriverRegistry,
    EadDriver,
    Ead3Driver,
    LidoDriver,
    MarcDriver,
    QdcDriver,
)
from finna_dates.drivers.base import BaseDriver
from finna_dates.ir import Record

LRM = "\u200e"


class TestEadDriver:
    """Tests for EadDriver.to_field_map()."""

    def test_unitdate(self, ctx, settings):
        record = Record(record_format="ead", fields={"unitdate": "1920 - 1930"})
        fields = EadDriver(settings).to_field_map(record, ctx, {"title": "Kirjeitä"})
        assert fields[SEARCH_DATERANGE_FIELD] == ["[1920-01-01 TO 1930-12-31]"]
        assert fields["unit_daterange"] == "[1920-01-01 TO 1930-12-31]"
        assert fields["main_date_str"] == "1920"
        assert fields["main_date"] == "1920-01-01T00:00:00Z"
        assert fields["title"] == "Kirjeitä (1920-1930)"

    def test_no_unitdate(self, ctx, settings):
        record = Record(record_format="ead", fields={"unitdate": "-"})
        base = {"title": "Kirjeitä"}
        assert EadDriver(settings).to_field_map(record, ctx, base) == base

    def test_base_fields_not_modified(self, ctx, settings):
        base = {"title": "Kirjeitä"}
        record = Record(record_format="ead", fields={"unitdate": "1920"})
        EadDriver(settings).to_field_map(record, ctx, base)
        assert base == {"title": "Kirjeitä"}


class TestEad3Driver:
    """Tests for Ead3Driver."""

    def test_structured_daterange(self, ctx, settings):
        record = Record(
            record_format="ead3",
            fields={"unitdatestructured": [
                {"daterange": {"fromdate": "1985", "todate": ["1990", "1995"]}},
            ]},
            driver_params={"enrichTitleWithYearRange": "always"},
        )
        fields = Ead3Driver(settings).to_field_map(record, ctx, {"title": "Kirjeitä"})
        assert fields[SEARCH_DATERANGE_FIELD] == ["[1985-01-01 TO 1995-12-31]"]
        assert fields["unit_daterange"] == "[1985-01-01 TO 1995-12-31]"
        assert fields["main_date_str"] == "1985"
        assert fields["era_facet"] == "1985"
        assert fields["main_date"] == "1985-01-01T00:00:00Z"
        assert fields["title"] == f"Kirjeitä{LRM} (1985–1995)"

    def test_datesingle(self, ctx, settings):
        record = Record(record_format="ead3", fields={"unitdatestructured": [{"datesingle": "1931"}]})
        ranges = Ead3Driver(settings).get_date_ranges(record, ctx)
        assert [r.as_pair() for r in ranges] == [("1931-01-01T00:00:00Z", "1931-12-31T23:59:59Z")]

    def test_unitdate_text(self, ctx, settings):
        record = Record(record_format="ead3", fields={"unitdate": [{"text": "1918-1931"}, {"text": "1931"}]})
        ranges = Ead3Driver(settings).get_date_ranges(record, ctx)
        assert [r.as_pair() for r in ranges] == [
            ("1918-01-01T00:00:00Z", "1931-12-31T23:59:59Z"),
            ("1931-01-01T00:00:00Z", "1931-12-31T23:59:59Z"),
        ]

    def test_coverage_label_first(self, ctx, settings):
        record = Record(record_format="ead3", fields={"unitdate": [
            {"text": "1918", "normal": "1918/1918"},
            {"text": "1920-1930", "label": "Ajallinen kattavuus", "normal": "1920/1930"},
        ]})
        ranges = Ead3Driver(settings).get_date_ranges(record, ctx)
        assert ranges[0].start == "1920-01-01T00:00:00Z"
        assert ranges[1].start == "1918-01-01T00:00:00Z"

    def test_structured_dates_win(self, ctx, settings):
        record = Record(record_format="ead3", fields={
            "unitdatestructured": [{"datesingle": "1931"}],
            "unitdate": [{"text": "1918"}],
        })
        ranges = Ead3Driver(settings).get_date_ranges(record, ctx)
        assert len(ranges) == 1

    def test_multiple_ranges(self, ctx, settings):
        record = Record(record_format="ead3", fields={"unitdatestructured": [
            {"datesingle": "1931"},
            {"daterange": {"fromdate": "1940", "todate": ["1945"]}},
        ]})
        fields = Ead3Driver(settings).to_field_map(record, ctx, {})
        assert fields[SEARCH_DATERANGE_FIELD] == ["[1931-01-01 TO 1931-12-31]", "[1940-01-01 TO 1945-12-31]"]
        assert fields["main_date_str"] == "1931"

    def test_title_policy_default(self, settings):
        record = Record(record_format="ead3")
        assert Ead3Driver(settings).title_policy(record) == "no_match_exists"
        record = Record(record_format="ead3", driver_params={"enrichTitleWithYearRange": "Never"})
        assert Ead3Driver(settings).title_policy(record) == "never"

    def test_title_with_year_is_kept(self, ctx, settings):
        record = Record(record_format="ead3", fields={"unitdatestructured": [{"datesingle": "1931"}]})
        fields = Ead3Driver(settings).to_field_map(record, ctx, {"title": "Kirje 1931"})
        assert fields["title"] == "Kirje 1931"


class TestLidoDriver:
    """Tests for LidoDriver."""

    def test_creation_event(self, ctx, settings):
        record = Record(record_format="lido", fields={"events": [
            {"event_type": "Valmistus", "display_date": "1930-luku"},
        ]})
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert fields["creation_daterange"] == "[1930-01-01 TO 1939-12-31]"
        assert fields[SEARCH_DATERANGE_FIELD] == ["[1930-01-01 TO 1939-12-31]"]
        assert fields["main_date_str"] == "1930"
        assert fields["main_date"] == "1930-01-01T00:00:00Z"

    def test_earliest_latest_win(self, ctx, settings):
        events = [
            {"event_type": "valmistus", "display_date": "1930-luku"},
            {"event_type": "valmistus", "earliest": "1935", "latest": "1936"},
        ]
        assert LidoDriver(settings).get_date_range([], ctx, "valmistus") is None
        record = Record(record_format="lido", fields={"events": events})
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert fields["creation_daterange"] == "[1935-01-01 TO 1936-12-31]"

    def test_secondary_events(self, ctx, settings):
        record = Record(record_format="lido", fields={"events": [
            {"event_type": "tuotanto", "display_date": "1950"},
            {"event_type": "suunnittelu", "earliest": "1940", "latest": "1945"},
        ]})
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert fields["design_daterange"] == "[1940-01-01 TO 1945-12-31]"
        assert fields["production_daterange"] == "[1950-01-01 TO 1950-12-31]"
        assert fields[SEARCH_DATERANGE_FIELD] == ["[1940-01-01 TO 1945-12-31]"]
        assert fields["main_date_str"] == "1940"

    def test_use_and_finding(self, ctx, settings):
        record = Record(record_format="lido", fields={"events": [
            {"event_type": "käyttö", "display_date": "1960-luku"},
            {"event_type": "löytyminen", "display_date": "1.6.1975"},
        ]})
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert fields["use_daterange"] == "[1960-01-01 TO 1969-12-31]"
        assert fields["finding_daterange"] == "1975-06-01"
        assert SEARCH_DATERANGE_FIELD not in fields

    def test_subject_dates(self, ctx, settings):
        record = Record(record_format="lido", fields={
            "subject_dates": [{"earliest": "1897", "latest": "1897"}, {"display_date": "keskiaika"}],
            "events": [{"event_type": "valmistus", "display_date": "1930"}],
        })
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert fields[SEARCH_DATERANGE_FIELD] == [
            "[1897-01-01 TO 1897-12-31]",
            "[1300-01-01 TO 1550-12-31]",
            "[1930-01-01 TO 1930-12-31]",
        ]
        assert fields["main_date_str"] == "1897"
        assert fields["creation_daterange"] == "[1930-01-01 TO 1930-12-31]"

    def test_future_display_date(self, ctx, settings):
        record = Record(record_format="lido", fields={"events": [
            {"event_type": "valmistus", "display_date": "2100"},
        ]})
        fields = LidoDriver(settings).to_field_map(record, ctx, {})
        assert "creation_daterange" not in fields


class TestMarcDriver:
    """Tests for MarcDriver."""

    def test_008(self, ctx, settings, marc_008):
        record = Record(record_format="marc", fields={"008": marc_008("s", "2013    ")})
        fields = MarcDriver(settings).to_field_map(record, ctx, {"publishDate": ["2013"]})
        assert fields["publication_daterange"] == "[2013-01-01 TO 2013-12-31]"
        assert fields[SEARCH_DATERANGE_FIELD] == ["[2013-01-01 TO 2013-12-31]"]
        assert fields["main_date_str"] == "2013"
        assert fields["main_date"] == "2013-01-01T00:00:00Z"

    def test_264_publication_statement(self, ctx, settings, marc_008):
        record = Record(record_format="marc", fields={
            "008": marc_008("s", "uuuu    "),
            "264": [
                {"tag": "264", "ind2": "4", "subfields": {"c": ["℗ 1999"]}},
                {"tag": "264", "ind2": "1", "subfields": {"c": ["[vuosien 1931 ja 1943 välillä]"]}},
            ],
        })
        fields = MarcDriver(settings).to_field_map(record, ctx, {})
        assert fields["publication_daterange"] == "[1931-01-01 TO 1943-12-31]"
        assert "main_date_str" not in fields

    def test_260(self, ctx, settings):
        record = Record(record_format="marc", fields={
            "260": [{"tag": "260", "subfields": {"a": ["Helsinki"], "c": ["[1946]"]}}],
        })
        fields = MarcDriver(settings).to_field_map(record, ctx, {})
        assert fields["publication_daterange"] == "[1946-01-01 TO 1946-12-31]"


class TestQdcDriver:
    """Tests for QdcDriver."""

    def test_dates_and_issued(self, ctx, settings):
        record = Record(record_format="qdc", fields={"date": ["1800-1801", "1800 - 1801"], "issued": "2021-05-03"})
        fields = QdcDriver(settings).to_field_map(record, ctx, {"publishDate": ["1800"]})
        assert fields["publication_daterange"] == "[1800-01-01 TO 1801-12-31]"
        assert fields[SEARCH_DATERANGE_FIELD] == [
            "[1800-01-01 TO 1801-12-31]",
            "[2021-01-01 TO 2021-12-31]",
        ]
        assert fields["main_date_str"] == "1800"
        assert fields["main_date"] == "1800-01-01T00:00:00Z"

    def test_record_format_name(self, settings):
        assert QdcDriver(settings, "lrmi").record_format == "lrmi"
        assert QdcDriver(settings).record_format == "qdc"


class BrokenDriver(BaseDriver):
    record_format = "broken"

    def parse_date_range(self, raw, ctx=None):
        raise ValueError("broken parser")

    def to_field_map(self, record, ctx, base_fields=None):
        raise ValueError("broken mapping")


class TestDriverRegistry:
    """Tests for DriverRegistry."""

    def test_default_formats(self, settings):
        registry = DriverRegistry(settings)
        assert registry.formats() == ["aipa", "ead", "ead3", "lido", "lrmi", "marc", "qdc"]
        assert isinstance(registry.get("EAD3"), Ead3Driver)
        assert registry.get("aipa").record_format == "aipa"

    def test_parse_date_range(self, ctx, settings):
        registry = DriverRegistry(settings)
        assert registry.parse_date_range("lido", "1930-luku", ctx).start == "1930-01-01T00:00:00Z"
        assert registry.parse_date_range("ead3", "1985/1995", ctx).end == "1995-12-31T23:59:59Z"

    def test_unknown_format(self, ctx, settings):
        registry = DriverRegistry(settings)
        assert registry.parse_date_range("dc", "1930", ctx) is None
        record = Record(record_format="dc", fields={"date": "1930"})
        assert registry.to_field_map(record, {"title": "x"}) == {"title": "x"}

    def test_to_field_map(self, settings, sink):
        registry = DriverRegistry(settings)
        record = Record(source="src", record_id="1", record_format="ead", fields={"unitdate": "1935-1920"})
        fields = registry.to_field_map(record, {}, sink)
        assert fields["unit_daterange"] == "[1935-01-01 TO 1935-12-31]"
        assert sink.warnings[0].source == "src"
        assert sink.warnings[0].record_id == "1"
        assert sink.kinds() == ["invalid date range"]

    def test_failure_is_isolated(self, settings, sink):
        registry = DriverRegistry(settings)
        registry.register("broken", BrokenDriver)
        record = Record(record_format="broken")
        base = {"title": "Kirjeitä"}
        assert registry.to_field_map(record, base, sink) == base
        assert sink.kinds() == ["date mapping failed"]

    def test_current_year_setting(self, sink):
        registry = DriverRegistry(Settings(CURRENT_YEAR=1950))
        record = Record(record_format="lido", fields={"events": [
            {"event_type": "valmistus", "display_date": "1960"},
        ]})
        assert "creation_daterange" not in registry.to_field_map(record, {}, sink)
