"""
Tests for RawRecord → Sample normalization.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from worstcase.engine.normalizer import (
    normalize_record,
    normalize_records,
    resolve_reference_year,
)
from worstcase.errors import ConfigurationError, MalformedRecordError
from worstcase.models.samples import RawRecord


def _record(**overrides) -> RawRecord:
    fields = dict(
        year="2019", month="3", day="14", hour="15", minute="30",
        ghi="612", temperature="21.5", source="site_2019.csv", row_number=42,
    )
    fields.update(overrides)
    return RawRecord(**fields)


class TestNormalizeRecord:
    def test_valid_row(self):
        s = normalize_record(_record())
        assert s.timestamp == datetime(2019, 3, 14, 15, 30, tzinfo=timezone.utc)
        assert s.irradiance == 612
        assert s.temperature == pytest.approx(21.5)

    def test_timestamp_is_utc(self):
        s = normalize_record(_record())
        assert s.timestamp.tzinfo == timezone.utc

    def test_whole_number_ghi_with_decimal_point(self):
        assert normalize_record(_record(ghi="0.0")).irradiance == 0

    def test_negative_temperature(self):
        assert normalize_record(_record(temperature="-31.2")).temperature == pytest.approx(-31.2)

    def test_sample_is_immutable(self):
        s = normalize_record(_record())
        with pytest.raises(ValidationError):
            s.irradiance = 1


class TestIgnoreStatedYear:
    def test_reference_year_replaces_stated_year(self):
        s = normalize_record(_record(year="1998"), ignore_stated_year=True, reference_year=2024)
        assert s.timestamp == datetime(2024, 3, 14, 15, 30, tzinfo=timezone.utc)

    def test_stated_year_not_parsed_when_ignored(self):
        s = normalize_record(_record(year="n/a"), ignore_stated_year=True, reference_year=2024)
        assert s.timestamp.year == 2024

    def test_defaults_to_current_year(self):
        s = normalize_record(_record(year="1998"), ignore_stated_year=True)
        assert s.timestamp.year == datetime.now(tz=timezone.utc).year

    def test_leap_day_onto_non_leap_year(self):
        with pytest.raises(MalformedRecordError, match="invalid date"):
            normalize_record(
                _record(year="2020", month="2", day="29"),
                ignore_stated_year=True,
                reference_year=2023,
            )

    def test_resolve_reference_year(self):
        assert resolve_reference_year(2001) == 2001
        assert resolve_reference_year() == datetime.now(tz=timezone.utc).year


class TestMalformedRecords:
    def test_invalid_calendar_date(self):
        with pytest.raises(MalformedRecordError, match="invalid date"):
            normalize_record(_record(month="2", day="30"))

    def test_invalid_hour(self):
        with pytest.raises(MalformedRecordError):
            normalize_record(_record(hour="24"))

    def test_non_numeric_ghi(self):
        with pytest.raises(MalformedRecordError, match="GHI is not numeric"):
            normalize_record(_record(ghi="abc"))

    def test_fractional_ghi(self):
        with pytest.raises(MalformedRecordError, match="whole number"):
            normalize_record(_record(ghi="12.5"))

    def test_negative_ghi(self):
        with pytest.raises(MalformedRecordError, match="non-negative"):
            normalize_record(_record(ghi="-1"))

    def test_non_numeric_temperature(self):
        with pytest.raises(MalformedRecordError, match="Temperature is not numeric"):
            normalize_record(_record(temperature=""))

    def test_nan_temperature(self):
        with pytest.raises(MalformedRecordError, match="finite"):
            normalize_record(_record(temperature="nan"))

    def test_non_integer_month(self):
        with pytest.raises(MalformedRecordError, match="month is not an integer"):
            normalize_record(_record(month="March"))

    def test_error_locates_record(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            normalize_record(_record(ghi="x"))
        err = exc_info.value
        assert err.source == "site_2019.csv"
        assert err.row_number == 42
        assert "site_2019.csv, row 42" in str(err)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            normalize_record(_record(ghi="x"))


class TestNormalizeRecords:
    def test_maps_every_row(self):
        samples = normalize_records([_record(hour=str(h)) for h in range(5)])
        assert [s.timestamp.hour for s in samples] == [0, 1, 2, 3, 4]

    def test_single_reference_year_for_all_rows(self):
        records = [_record(year="2001"), _record(year="2017", day="15")]
        samples = normalize_records(records, ignore_stated_year=True, reference_year=2010)
        assert {s.timestamp.year for s in samples} == {2010}

    def test_reference_year_out_of_range(self):
        with pytest.raises(ConfigurationError, match="reference_year"):
            resolve_reference_year(0)
        with pytest.raises(ConfigurationError):
            resolve_reference_year(10000)
