"""
Unit tests for opportunity_radar.normalize.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from opportunity_radar.normalize import build_opportunity, normalize_compensation, parse_deadline

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def raw(**overrides):
    data = {
        "title": "  Web Developer for Local Food Bank ",
        "description": "Modernize the website.",
        "organization": "Community Food Bank",
        "category": "nonprofit",
        "location": "Local Community",
        "isRemote": True,
        "compensation": "unpaid",
    }
    data.update(overrides)
    return data


class TestNormalizeCompensation:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("paid", "paid"),
            ("Academic Credit", "academic-credit"),
            ("academic_credit", "academic-credit"),
            ("Volunteer", "unpaid"),
            ("hourly", "paid"),
            ("equity", "unspecified"),
            (None, "unspecified"),
            (1500, "unspecified"),
        ],
    )
    def test_maps_onto_closed_set(self, value, expected):
        assert normalize_compensation(value) == expected


class TestParseDeadline:
    def test_relative_offset(self):
        assert parse_deadline(offset_days=30, now=NOW) == NOW + timedelta(days=30)

    def test_iso_string_with_z(self):
        assert parse_deadline("2026-03-01T00:00:00Z") == datetime(2026, 3, 1, tzinfo=timezone.utc)

    def test_naive_values_become_utc(self):
        assert parse_deadline(datetime(2026, 3, 1)).tzinfo == timezone.utc
        assert parse_deadline("2026-03-01").tzinfo == timezone.utc

    def test_unparseable_is_none(self):
        assert parse_deadline("next spring") is None
        assert parse_deadline("") is None
        assert parse_deadline(None) is None

    def test_explicit_value_beats_offset(self):
        explicit = datetime(2026, 5, 1, tzinfo=timezone.utc)
        assert parse_deadline(explicit, offset_days=3, now=NOW) == explicit


class TestBuildOpportunity:
    def test_strips_and_attributes_source(self):
        """Should strip strings and fall back to the given source label."""
        opp = build_opportunity(raw(), source="nonprofit-api", now=NOW)
        assert opp.title == "Web Developer for Local Food Bank"
        assert opp.source == "nonprofit-api"

    def test_payload_source_wins(self):
        opp = build_opportunity(raw(source="codeforamerica"), source="nonprofit-api")
        assert opp.source == "codeforamerica"

    def test_legacy_compensation_becomes_unspecified(self):
        assert build_opportunity(raw(compensation="equity"), source="s").compensation == "unspecified"

    def test_dedupes_list_fields_preserving_order(self):
        opp = build_opportunity(raw(tags=["Volunteer", "web", "volunteer", " "], skills="HTML"), source="s")
        assert opp.tags == ("Volunteer", "web")
        assert opp.skills == ("HTML",)

    def test_relative_deadline(self):
        opp = build_opportunity(raw(deadlineDays=10), source="s", now=NOW)
        assert opp.deadline == NOW + timedelta(days=10)

    def test_remote_without_location_is_labelled_remote(self):
        opp = build_opportunity(raw(location=None), source="s")
        assert opp.location == "Remote"

    def test_on_site_without_location_stays_empty(self):
        opp = build_opportunity(raw(location=None, isRemote=False), source="s")
        assert opp.location is None

    def test_ignores_unknown_keys(self):
        opp = build_opportunity(raw(externalId="cfa-001"), source="s")
        assert not hasattr(opp, "externalId")

    def test_missing_required_field_raises(self):
        data = raw()
        del data["organization"]
        with pytest.raises(ValidationError):
            build_opportunity(data, source="s")
