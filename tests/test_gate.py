"""Tests for report filtering and the CI update indication."""

from __future__ import annotations

from composer_outdated import parse_report
from composer_outdated.gate import (
    IndicatedUpdateRequirement,
    filter_status,
    indicated_requirement,
    without_packages,
)
from composer_outdated.models import Report, StatusKind


class TestWithoutPackages:
    def test_drops_from_both_sections(self, sample_payload):
        report = without_packages(parse_report(sample_payload), ["acme/widget"])
        assert [p.name.full for p in report.installed] == ["acme/gadget", "legacy/thing"]
        assert report.locked == ()

    def test_case_insensitive(self, sample_payload):
        report = without_packages(parse_report(sample_payload), ["Legacy/Thing"])
        assert "legacy/thing" not in [p.name.full for p in report.packages]

    def test_no_names_returns_same_report(self, sample_payload):
        report = parse_report(sample_payload)
        assert without_packages(report, []) is report


class TestFilterStatus:
    def test_keeps_selected_kinds_in_order(self, sample_payload):
        report = filter_status(
            parse_report(sample_payload),
            [StatusKind.UPDATE_POSSIBLE, StatusKind.SEMVER_SAFE_UPDATE],
        )
        assert [p.name.full for p in report.installed] == ["acme/gadget", "legacy/thing"]
        assert report.locked == ()

    def test_unknown_kind(self):
        report = parse_report(
            '{"installed":[{"name":"a/b","latest-status":"later"},{"name":"c/d"}]}'
        )
        kept = filter_status(report, [StatusKind.UNKNOWN])
        assert [p.name.full for p in kept.installed] == ["a/b"]


class TestIndicatedRequirement:
    def test_empty_report(self):
        assert indicated_requirement(Report()) is IndicatedUpdateRequirement.UP_TO_DATE

    def test_up_to_date(self, up_to_date_payload):
        report = parse_report(up_to_date_payload)
        assert indicated_requirement(report) is IndicatedUpdateRequirement.UP_TO_DATE

    def test_update_required(self, sample_payload):
        report = parse_report(sample_payload)
        assert indicated_requirement(report) is IndicatedUpdateRequirement.UPDATE_REQUIRED

    def test_unknown_counts_by_default(self):
        report = parse_report('{"locked":[{"name":"a/b","latest-status":"later"}]}')
        assert indicated_requirement(report) is IndicatedUpdateRequirement.UPDATE_REQUIRED

    def test_fail_on_subset(self):
        report = parse_report(
            '{"installed":[{"name":"a/b","version":"1.0","latest":"1.1",'
            '"latest-status":"semver-safe-update"}]}'
        )
        assert (
            indicated_requirement(report, [StatusKind.UPDATE_POSSIBLE])
            is IndicatedUpdateRequirement.UP_TO_DATE
        )
        assert (
            indicated_requirement(report, [StatusKind.SEMVER_SAFE_UPDATE])
            is IndicatedUpdateRequirement.UPDATE_REQUIRED
        )

    def test_str(self):
        assert str(IndicatedUpdateRequirement.UPDATE_REQUIRED) == "update-required"
