"""Parse a report payload into a :class:`Report`, and serialize it back."""

from __future__ import annotations

from composer_outdated.models import Package, Report
from composer_outdated.raw import RawPackageEntry, RawReport, load_raw
from composer_outdated.transformer import to_report


def parse_report(payload: str | bytes | bytearray) -> Report:
    """Parse ``composer outdated --format=json`` output.

    Returns a complete :class:`Report` or raises a single
    :class:`~composer_outdated.exceptions.ComposerOutdatedError`; no partial
    result is ever produced.
    """
    return to_report(load_raw(payload))


def _to_raw_entry(package: Package) -> RawPackageEntry:
    return RawPackageEntry.model_validate(
        {
            "name": package.name.full,
            "version": package.installed_version,
            "latest": package.latest_version,
            "latest-status": package.status.value,
            "description": package.description,
            "warning": package.warning,
        }
    )


def to_raw(report: Report) -> RawReport:
    """Map a :class:`Report` back onto the wire shape.

    ``latest-status`` is always written out, so re-parsing never has to fall
    back to comparing versions.
    """
    return RawReport(
        installed=[_to_raw_entry(p) for p in report.installed],
        locked=[_to_raw_entry(p) for p in report.locked],
    )


def dump_report(report: Report, indent: int | None = None) -> str:
    """Serialize *report* as composer-style JSON text."""
    return to_raw(report).model_dump_json(by_alias=True, exclude_none=True, indent=indent)
