"""Typed parser for the JSON output of ``composer outdated``."""

from composer_outdated.exceptions import (
    ComposerOutdatedError,
    InvalidPackageNameError,
    MalformedJsonError,
)
from composer_outdated.gate import (
    IndicatedUpdateRequirement,
    filter_status,
    indicated_requirement,
    without_packages,
)
from composer_outdated.models import Package, PackageName, Report, StatusKind, UpdateStatus
from composer_outdated.parser import dump_report, parse_report, to_raw
from composer_outdated.raw import RawPackageEntry, RawReport, load_raw
from composer_outdated.transformer import classify_status, to_report

__all__ = [
    "ComposerOutdatedError",
    "IndicatedUpdateRequirement",
    "InvalidPackageNameError",
    "MalformedJsonError",
    "Package",
    "PackageName",
    "RawPackageEntry",
    "RawReport",
    "Report",
    "StatusKind",
    "UpdateStatus",
    "classify_status",
    "dump_report",
    "filter_status",
    "indicated_requirement",
    "load_raw",
    "parse_report",
    "to_raw",
    "to_report",
    "without_packages",
]
