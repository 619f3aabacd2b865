"""Report filtering and the CI update indication."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from enum import Enum

from composer_outdated.models import Package, Report, StatusKind


class IndicatedUpdateRequirement(Enum):
    """What a report says about required updates, as a CI gate sees it."""

    UP_TO_DATE = "up-to-date"
    UPDATE_REQUIRED = "update-required"

    def __str__(self) -> str:
        return self.value


def _filter(report: Report, keep: Callable[[Package], bool]) -> Report:
    return replace(
        report,
        installed=tuple(p for p in report.installed if keep(p)),
        locked=tuple(p for p in report.locked if keep(p)),
    )


def without_packages(report: Report, names: Iterable[str]) -> Report:
    """Drop packages whose name matches one of *names* (case-insensitive)."""
    ignored = {n.strip().lower() for n in names}
    if not ignored:
        return report
    return _filter(report, lambda p: p.name.full.lower() not in ignored)


def filter_status(report: Report, kinds: Iterable[StatusKind]) -> Report:
    """Keep only packages whose status kind is one of *kinds*."""
    wanted = set(kinds)
    return _filter(report, lambda p: p.status.kind in wanted)


def _fails(package: Package, fail_on: set[StatusKind] | None) -> bool:
    if fail_on is None:
        return package.status.requires_update
    return package.status.kind in fail_on


def indicated_requirement(
    report: Report, fail_on: Iterable[StatusKind] | None = None
) -> IndicatedUpdateRequirement:
    """Decide whether *report* indicates that updates are required.

    By default any status other than up-to-date (unknown included) counts.
    With *fail_on*, only the listed kinds do.
    """
    kinds = set(fail_on) if fail_on is not None else None
    if any(_fails(p, kinds) for p in report.packages):
        return IndicatedUpdateRequirement.UPDATE_REQUIRED
    return IndicatedUpdateRequirement.UP_TO_DATE
