"""Domain model for a parsed composer outdated report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StatusKind(Enum):
    """How far an installed package lags behind its latest release."""

    UP_TO_DATE = "up-to-date"
    SEMVER_SAFE_UPDATE = "semver-safe-update"
    UPDATE_POSSIBLE = "update-possible"
    UNKNOWN = "unknown"


_KNOWN_KINDS: dict[str, StatusKind] = {
    kind.value: kind for kind in StatusKind if kind is not StatusKind.UNKNOWN
}

_SEVERITY: dict[StatusKind, int] = {
    StatusKind.UP_TO_DATE: 0,
    StatusKind.SEMVER_SAFE_UPDATE: 1,
    StatusKind.UPDATE_POSSIBLE: 2,
}


@dataclass(frozen=True)
class UpdateStatus:
    """Classified ``latest-status`` of a package.

    ``value`` is the wire string. For ``StatusKind.UNKNOWN`` it is the
    unrecognized string exactly as composer reported it, so two unknown
    statuses compare equal only when their strings match.
    """

    kind: StatusKind
    value: str

    @classmethod
    def from_wire(cls, value: str) -> UpdateStatus:
        kind = _KNOWN_KINDS.get(value)
        if kind is None:
            return cls.unknown(value)
        return cls(kind, value)

    @classmethod
    def up_to_date(cls) -> UpdateStatus:
        return cls(StatusKind.UP_TO_DATE, StatusKind.UP_TO_DATE.value)

    @classmethod
    def semver_safe_update(cls) -> UpdateStatus:
        return cls(StatusKind.SEMVER_SAFE_UPDATE, StatusKind.SEMVER_SAFE_UPDATE.value)

    @classmethod
    def update_possible(cls) -> UpdateStatus:
        return cls(StatusKind.UPDATE_POSSIBLE, StatusKind.UPDATE_POSSIBLE.value)

    @classmethod
    def unknown(cls, value: str) -> UpdateStatus:
        return cls(StatusKind.UNKNOWN, value)

    @property
    def is_unknown(self) -> bool:
        return self.kind is StatusKind.UNKNOWN

    @property
    def requires_update(self) -> bool:
        """Unknown statuses count as requiring an update."""
        return self.kind is not StatusKind.UP_TO_DATE

    @property
    def severity(self) -> int | None:
        """0 for up-to-date up to 2 for update-possible; None when unknown."""
        return _SEVERITY.get(self.kind)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PackageName:
    """A package name, split into vendor and project when it has that form."""

    full: str
    vendor: str | None = None
    project: str | None = None

    @classmethod
    def parse(cls, name: str) -> PackageName:
        """Split ``vendor/package``; anything else is kept as an opaque name."""
        full = name.strip()
        vendor, sep, project = full.partition("/")
        if sep and vendor and project and "/" not in project:
            return cls(full, vendor, project)
        return cls(full)

    @property
    def is_qualified(self) -> bool:
        return self.vendor is not None

    def __str__(self) -> str:
        return self.full


@dataclass(frozen=True)
class Package:
    """A single validated entry of the report."""

    name: PackageName
    installed_version: str
    latest_version: str | None
    status: UpdateStatus
    description: str | None = None
    warning: str | None = None  # e.g. abandonment notice

    @property
    def is_abandoned(self) -> bool:
        return self.warning is not None


@dataclass(frozen=True)
class Report:
    """Parsed report. Both sections keep the order of the source document."""

    installed: tuple[Package, ...] = field(default_factory=tuple)
    locked: tuple[Package, ...] = field(default_factory=tuple)

    @property
    def packages(self) -> tuple[Package, ...]:
        return self.installed + self.locked

    def outdated(self) -> tuple[Package, ...]:
        """Packages from both sections whose status requires an update."""
        return tuple(p for p in self.packages if p.status.requires_update)
