"""Raw report -> domain report: name validation and status classification."""

from __future__ import annotations

from composer_outdated.exceptions import InvalidPackageNameError
from composer_outdated.models import Package, PackageName, Report, UpdateStatus
from composer_outdated.raw import RawPackageEntry, RawReport


def classify_status(entry: RawPackageEntry) -> UpdateStatus:
    """Classify an entry's update status.

    An explicit ``latest-status`` always wins, recognized or not. Without
    it, older composer output is handled by comparing ``latest`` with
    ``version``: a differing latest release means an update is possible.
    """
    if entry.latest_status is not None:
        return UpdateStatus.from_wire(entry.latest_status)
    if entry.latest is not None and entry.latest != entry.version:
        return UpdateStatus.update_possible()
    return UpdateStatus.up_to_date()


def to_package(entry: RawPackageEntry, location: str = "entry") -> Package:
    """Convert one raw entry; *location* only feeds the error message."""
    if not entry.name.strip():
        raise InvalidPackageNameError(f"{location}: name is empty")

    return Package(
        name=PackageName.parse(entry.name),
        installed_version=entry.version or "",
        latest_version=entry.latest,
        status=classify_status(entry),
        description=entry.description,
        warning=entry.warning,
    )


def _convert_section(section: str, entries: list[RawPackageEntry] | None) -> tuple[Package, ...]:
    # Absent and empty sections are the same thing in the domain model.
    if not entries:
        return ()
    return tuple(
        to_package(entry, f"{section}.{index}") for index, entry in enumerate(entries)
    )


def to_report(raw: RawReport) -> Report:
    """Build the domain :class:`Report` from a :class:`RawReport`.

    Raises :class:`InvalidPackageNameError` for blank names.
    """
    return Report(
        installed=_convert_section("installed", raw.installed),
        locked=_convert_section("locked", raw.locked),
    )
