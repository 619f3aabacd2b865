"""CLI entry point: composer-outdated.

Subcommands:
    composer outdated --format=json | composer-outdated report
    composer-outdated report outdated.json --ignore vendor/pkg
    composer-outdated report outdated.json --json --status update-possible
    composer-outdated report outdated.json --fail-on update-possible   # CI gate
"""

from __future__ import annotations

import sys

import click
import structlog

from composer_outdated.core.logging import setup_logging
from composer_outdated.exceptions import ComposerOutdatedError
from composer_outdated.gate import (
    IndicatedUpdateRequirement,
    filter_status,
    indicated_requirement,
    without_packages,
)
from composer_outdated.models import Package, Report, StatusKind
from composer_outdated.parser import dump_report, parse_report

log = structlog.get_logger("composer_outdated.cli")

EXIT_UPDATE_REQUIRED = 1
EXIT_BAD_REPORT = 2

_STATUS_CHOICES = [kind.value for kind in StatusKind]


def _kinds(values: tuple[str, ...]) -> list[StatusKind]:
    return [StatusKind(v) for v in values]


def _format_package(package: Package) -> list[str]:
    latest = package.latest_version or "-"
    lines = [
        f"  {package.name} {package.installed_version or '?'} -> {latest} [{package.status}]"
    ]
    if package.warning:
        lines.append(f"    ! {package.warning}")
    return lines


def render_text(report: Report) -> str:
    """Render *report* as a plain text listing grouped by section."""
    total = len(report.packages)
    if total == 0:
        return "No packages reported."

    lines = [f"{total} package(s), {len(report.outdated())} with updates"]
    for section, packages in (("installed", report.installed), ("locked", report.locked)):
        if not packages:
            continue
        lines.append("")
        lines.append(f"{section}:")
        for package in packages:
            lines.extend(_format_package(package))
    return "\n".join(lines)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log renderer (default: $COMPOSER_OUTDATED_LOG_FORMAT or console)",
)
def main(verbose: bool, log_format: str | None) -> None:
    """Inspect the JSON output of composer outdated."""
    setup_logging(level="DEBUG" if verbose else None, fmt=log_format)


@main.command("report")
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "-i",
    "--ignore",
    "ignored",
    multiple=True,
    metavar="PACKAGE_NAME",
    help="Dependencies that should be ignored",
)
@click.option(
    "--status",
    "statuses",
    multiple=True,
    type=click.Choice(_STATUS_CHOICES),
    help="Only show packages with this status (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--fail-on",
    "fail_on",
    multiple=True,
    type=click.Choice(_STATUS_CHOICES),
    help="Exit 1 when a package has this status (repeatable)",
)
@click.option("--strict", is_flag=True, help="Exit 1 when any package needs an update")
def report(
    source,
    ignored: tuple[str, ...],
    statuses: tuple[str, ...],
    as_json: bool,
    fail_on: tuple[str, ...],
    strict: bool,
) -> None:
    """Parse a report from SOURCE (a file, or - for stdin) and print it."""
    source_name = getattr(source, "name", "<stdin>")
    payload = source.read()
    try:
        parsed = parse_report(payload)
    except ComposerOutdatedError as e:
        log.error("cli.parse_failed", source=source_name, error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_BAD_REPORT)

    log.debug(
        "cli.report_loaded",
        source=source_name,
        installed=len(parsed.installed),
        locked=len(parsed.locked),
    )

    parsed = without_packages(parsed, ignored)
    if statuses:
        parsed = filter_status(parsed, _kinds(statuses))

    if as_json:
        click.echo(dump_report(parsed, indent=2))
    else:
        click.echo(render_text(parsed))

    if not (strict or fail_on):
        return

    requirement = indicated_requirement(parsed, _kinds(fail_on) if fail_on else None)
    log.info("cli.gate", requirement=str(requirement))
    if requirement is IndicatedUpdateRequirement.UPDATE_REQUIRED:
        sys.exit(EXIT_UPDATE_REQUIRED)


if __name__ == "__main__":
    main()
