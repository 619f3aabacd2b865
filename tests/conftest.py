"""Shared fixtures for composer outdated report tests."""

import json

import pytest


def _entry(name: str, **overrides) -> dict:
    entry = {"name": name, "version": "1.0.0"}
    entry.update(overrides)
    return entry


@pytest.fixture
def make_entry():
    return _entry


@pytest.fixture
def sample_payload() -> str:
    """Report in the shape of ``composer outdated --format=json --locked``."""
    return json.dumps(
        {
            "installed": [
                _entry(
                    "acme/widget",
                    latest="1.0.0",
                    **{"latest-status": "up-to-date"},
                    description="Widgets for everyone",
                ),
                _entry(
                    "acme/gadget",
                    version="2.1.0",
                    latest="2.3.0",
                    **{"latest-status": "semver-safe-update"},
                ),
                _entry(
                    "legacy/thing",
                    version="0.9.0",
                    latest="3.0.0",
                    **{"latest-status": "update-possible"},
                    warning="Package legacy/thing is abandoned, you should avoid using it.",
                ),
            ],
            "locked": [
                _entry(
                    "acme/widget",
                    latest="1.0.0",
                    **{"latest-status": "up-to-date"},
                ),
            ],
        }
    )


@pytest.fixture
def up_to_date_payload() -> str:
    return json.dumps(
        {
            "installed": [
                _entry("acme/widget", latest="1.0.0", **{"latest-status": "up-to-date"}),
            ]
        }
    )
