"""Wire schema for ``composer outdated --format=json`` output.

These models mirror the JSON document field-for-field and apply no domain
policy: every entry field except ``name`` is optional, ``null`` counts as
absent and unknown keys are dropped so newer composer releases keep parsing.
"""

from __future__ import annotations

import json
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from composer_outdated.exceptions import MalformedJsonError


class RawPackageEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    version: StrictStr | None = None
    latest: StrictStr | None = None
    latest_status: StrictStr | None = Field(default=None, alias="latest-status")
    description: StrictStr | None = None
    warning: StrictStr | None = None


class RawReport(BaseModel):
    model_config = ConfigDict(extra="ignore")

    installed: list[RawPackageEntry] | None = None
    locked: list[RawPackageEntry] | None = None


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def _decode(payload: str | bytes | bytearray) -> str:
    if isinstance(payload, (bytes, bytearray)):
        try:
            return bytes(payload).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedJsonError(
                f"payload is not valid UTF-8: {exc.reason}", offset=exc.start
            ) from exc
    return payload.removeprefix("\ufeff")


def load_raw(payload: str | bytes | bytearray) -> RawReport:
    """Deserialize a JSON payload into a :class:`RawReport`.

    Raises :class:`MalformedJsonError` when the payload is not JSON, is not an
    object, or when ``installed``/``locked`` or any entry breaks the shape
    (missing or non-string ``name``, non-string optional fields).
    """
    text = _decode(payload)
    try:
        # Decimal keeps integers of any length, under ignored keys too.
        data = json.loads(text, parse_int=Decimal)
    except json.JSONDecodeError as exc:
        raise MalformedJsonError(
            exc.msg, line=exc.lineno, column=exc.colno, offset=exc.pos
        ) from exc
    except (ValueError, RecursionError) as exc:
        # e.g. nesting deeper than the decoder allows
        raise MalformedJsonError(f"payload cannot be decoded: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedJsonError(
            f"expected a JSON object at the top level, got {type(data).__name__}"
        )

    try:
        return RawReport.model_validate(data)
    except ValidationError as exc:
        raise MalformedJsonError(_format_validation_error(exc)) from exc
