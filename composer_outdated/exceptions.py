"""Exceptions raised while reading a composer outdated report."""

from __future__ import annotations


class ComposerOutdatedError(Exception):
    """Base exception for all report parsing errors."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class MalformedJsonError(ComposerOutdatedError):
    """Raised when the payload is not JSON or breaks the report structure.

    ``line``, ``column`` and ``offset`` are set when the JSON decoder could
    pinpoint the failure; structural errors leave them as ``None``.
    """

    def __init__(
        self,
        detail: str,
        line: int | None = None,
        column: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.offset = offset
        super().__init__(detail)

    def __str__(self) -> str:
        if self.line is None:
            return f"malformed report: {self.detail}"
        return (
            f"malformed report: {self.detail} "
            f"(line {self.line}, column {self.column}, offset {self.offset})"
        )


class InvalidPackageNameError(ComposerOutdatedError):
    """Raised when a package entry has a blank name."""

    def __str__(self) -> str:
        return f"invalid package name: {self.detail}"
