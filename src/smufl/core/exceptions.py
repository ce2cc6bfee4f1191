"""Exception hierarchy for SMuFL metadata loading."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class SmuflError(Exception):
    """Base exception for every failure raised by this package."""


class MetadataDecodeError(SmuflError, ValueError):
    """Raised when a metadata document is not well-formed or has the wrong shape.

    ``errors`` holds ``(location, message)`` pairs, where ``location`` is the
    dotted path of the offending value inside the document (empty for syntax
    errors that the decoder could not attach to a field).
    """

    def __init__(self, message: str, errors: Iterable[tuple[str, str]] = ()) -> None:
        self.errors: tuple[tuple[str, str], ...] = tuple(errors)
        details = "; ".join(
            f"{location}: {detail}" if location else detail for location, detail in self.errors
        )
        super().__init__(f"{message}: {details}" if details else message)

    @classmethod
    def from_error_details(
        cls, message: str, details: Iterable[Mapping[str, Any]]
    ) -> MetadataDecodeError:
        """Build an error from pydantic-style error dictionaries."""
        errors = []
        for detail in details:
            location = ".".join(str(part) for part in detail.get("loc", ()))
            errors.append((location, str(detail.get("msg", ""))))
        return cls(message, errors)


class ConfigError(SmuflError):
    """Raised when a metadata source configuration cannot be loaded."""


__all__ = [
    "ConfigError",
    "MetadataDecodeError",
    "SmuflError",
]
