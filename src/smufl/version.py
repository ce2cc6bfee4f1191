"""Installed version lookup."""

from __future__ import annotations

from importlib import metadata


DISTRIBUTION = "smufl-metadata"


def get_version() -> str:
    """Version of the installed distribution, ``0.0.0`` from a bare checkout."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["DISTRIBUTION", "get_version"]
