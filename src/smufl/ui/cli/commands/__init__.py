"""CLI command implementations exposed via `smufl.ui.cli`."""

from __future__ import annotations

from .inspect import show, unknowns


__all__ = ["show", "unknowns"]
