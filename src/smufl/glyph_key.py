"""Keys used by glyph-indexed metadata sections.

Metadata files index glyph data by SMuFL name. Names registered in the
:class:`~smufl.glyph.Glyph` table resolve to their canonical member; any other
name is kept verbatim as an :class:`UnknownGlyph` so that decoding never drops
data, and so that the unrecognised names can be reported afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, TypeAlias

from pydantic import PlainSerializer, PlainValidator

from smufl.glyph import Glyph


@dataclass(frozen=True, slots=True, order=True)
class UnknownGlyph:
    """A glyph name that is not part of the SMuFL glyph table."""

    name: str


GlyphOrUnknown: TypeAlias = Glyph | UnknownGlyph


def resolve_glyph(name: str) -> GlyphOrUnknown:
    """Return the canonical glyph registered under ``name``, or an unknown key.

    Matching is exact and case-sensitive.
    """
    try:
        return Glyph(name)
    except ValueError:
        return UnknownGlyph(name)


def glyph_name(key: GlyphOrUnknown) -> str:
    """Return the textual name a key was (or would be) written with."""
    if isinstance(key, Glyph):
        return key.value
    return key.name


def glyph_sort_key(key: GlyphOrUnknown) -> tuple[str, bool]:
    """Sort key ordering canonical and unknown glyphs together by name."""
    return (glyph_name(key), isinstance(key, UnknownGlyph))


def _coerce_key(value: Any) -> GlyphOrUnknown:
    if isinstance(value, (Glyph, UnknownGlyph)):
        return value
    if isinstance(value, str):
        return resolve_glyph(value)
    raise ValueError(f"glyph names must be strings, got {type(value).__name__}")


GlyphKey = Annotated[
    GlyphOrUnknown,
    PlainValidator(_coerce_key),
    PlainSerializer(glyph_name, return_type=str),
]


__all__ = [
    "GlyphKey",
    "GlyphOrUnknown",
    "UnknownGlyph",
    "glyph_name",
    "glyph_sort_key",
    "resolve_glyph",
]
