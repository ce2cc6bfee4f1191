"""Glyph-indexed metadata sections.

Three sections of a metadata file map glyph names to data: advance widths,
anchors, and bounding boxes. Each is decoded into a read-only container whose
keys are resolved through :func:`~smufl.glyph_key.resolve_glyph`, so names
missing from the glyph table are kept (and reported) rather than rejected.

Merging with :meth:`GlyphData.with_defaults` is ordered: the receiver always
wins and the argument only fills missing keys. Chaining therefore depends on
argument position, nearest first::

    a.with_defaults(b).with_defaults(c) == a.with_defaults(b.with_defaults(c))

while ``a.with_defaults(c.with_defaults(b))`` differs whenever ``b`` and ``c``
both carry a glyph that ``a`` lacks.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView
from typing import Annotated, Any, NoReturn, TypeVar

from pydantic import AfterValidator, ConfigDict, Field, RootModel

from smufl.anchors import Anchors
from smufl.bounding_box import BoundingBox
from smufl.glyph_key import GlyphKey, GlyphOrUnknown, UnknownGlyph, glyph_name, resolve_glyph
from smufl.staff_spaces import StaffSpaces


_DataT = TypeVar("_DataT", bound="GlyphData")


class GlyphMap(dict):
    """``dict`` holding the entries of a section; every mutator raises ``TypeError``."""

    __slots__ = ()

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError("glyph data sections are read-only; use with_defaults() to combine them")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self) -> tuple[type[GlyphMap], tuple[dict[Any, Any]]]:
        return type(self), (dict(self),)


_ReadOnly = AfterValidator(GlyphMap)


class GlyphData:
    """Read-only mapping of glyphs to per-glyph data.

    Concrete sections combine this mixin with a pydantic ``RootModel`` whose
    ``root`` is a :class:`GlyphMap` keyed by :data:`~smufl.glyph_key.GlyphKey`.
    """

    def get(self, glyph: GlyphOrUnknown | str, default: Any = None) -> Any:
        """Return the data stored for ``glyph``, or ``default`` when absent.

        Plain strings are resolved as SMuFL names first.
        """
        key = resolve_glyph(glyph) if isinstance(glyph, str) else glyph
        return self.root.get(key, default)

    def __contains__(self, glyph: object) -> bool:
        key = resolve_glyph(glyph) if isinstance(glyph, str) else glyph
        return key in self.root

    def __iter__(self) -> Iterator[GlyphOrUnknown]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return bool(self.root)

    def keys(self) -> KeysView[GlyphOrUnknown]:
        return self.root.keys()

    def items(self) -> ItemsView[GlyphOrUnknown, Any]:
        return self.root.items()

    def with_defaults(self: _DataT, defaults: _DataT) -> _DataT:
        """Return a copy holding every entry of ``self`` plus missing ones from ``defaults``."""
        merged = dict(self.root)
        for glyph, value in defaults.root.items():
            merged.setdefault(glyph, value)
        return type(self).model_construct(GlyphMap(merged))

    def unknown_glyphs(self) -> Iterator[str]:
        """Yield the names of glyphs with data whose name was not recognised."""
        for key in self.root:
            if isinstance(key, UnknownGlyph):
                yield key.name

    def to_names(self) -> dict[str, Any]:
        """Return the data keyed by textual glyph name."""
        return {glyph_name(key): value for key, value in self.root.items()}


class GlyphAdvanceWidths(GlyphData, RootModel):
    """Advance width of each glyph.

    The advance width is the distance from a glyph's origin to the origin of
    the next glyph on the line. SMuFL glyphs usually have zero side-bearings,
    and some have negative ones (``stemSulPonticello`` is very narrow with the
    sign centred on the stem), which the advance width does not include.
    """

    model_config = ConfigDict(frozen=True)

    root: Annotated[dict[GlyphKey, StaffSpaces], _ReadOnly] = Field(default_factory=GlyphMap)


class GlyphAnchors(GlyphData, RootModel):
    """Anchor data for glyphs."""

    model_config = ConfigDict(frozen=True)

    root: Annotated[dict[GlyphKey, Anchors], _ReadOnly] = Field(default_factory=GlyphMap)


class GlyphBoundingBoxes(GlyphData, RootModel):
    """Bounding box of each glyph, as south-west and north-east corners."""

    model_config = ConfigDict(frozen=True)

    root: Annotated[dict[GlyphKey, BoundingBox], _ReadOnly] = Field(default_factory=GlyphMap)


__all__ = ["GlyphAdvanceWidths", "GlyphAnchors", "GlyphBoundingBoxes", "GlyphData", "GlyphMap"]
