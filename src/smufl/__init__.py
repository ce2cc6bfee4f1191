"""Parse SMuFL (Standard Music Font Layout) font metadata.

SMuFL-compliant fonts ship a JSON metadata file with recommendations for
drawing notation the font does not provide (staff lines, barlines, hairpins)
and glyph-specific metrics such as where a stem meets a notehead. This
package decodes that file into immutable, validated models:

```python
from smufl import Glyph, Metadata, StaffSpaces

metadata = Metadata.from_path("bravura_metadata.json")
metadata.engraving_defaults.staff_line_thickness  # StaffSpaces(0.13)
metadata.advance_widths.get(Glyph.NOTEHEAD_WHOLE)  # StaffSpaces(1.688)
```

Metadata from a secondary font can fill the gaps of another with
``Metadata.with_defaults``; the receiver always takes priority.
"""

from __future__ import annotations

from smufl.anchors import Anchors
from smufl.bounding_box import BoundingBox
from smufl.coord import Coord
from smufl.core.config import MetadataSource, load_metadata
from smufl.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from smufl.core.exceptions import ConfigError, MetadataDecodeError, SmuflError
from smufl.engraving_defaults import EngravingDefaults
from smufl.glyph import Glyph
from smufl.glyph_data import GlyphAdvanceWidths, GlyphAnchors, GlyphBoundingBoxes, GlyphData
from smufl.glyph_key import GlyphOrUnknown, UnknownGlyph, glyph_name, resolve_glyph
from smufl.metadata import Metadata, UnknownGlyphReport
from smufl.staff_spaces import StaffSpaces
from smufl.version import get_version


__version__ = get_version()

__all__ = [
    "Anchors",
    "BoundingBox",
    "ConfigError",
    "Coord",
    "DiagnosticEmitter",
    "EngravingDefaults",
    "Glyph",
    "GlyphAdvanceWidths",
    "GlyphAnchors",
    "GlyphBoundingBoxes",
    "GlyphData",
    "GlyphOrUnknown",
    "LoggingEmitter",
    "MetadataDecodeError",
    "Metadata",
    "MetadataSource",
    "NullEmitter",
    "SmuflError",
    "StaffSpaces",
    "UnknownGlyph",
    "UnknownGlyphReport",
    "__version__",
    "get_version",
    "glyph_name",
    "load_metadata",
    "resolve_glyph",
]
