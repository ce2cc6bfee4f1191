#!/usr/bin/env python3
"""Build ``src/smufl/glyph.py`` from the SMuFL ``glyphnames.json`` table."""

from __future__ import annotations

from collections.abc import Iterable
import json
from pathlib import Path
import re
import sys
from urllib.request import urlopen


ROOT = Path(__file__).resolve().parents[1]
OUTPUT_PATH = ROOT / "src" / "smufl" / "glyph.py"
GLYPHNAMES_URL = "https://raw.githubusercontent.com/w3c/smufl/gh-pages/metadata/glyphnames.json"

WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

HEADER = '''"""SMuFL glyph names.

Generated by ``scripts/generate_glyphs.py`` from the SMuFL ``glyphnames.json``
table; do not edit by hand.
"""

from __future__ import annotations

from enum import Enum


class Glyph(Enum):
    """Canonical SMuFL glyphs, valued by their registered names."""

'''

FOOTER = '''
    @property
    def smufl_name(self) -> str:
        """The registered SMuFL name, as written in metadata files."""
        return self.value

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Glyph):
            return self.value < other.value
        return NotImplemented


__all__ = ["Glyph"]
'''


def download_bytes(url: str) -> bytes:
    with urlopen(url) as response:
        return response.read()


def load_names(source: str | None) -> list[str]:
    if source is None:
        payload = json.loads(download_bytes(GLYPHNAMES_URL).decode("utf-8"))
    else:
        payload = json.loads(Path(source).read_text(encoding="utf-8"))
    return sorted(payload)


def member_name(smufl_name: str) -> str:
    member = WORD_BOUNDARY.sub("_", smufl_name).upper()
    if member[0].isdigit():
        member = f"_{member}"
    return member


def render(names: Iterable[str]) -> str:
    lines: list[str] = []
    seen: dict[str, str] = {}
    for name in names:
        member = member_name(name)
        if member in seen:
            raise ValueError(f"{name!r} and {seen[member]!r} both map to {member}")
        seen[member] = name
        lines.append(f'    {member} = "{name}"\n')
    return HEADER + "".join(lines) + FOOTER


def main(argv: list[str]) -> int:
    source = argv[1] if len(argv) > 1 else None
    names = load_names(source)
    OUTPUT_PATH.write_text(render(names), encoding="utf-8")
    print(f"Wrote {len(names)} glyphs to {OUTPUT_PATH}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
