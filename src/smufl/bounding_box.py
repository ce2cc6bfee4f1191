"""Glyph bounding boxes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from smufl.coord import Coord
from smufl.staff_spaces import StaffSpaces


class BoundingBox(BaseModel):
    """The smallest rectangle that encloses every part of a glyph's path.

    Both corners are required whenever a glyph has a bounding box entry.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    ne: Coord = Field(alias="bBoxNE", description="North-east (top right) corner")
    sw: Coord = Field(alias="bBoxSW", description="South-west (bottom left) corner")

    @property
    def width(self) -> StaffSpaces:
        return self.ne.x - self.sw.x

    @property
    def height(self) -> StaffSpaces:
        return self.ne.y - self.sw.y


__all__ = ["BoundingBox"]
