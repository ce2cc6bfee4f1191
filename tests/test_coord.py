from __future__ import annotations

from pydantic import BaseModel, ValidationError
import pytest

from smufl.coord import Coord
from smufl.staff_spaces import StaffSpaces


class _Point(BaseModel):
    at: Coord


def test_coord_components() -> None:
    coord = Coord(StaffSpaces(1.0), StaffSpaces(2.0))

    assert coord.x == StaffSpaces(1.0)
    assert coord.y == StaffSpaces(2.0)
    x, y = coord
    assert (x, y) == (StaffSpaces(1.0), StaffSpaces(2.0))


def test_coord_coerces_numbers() -> None:
    assert Coord(1, 2) == Coord(StaffSpaces(1), StaffSpaces(2))


def test_coord_decodes_from_json_array() -> None:
    point = _Point.model_validate_json('{"at": [1.18, -0.168]}')

    assert point.at == Coord(1.18, -0.168)
    assert point.model_dump() == {"at": [1.18, -0.168]}


@pytest.mark.parametrize("raw", ['[1.0]', '[1.0, 2.0, 3.0]', '"1,2"', "1.0", '["a", 1]'])
def test_coord_rejects_other_shapes(raw: str) -> None:
    with pytest.raises(ValidationError):
        _Point.model_validate_json(f'{{"at": {raw}}}')
