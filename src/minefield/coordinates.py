"""
Coordinate and cell-name utilities.

Cell names use spreadsheet-style addressing: a run of letters naming the
column (A, B, ..., Z, AA, AB, ...) followed by a 1-based row number, so
"B6" is column 1, row 5 in zero-based coordinates.
"""
import re
from typing import NamedTuple, Set

from .errors import InvalidCellNameError


VALID_CELL_NAME = re.compile(r"([A-Za-z]+)([0-9]+)")

_ALPHABET_SIZE = 26

# Letter or digit runs longer than this decode to OFF_GRID, which no grid
# contains. Keeps indexes small enough to print.
_MAX_RUN_LENGTH = 9
OFF_GRID = 10 ** _MAX_RUN_LENGTH


class Coordinate(NamedTuple):
    """Zero-based (column, row) position on the grid."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


# ============================================================================
# Cell Name Codec
# ============================================================================

def cell_name_to_coordinate(name: str) -> Coordinate:
    """
    Decode a cell name such as "B6" into a zero-based coordinate.

    Letters are case-insensitive. The result is not bounds-checked: "Z30"
    decodes fine and is rejected later by the grid. Runs too long to be on
    any grid decode to OFF_GRID.

    Args:
        name: Cell name, letters followed by digits.

    Returns:
        Coordinate of the named cell.

    Raises:
        InvalidCellNameError: If the name is not letters followed by digits.
    """
    match = VALID_CELL_NAME.fullmatch(name) if isinstance(name, str) else None
    if match is None:
        raise InvalidCellNameError(
            f"Invalid cell name {name!r}. Must be letters followed by a "
            f"number, e.g., B6."
        )

    letters, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    x = OFF_GRID if len(letters) > _MAX_RUN_LENGTH else column_key_to_int(letters)
    y = OFF_GRID if len(digits) > _MAX_RUN_LENGTH else int(digits) - 1
    return Coordinate(x, y)


def column_key_to_int(column_key: str) -> int:
    """
    Convert a column key (e.g. "AA") to a zero-based column index.

    Bijective base-26: A=0, Z=25, AA=26, BZ=77.
    """
    value = 0
    for char in column_key.upper():
        value = value * _ALPHABET_SIZE + (ord(char) - ord("A") + 1)
    return value - 1


def int_to_column_key(index: int) -> str:
    """Convert a zero-based column index back to its letter key."""
    if index < 0:
        raise ValueError(f"Column index cannot be negative: {index}")

    letters = []
    value = index + 1
    while value > 0:
        value, remainder = divmod(value - 1, _ALPHABET_SIZE)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def coordinate_to_cell_name(coordinate: Coordinate) -> str:
    """Encode a coordinate as a cell name, e.g. (0, 0) -> "A1"."""
    return f"{int_to_column_key(coordinate.x)}{coordinate.y + 1}"


# ============================================================================
# Neighbor Resolver
# ============================================================================

def get_neighbors(coordinate: Coordinate, width: int, height: int) -> Set[Coordinate]:
    """
    Get the in-bounds cells surrounding a coordinate.

    Args:
        coordinate: Center cell.
        width: Number of columns in the grid.
        height: Number of rows in the grid.

    Returns:
        Set of up to 8 neighboring coordinates, never including the center.
    """
    x, y = coordinate
    neighbors = set()
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            new_x = x + delta_x
            new_y = y + delta_y
            if 0 <= new_x < width and 0 <= new_y < height:
                neighbors.add(Coordinate(new_x, new_y))
    return neighbors
