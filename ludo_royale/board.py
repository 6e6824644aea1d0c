"""
Board topology for the 15x15 cross-and-circle board.

Pure lookups over the static geometry held in ``config``: the shared
51-cell main path, the four private home paths, start cells, base slots
and safe zones. Nothing here holds game state.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from .config import config
from .errors import LookupNotFound
from .types import Cell, Color, PieceState, PieceView

MAIN_PATH: tuple[Cell, ...] = tuple(Cell(*rc) for rc in config.MAIN_PATH)
HOME_PATHS: tuple[tuple[Cell, ...], ...] = tuple(
    tuple(Cell(*rc) for rc in path) for path in config.HOME_PATHS
)
BASE_SLOTS: tuple[tuple[Cell, ...], ...] = tuple(
    tuple(Cell(*rc) for rc in slots) for slots in config.BASE_SLOTS
)
CENTER: Cell = Cell(*config.CENTER_CELL)

_MAIN_INDEX: Dict[Cell, int] = {cell: idx for idx, cell in enumerate(MAIN_PATH)}
_HOME_INDEX: tuple[Dict[Cell, int], ...] = tuple(
    {cell: idx for idx, cell in enumerate(path)} for path in HOME_PATHS
)
_SAFE_CELLS: frozenset[Cell] = frozenset(MAIN_PATH[i] for i in config.SAFE_INDICES)


def main_index_of(cell: Cell) -> int:
    try:
        return _MAIN_INDEX[Cell(*cell)]
    except KeyError:
        raise LookupNotFound(f"{tuple(cell)} is not on the main path") from None


def home_index_of(color: Color, cell: Cell) -> int:
    try:
        return _HOME_INDEX[int(color)][Cell(*cell)]
    except KeyError:
        raise LookupNotFound(
            f"{tuple(cell)} is not on {Color(color).display_name}'s home path"
        ) from None


def main_cell(index: int) -> Cell:
    return MAIN_PATH[index % len(MAIN_PATH)]


def is_safe(cell: Cell) -> bool:
    return Cell(*cell) in _SAFE_CELLS


def start_cell(color: Color) -> Cell:
    return Cell(*config.START_CELLS[int(color)])


def start_index(color: Color) -> int:
    return main_index_of(start_cell(color))


def home_entrance_index(color: Color) -> int:
    return main_index_of(Cell(*config.HOME_ENTRANCE_CELLS[int(color)]))


def home_path(color: Color) -> tuple[Cell, ...]:
    return HOME_PATHS[int(color)]


def base_slot(color: Color, piece_id: int) -> Cell:
    return BASE_SLOTS[int(color)][piece_id]


def validate_topology() -> None:
    """Check the static geometry once; any fault is a data bug."""
    if len(_MAIN_INDEX) != len(MAIN_PATH):
        raise LookupNotFound("main path contains duplicate cells")
    for color in Color:
        # Each of these raises LookupNotFound when the cell is off the path
        start_index(color)
        home_entrance_index(color)
        path = home_path(color)
        if len(path) != config.HOME_PATH_LENGTH:
            raise LookupNotFound(
                f"{color.display_name}'s home path has {len(path)} cells"
            )
        overlap = [cell for cell in path if cell in _MAIN_INDEX]
        if overlap:
            raise LookupNotFound(
                f"{color.display_name}'s home path overlaps the main path at {overlap}"
            )
    for idx in config.SAFE_INDICES:
        if not 0 <= idx < len(MAIN_PATH):
            raise LookupNotFound(f"safe index {idx} is outside the main path")


def cell_for_view(view: PieceView) -> Cell:
    """Grid cell a renderer should draw the piece on."""
    if view.state is PieceState.HOME or view.position is None:
        return CENTER
    return view.position


def occupancy_grid(pieces: Iterable[PieceView]) -> np.ndarray:
    """Return a (4, 15, 15) array counting each color's pieces per grid cell.

    Finished pieces are counted on the center cell.
    """
    grid = np.zeros(
        (len(Color), config.GRID_SIZE, config.GRID_SIZE), dtype=np.int8
    )
    for view in pieces:
        row, col = cell_for_view(view)
        grid[int(view.color), row, col] += 1
    return grid


def safe_cells() -> List[Cell]:
    return [MAIN_PATH[i] for i in sorted(config.SAFE_INDICES)]


validate_topology()
