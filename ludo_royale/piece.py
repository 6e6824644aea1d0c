from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import board
from .errors import LookupNotFound
from .types import Cell, Color, PieceRef, PieceState, PieceView


@dataclass(slots=True)
class Piece:
    """Lightweight piece model. Holds state only.

    Rule logic (legal destinations, captures, finishing) lives in the move
    generator and the game; the piece only keeps its state and position
    consistent with each other.
    """

    color: Color
    piece_id: int  # 0..3 per player
    state: PieceState = PieceState.IN_BASE
    position: Optional[Cell] = field(default=None)

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        if self.state is PieceState.IN_BASE:
            self.position = board.base_slot(self.color, self.piece_id)

    @property
    def ref(self) -> PieceRef:
        return PieceRef(self.color, self.piece_id)

    def is_in_base(self) -> bool:
        return self.state is PieceState.IN_BASE

    def is_on_main_path(self) -> bool:
        return self.state is PieceState.ON_MAIN_PATH

    def is_on_home_path(self) -> bool:
        return self.state is PieceState.ON_HOME_PATH

    def is_home(self) -> bool:
        return self.state is PieceState.HOME

    def move_to(self, state: PieceState, cell: Optional[Cell]) -> None:
        if state is PieceState.HOME:
            cell = None
        elif state is PieceState.IN_BASE:
            cell = board.base_slot(self.color, self.piece_id)
        self.state = state
        self.position = cell

    def send_to_base(self) -> None:
        self.move_to(PieceState.IN_BASE, None)

    def is_consistent(self) -> bool:
        """True when the position matches what the state allows."""
        if self.state is PieceState.HOME:
            return self.position is None
        if self.position is None:
            return False
        if self.state is PieceState.IN_BASE:
            return self.position == board.base_slot(self.color, self.piece_id)
        try:
            if self.state is PieceState.ON_MAIN_PATH:
                board.main_index_of(self.position)
            else:
                board.home_index_of(self.color, self.position)
        except LookupNotFound:
            return False
        return True

    def view(self) -> PieceView:
        return PieceView(
            piece_id=self.piece_id,
            color=self.color,
            state=self.state,
            position=self.position,
        )

    def to_dict(self) -> dict:
        return {
            "piece_id": self.piece_id,
            "color": self.color.name.lower(),
            "state": self.state.value,
            "position": list(self.position) if self.position is not None else None,
        }

    def __str__(self) -> str:
        return f"Piece({self.ref}: {self.state.value} at {self.position})"
