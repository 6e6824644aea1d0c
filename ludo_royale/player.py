from __future__ import annotations

from dataclasses import dataclass, field

from . import board
from .config import config
from .piece import Piece
from .types import Cell, Color, PieceState


@dataclass(slots=True)
class Player:
    color: Color
    pieces: list[Piece] = field(init=False)
    has_finished: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        self.pieces = [
            Piece(color=self.color, piece_id=i)
            for i in range(config.PIECES_PER_PLAYER)
        ]

    @property
    def name(self) -> str:
        return f"Player {self.color.display_name}"

    @property
    def start_cell(self) -> Cell:
        return board.start_cell(self.color)

    @property
    def home_entrance_index(self) -> int:
        return board.home_entrance_index(self.color)

    @property
    def home_path(self) -> tuple[Cell, ...]:
        return board.home_path(self.color)

    def count_in(self, state: PieceState) -> int:
        return sum(1 for p in self.pieces if p.state is state)

    def check_won(self) -> bool:
        if self.has_finished:
            return True
        if all(p.is_home() for p in self.pieces):
            self.has_finished = True
            return True
        return False

    def to_dict(self) -> dict:
        return {
            "color": self.color.name.lower(),
            "start_cell": list(self.start_cell),
            "home_entrance_index": self.home_entrance_index,
            "pieces": [p.to_dict() for p in self.pieces],
            "pieces_in_base": self.count_in(PieceState.IN_BASE),
            "pieces_home": self.count_in(PieceState.HOME),
            "has_finished": self.has_finished,
        }
