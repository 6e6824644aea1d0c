"""
Functional surface of the engine.

Renderers and input handlers talk to the game only through these calls:
start a game, roll, pick one of the legal moves, read piece views.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from .board import occupancy_grid
from .dice import DiceSource
from .errors import InvalidMoveSelection
from .game import Game
from .types import ALL_COLORS, Color, Move, MoveResult, PieceView, RollResult


def new_game(
    colors: Sequence[Color] = ALL_COLORS, rng: Optional[DiceSource] = None
) -> Game:
    return Game.new(colors, rng=rng)


def roll_dice(game: Game, rng: Optional[DiceSource] = None) -> RollResult:
    result = game.roll_dice(rng)
    logger.debug(result.describe())
    return result


def apply_move(game: Game, move: Move) -> MoveResult:
    return game.apply_move(move)


def query_pieces(game: Game) -> List[PieceView]:
    return game.query_pieces()


def reset_game(game: Game) -> Game:
    game.reset()
    return game


def find_move(game: Game, color: Color, piece_id: int) -> Move:
    """Match a selected piece to one of the current legal moves.

    Raises:
        InvalidMoveSelection: If the piece has no move in the current set.
    """
    for move in game.legal_moves:
        if move.piece.color == color and move.piece.piece_id == piece_id:
            return move
    logger.warning(f"No legal move for {Color(color).display_name} piece {piece_id}")
    raise InvalidMoveSelection(
        f"{Color(color).display_name} piece {piece_id} has no legal move"
    )


def snapshot(game: Game) -> dict:
    data = game.to_dict()
    data["legal_moves"] = [
        {
            "color": mv.piece.color.name.lower(),
            "piece_id": mv.piece.piece_id,
            "kind": mv.kind.value,
            "target": list(mv.target) if mv.target is not None else None,
        }
        for mv in game.legal_moves
    ]
    return data


def board_grid(game: Game):
    """Per-color piece counts on the 15x15 grid (numpy array)."""
    return occupancy_grid(game.query_pieces())
