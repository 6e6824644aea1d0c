from __future__ import annotations

from typing import List, Optional, Tuple

from . import board
from .config import config
from .piece import Piece
from .player import Player
from .types import Cell, MoveKind, Move, PieceState

Destination = Tuple[MoveKind, Optional[Cell]]


def _from_base(player: Player, dice_value: int) -> Optional[Destination]:
    if dice_value != config.EXIT_BASE_ROLL:
        return None
    return MoveKind.ENTER_BOARD, player.start_cell


def _along_home_path(player: Player, piece: Piece, dice_value: int) -> Optional[Destination]:
    cur = board.home_index_of(player.color, piece.position)
    target = cur + dice_value
    if target < config.HOME_PATH_LENGTH:
        return MoveKind.ADVANCE_ON_HOME_PATH, player.home_path[target]
    if target == config.HOME_PATH_LENGTH:
        return MoveKind.FINISH, None
    # Overshoot is illegal, not clamped
    return None


def _along_main_path(player: Player, piece: Piece, dice_value: int) -> Optional[Destination]:
    length = config.MAIN_PATH_LENGTH
    cur = board.main_index_of(piece.position)
    start = board.start_index(player.color)
    # Distances are measured from the start cell so wrap-around past index 50
    # does not hide the entrance.
    travelled = (cur - start) % length
    to_entrance = (player.home_entrance_index - start) % length
    if travelled <= to_entrance < travelled + dice_value:
        steps_into_home = travelled + dice_value - to_entrance
        if steps_into_home > config.HOME_PATH_LENGTH:
            return None
        return MoveKind.ENTER_HOME_PATH, player.home_path[steps_into_home - 1]
    return MoveKind.ADVANCE_ON_MAIN, board.main_cell(cur + dice_value)


def destination_for_roll(player: Player, piece: Piece, dice_value: int) -> Optional[Destination]:
    """Where `piece` lands with `dice_value`, or None when it cannot move."""
    if piece.state is PieceState.IN_BASE:
        return _from_base(player, dice_value)
    if piece.state is PieceState.ON_HOME_PATH:
        return _along_home_path(player, piece, dice_value)
    if piece.state is PieceState.ON_MAIN_PATH:
        return _along_main_path(player, piece, dice_value)
    return None


def generate(player: Player, dice_value: int, player_index: int = 0) -> List[Move]:
    """Enumerate the legal moves of `player` for one roll.

    Produces at most one candidate per piece and never mutates anything.

    Args:
        player: The player whose pieces are considered.
        dice_value: The rolled value (1-6).
        player_index: Seat of the player in the game, stamped on each move.

    Returns:
        List[Move]: Candidates in piece order; empty when nothing can move.
    """
    if not config.DICE_MIN <= dice_value <= config.DICE_MAX:
        raise ValueError(
            f"Dice value {dice_value} must be between {config.DICE_MIN} and {config.DICE_MAX}"
        )
    moves: List[Move] = []
    for piece in player.pieces:
        dest = destination_for_roll(player, piece, dice_value)
        if dest is None:
            continue
        kind, target = dest
        moves.append(
            Move(
                player_index=player_index,
                piece=piece.ref,
                kind=kind,
                from_state=piece.state,
                to_state=kind.resulting_state,
                target=target,
                dice_value=dice_value,
            )
        )
    return moves
