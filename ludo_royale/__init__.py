"""
Ludo Royale rules engine.
Board topology, legal moves, move application and the turn/dice state machine
for the four-color cross-and-circle race game.
"""

from .config import config
from .dice import ScriptedDice
from .engine import (
    apply_move,
    find_move,
    new_game,
    query_pieces,
    reset_game,
    roll_dice,
    snapshot,
)
from .errors import (
    GameAlreadyOver,
    GameNotStarted,
    IllegalPhaseError,
    InvalidMoveSelection,
    LookupNotFound,
    LudoError,
)
from .game import Game
from .piece import Piece
from .player import Player
from .simulator import SimulationReport, Simulator
from .types import (
    ALL_COLORS,
    Capture,
    Cell,
    Color,
    ExtraTurn,
    Move,
    MoveKind,
    MoveResult,
    NoLegalMoves,
    PieceState,
    PieceView,
    RollOutcome,
    RollResult,
    TurnForfeited,
    TurnPassed,
    TurnPhase,
    Win,
)

__all__ = [
    "config",
    "Game",
    "Player",
    "Piece",
    "Simulator",
    "SimulationReport",
    "ScriptedDice",
    "new_game",
    "roll_dice",
    "apply_move",
    "query_pieces",
    "reset_game",
    "find_move",
    "snapshot",
    "ALL_COLORS",
    "Cell",
    "Color",
    "Move",
    "MoveKind",
    "MoveResult",
    "PieceState",
    "PieceView",
    "RollOutcome",
    "RollResult",
    "TurnPhase",
    "Capture",
    "ExtraTurn",
    "Win",
    "TurnPassed",
    "TurnForfeited",
    "NoLegalMoves",
    "LudoError",
    "InvalidMoveSelection",
    "GameNotStarted",
    "GameAlreadyOver",
    "IllegalPhaseError",
    "LookupNotFound",
]
