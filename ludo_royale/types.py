from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Union

if TYPE_CHECKING:
    from .game import Game


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


ALL_COLORS: List[Color] = [Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE]


class Cell(NamedTuple):
    row: int
    col: int


class PieceState(Enum):
    IN_BASE = "in_base"
    ON_MAIN_PATH = "on_main_path"
    ON_HOME_PATH = "on_home_path"
    HOME = "home"


class MoveKind(Enum):
    ENTER_BOARD = "enter_board"
    ADVANCE_ON_MAIN = "advance_on_main"
    ENTER_HOME_PATH = "enter_home_path"
    ADVANCE_ON_HOME_PATH = "advance_on_home_path"
    FINISH = "finish"

    @property
    def resulting_state(self) -> PieceState:
        return _RESULTING_STATE[self]


_RESULTING_STATE = {
    MoveKind.ENTER_BOARD: PieceState.ON_MAIN_PATH,
    MoveKind.ADVANCE_ON_MAIN: PieceState.ON_MAIN_PATH,
    MoveKind.ENTER_HOME_PATH: PieceState.ON_HOME_PATH,
    MoveKind.ADVANCE_ON_HOME_PATH: PieceState.ON_HOME_PATH,
    MoveKind.FINISH: PieceState.HOME,
}


class TurnPhase(Enum):
    NOT_STARTED = "not_started"
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE_SELECTION = "awaiting_move_selection"
    GAME_OVER = "game_over"


class RollOutcome(Enum):
    MOVES_AVAILABLE = "moves_available"
    TURN_FORFEITED = "turn_forfeited"
    NO_LEGAL_MOVES = "no_legal_moves"


@dataclass(frozen=True, slots=True)
class PieceRef:
    color: Color
    piece_id: int

    def __str__(self) -> str:
        return f"{self.color.display_name}#{self.piece_id}"


@dataclass(frozen=True, slots=True)
class Move:
    """One legal candidate; `target` is None for the finish sentinel."""

    player_index: int
    piece: PieceRef
    kind: MoveKind
    from_state: PieceState
    to_state: PieceState
    target: Optional[Cell]
    dice_value: int


# --- Events ---
@dataclass(frozen=True, slots=True)
class Capture:
    capturer: PieceRef
    victim: PieceRef
    cell: Cell

    def describe(self) -> str:
        return (
            f"Player {self.capturer.color.display_name} captured "
            f"Player {self.victim.color.display_name}'s piece!"
        )


@dataclass(frozen=True, slots=True)
class ExtraTurn:
    player: Color

    def describe(self) -> str:
        return f"Player {self.player.display_name} rolled a 6! Roll again."


@dataclass(frozen=True, slots=True)
class Win:
    player: Color

    def describe(self) -> str:
        return f"Player {self.player.display_name} wins the game!"


@dataclass(frozen=True, slots=True)
class TurnPassed:
    """Turn moved on with nothing else to report."""

    next_player: Color

    def describe(self) -> str:
        return f"It's Player {self.next_player.display_name}'s turn."


@dataclass(frozen=True, slots=True)
class TurnForfeited:
    player: Color

    def describe(self) -> str:
        return f"Player {self.player.display_name} rolled three 6s! Turn skipped."


@dataclass(frozen=True, slots=True)
class NoLegalMoves:
    player: Color
    dice_value: int

    def describe(self) -> str:
        return (
            f"Player {self.player.display_name} has no valid moves. Passing turn."
        )


Event = Union[Capture, ExtraTurn, Win, TurnPassed, TurnForfeited, NoLegalMoves]


# --- Results ---
@dataclass(slots=True)
class RollResult:
    player_index: int
    player: Color
    dice_value: int
    outcome: RollOutcome
    legal_moves: List[Move] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)

    def describe(self) -> str:
        color = self.player.display_name
        if self.outcome is RollOutcome.MOVES_AVAILABLE:
            return f"Player {color} rolled a {self.dice_value}. Select a piece to move."
        return "; ".join(ev.describe() for ev in self.events)


@dataclass(slots=True)
class MoveResult:
    game: Game
    move: Move
    events: List[Event] = field(default_factory=list)

    @property
    def captures(self) -> List[Capture]:
        return [ev for ev in self.events if isinstance(ev, Capture)]

    @property
    def extra_turn(self) -> bool:
        return any(isinstance(ev, ExtraTurn) for ev in self.events)

    @property
    def won(self) -> bool:
        return any(isinstance(ev, Win) for ev in self.events)


@dataclass(frozen=True, slots=True)
class PieceView:
    piece_id: int
    color: Color
    state: PieceState
    position: Optional[Cell]
