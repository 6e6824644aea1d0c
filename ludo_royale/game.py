from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from . import board, moves
from .config import config
from .dice import DiceSource
from .errors import (
    GameAlreadyOver,
    GameNotStarted,
    IllegalPhaseError,
    InvalidMoveSelection,
)
from .piece import Piece
from .player import Player
from .types import (
    ALL_COLORS,
    Capture,
    Color,
    Event,
    ExtraTurn,
    Move,
    MoveResult,
    NoLegalMoves,
    PieceRef,
    PieceState,
    PieceView,
    RollOutcome,
    RollResult,
    TurnForfeited,
    TurnPassed,
    TurnPhase,
    Win,
)


@dataclass(slots=True)
class Game:
    """Owns players, turn/dice state and the rules that mutate them.

    All mutation goes through `roll_dice` and `apply_move`; callers are
    expected to only read the fields.
    """

    players: List[Player] = field(default_factory=list)
    current_index: int = 0
    dice_value: int = 0
    consecutive_sixes: int = 0
    started: bool = False
    finished: bool = False
    phase: TurnPhase = TurnPhase.NOT_STARTED
    legal_moves: List[Move] = field(default_factory=list)
    winner: Optional[Color] = None
    rng: DiceSource = field(default_factory=random.Random, repr=False)
    history: List[Event] = field(default_factory=list, repr=False)

    @classmethod
    def new(
        cls, colors: Sequence[Color] = ALL_COLORS, rng: Optional[DiceSource] = None
    ) -> "Game":
        game = cls(rng=rng if rng is not None else random.Random())
        game.start(colors)
        return game

    # --- Lifecycle ---
    def start(self, colors: Sequence[Color] = ALL_COLORS) -> None:
        parsed = [Color(c) for c in colors]
        if len(parsed) != config.NUM_PLAYERS:
            raise ValueError(
                f"A game needs exactly {config.NUM_PLAYERS} colors, got {len(parsed)}"
            )
        if len(set(parsed)) != len(parsed):
            raise ValueError(f"Colors must be distinct, got {[c.name for c in parsed]}")

        self.players = [Player(color=c) for c in parsed]
        self.current_index = 0
        self.dice_value = 0
        self.consecutive_sixes = 0
        self.started = True
        self.finished = False
        self.phase = TurnPhase.AWAITING_ROLL
        self.legal_moves = []
        self.winner = None
        self.history = []
        logger.info(
            f"Game started with {[p.name for p in self.players]}; "
            f"{self.current_player().name} to roll"
        )

    def reset(self) -> None:
        self.players = []
        self.current_index = 0
        self.dice_value = 0
        self.consecutive_sixes = 0
        self.started = False
        self.finished = False
        self.phase = TurnPhase.NOT_STARTED
        self.legal_moves = []
        self.winner = None
        self.history = []
        logger.info("Game reset")

    def _require_active(self) -> None:
        if not self.started:
            logger.warning("Roll or move attempted before the game started")
            raise GameNotStarted("Start a game before rolling or moving")
        if self.finished:
            logger.warning(f"Roll or move attempted after {self.winner.display_name} won")
            raise GameAlreadyOver(
                f"Game is over; {self.winner.display_name} already won"
            )

    # --- Queries ---
    def current_player(self) -> Player:
        if not self.started:
            logger.warning("Current player requested before the game started")
            raise GameNotStarted("No players before the game starts")
        return self.players[self.current_index]

    def player_for(self, color: Color) -> Player:
        for player in self.players:
            if player.color == color:
                return player
        raise KeyError(f"No {Color(color).display_name} player in this game")

    def piece(self, ref: PieceRef) -> Piece:
        return self.player_for(ref.color).pieces[ref.piece_id]

    def query_pieces(self) -> List[PieceView]:
        return [pc.view() for pl in self.players for pc in pl.pieces]

    def is_consistent(self) -> bool:
        return all(
            len(pl.pieces) == config.PIECES_PER_PLAYER
            and all(pc.is_consistent() for pc in pl.pieces)
            for pl in self.players
        )

    def to_dict(self) -> dict:
        return {
            "started": self.started,
            "finished": self.finished,
            "phase": self.phase.value,
            "current_player": (
                self.players[self.current_index].color.name.lower()
                if self.players
                else None
            ),
            "dice_value": self.dice_value,
            "consecutive_sixes": self.consecutive_sixes,
            "winner": self.winner.name.lower() if self.winner is not None else None,
            "players": [pl.to_dict() for pl in self.players],
        }

    # --- Turn controller ---
    def advance_turn(self) -> Color:
        """Hand the turn to the next player and return its color."""
        total = len(self.players)
        idx = (self.current_index + 1) % total
        if config.SKIP_FINISHED_PLAYERS:
            for _ in range(total - 1):
                if not self.players[idx].has_finished:
                    break
                idx = (idx + 1) % total
        if idx != self.current_index:
            self.consecutive_sixes = 0
        self.current_index = idx
        self.legal_moves = []
        self.phase = TurnPhase.AWAITING_ROLL
        return self.players[idx].color

    def roll_dice(self, rng: Optional[DiceSource] = None) -> RollResult:
        self._require_active()
        if self.phase is not TurnPhase.AWAITING_ROLL:
            logger.warning(f"Roll rejected while {self.phase.value}")
            raise IllegalPhaseError(
                f"Cannot roll while {self.phase.value}; select one of the legal moves"
            )
        source = rng if rng is not None else self.rng
        player_index = self.current_index
        player = self.players[player_index]
        value = source.randint(config.DICE_MIN, config.DICE_MAX)
        self.dice_value = value
        logger.debug(f"{player.name} rolled a {value}")

        if value == config.EXTRA_TURN_ROLL:
            self.consecutive_sixes += 1
        else:
            self.consecutive_sixes = 0

        if self.consecutive_sixes >= config.MAX_CONSECUTIVE_SIXES:
            event = TurnForfeited(player.color)
            logger.info(event.describe())
            self.consecutive_sixes = 0
            self.advance_turn()
            self.history.append(event)
            return RollResult(
                player_index, player.color, value, RollOutcome.TURN_FORFEITED, [], [event]
            )

        legal = moves.generate(player, value, player_index)
        if not legal:
            event = NoLegalMoves(player.color, value)
            logger.debug(event.describe())
            self.advance_turn()
            self.history.append(event)
            return RollResult(
                player_index, player.color, value, RollOutcome.NO_LEGAL_MOVES, [], [event]
            )

        self.legal_moves = legal
        self.phase = TurnPhase.AWAITING_MOVE_SELECTION
        return RollResult(
            player_index, player.color, value, RollOutcome.MOVES_AVAILABLE, list(legal)
        )

    # --- Move executor ---
    def _resolve_captures(self, mover_index: int, piece: Piece) -> List[Capture]:
        cell = piece.position
        if config.SAFE_ZONE_PROTECTION and board.is_safe(cell):
            return []
        captures: List[Capture] = []
        for idx, other in enumerate(self.players):
            if idx == mover_index:
                continue
            for victim in other.pieces:
                if victim.state is PieceState.ON_MAIN_PATH and victim.position == cell:
                    victim.send_to_base()
                    captures.append(Capture(piece.ref, victim.ref, cell))
        return captures

    def apply_move(self, move: Move) -> MoveResult:
        self._require_active()
        if self.phase is not TurnPhase.AWAITING_MOVE_SELECTION or move not in self.legal_moves:
            logger.warning(f"Rejected move {move}; not in the current legal set")
            raise InvalidMoveSelection("Invalid move. Please select a highlighted piece.")

        player = self.players[move.player_index]
        piece = player.pieces[move.piece.piece_id]
        piece.move_to(move.to_state, move.target)
        logger.debug(f"{piece.ref} {move.kind.value} -> {piece.position}")

        events: List[Event] = []
        if piece.state is PieceState.ON_MAIN_PATH:
            events.extend(self._resolve_captures(move.player_index, piece))
        self.legal_moves = []

        if player.check_won():
            self.finished = True
            self.winner = player.color
            self.phase = TurnPhase.GAME_OVER
            events.append(Win(player.color))
        elif move.dice_value == config.EXTRA_TURN_ROLL:
            self.phase = TurnPhase.AWAITING_ROLL
            events.append(ExtraTurn(player.color))
        else:
            events.append(TurnPassed(self.advance_turn()))

        for ev in events:
            if not isinstance(ev, TurnPassed):
                logger.info(ev.describe())
        self.history.extend(events)
        return MoveResult(game=self, move=move, events=events)
