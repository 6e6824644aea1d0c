from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from . import engine
from .config import config
from .dice import DiceSource, make_rng
from .game import Game
from .types import Capture, Color, Event, RollOutcome, TurnPhase


@dataclass(slots=True)
class SimulationReport:
    winner: Optional[Color]
    turns: int
    rolls: int
    moves: int
    event_counts: Counter = field(default_factory=Counter)

    @property
    def completed(self) -> bool:
        return self.winner is not None

    def summary(self) -> str:
        winner = self.winner.display_name if self.winner is not None else "nobody"
        counts = ", ".join(f"{k}={v}" for k, v in sorted(self.event_counts.items()))
        return (
            f"winner={winner} turns={self.turns} rolls={self.rolls} "
            f"moves={self.moves} [{counts}]"
        )


@dataclass(slots=True)
class Simulator:
    """Drives a game headlessly: roll, then pick any legal move at random.

    The picker stands in for the input handler; it applies no strategy.
    """

    game: Game
    dice: DiceSource = field(default_factory=random.Random)
    picker: random.Random = field(default_factory=random.Random)
    rolls: int = field(default=0, init=False)
    moves: int = field(default=0, init=False)
    events: List[Event] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "Simulator":
        base = make_rng(seed)
        dice = make_rng(base.getrandbits(32))
        picker = make_rng(base.getrandbits(32))
        return cls(game=engine.new_game(rng=dice), dice=dice, picker=picker)

    def play_roll(self) -> None:
        """One roll plus, when there is a choice, one applied move."""
        result = engine.roll_dice(self.game, self.dice)
        self.rolls += 1
        self.events.extend(result.events)
        if result.outcome is not RollOutcome.MOVES_AVAILABLE:
            return
        move = self.picker.choice(result.legal_moves)
        outcome = engine.apply_move(self.game, move)
        self.moves += 1
        self.events.extend(outcome.events)

    def play_turn(self) -> None:
        """Roll until the turn changes hands or the game ends."""
        idx = self.game.current_index
        self.play_roll()
        while (
            self.game.phase is TurnPhase.AWAITING_ROLL
            and self.game.current_index == idx
        ):
            self.play_roll()

    def run(self, max_turns: int = config.MAX_TURNS) -> SimulationReport:
        turns = 0
        while self.game.phase is not TurnPhase.GAME_OVER and turns < max_turns:
            self.play_turn()
            turns += 1
        if self.game.phase is not TurnPhase.GAME_OVER:
            logger.warning(f"Simulation stopped after {turns} turns without a winner")
        counts = Counter(type(ev).__name__ for ev in self.events)
        return SimulationReport(
            winner=self.game.winner,
            turns=turns,
            rolls=self.rolls,
            moves=self.moves,
            event_counts=counts,
        )

    def captures(self) -> List[Capture]:
        return [ev for ev in self.events if isinstance(ev, Capture)]
