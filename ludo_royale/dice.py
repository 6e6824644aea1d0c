from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Optional, Protocol


class DiceSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of rolls; handy for reproducing a game."""

    values: Iterable[int] = ()
    _queue: Deque[int] = field(default_factory=deque, init=False, repr=False)

    def __post_init__(self) -> None:
        self._queue = deque(int(v) for v in self.values)

    def remaining(self) -> int:
        return len(self._queue)

    def randint(self, a: int, b: int) -> int:
        if not self._queue:
            raise IndexError("ScriptedDice ran out of values")
        value = self._queue.popleft()
        if not a <= value <= b:
            raise ValueError(f"Scripted value {value} outside [{a}, {b}]")
        return value
