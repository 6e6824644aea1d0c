import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(slots=True)
class Config:
    # --- Constants ---
    GRID_SIZE: int = 15
    NUM_PLAYERS: int = 4
    PIECES_PER_PLAYER: int = 4
    HOME_PATH_LENGTH: int = 5
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_BASE_ROLL: int = 6
    EXTRA_TURN_ROLL: int = 6

    # Rule switches
    MAX_CONSECUTIVE_SIXES: int = int(os.getenv("LUDO_MAX_CONSECUTIVE_SIXES", 3))
    SAFE_ZONE_PROTECTION: bool = _env_flag("LUDO_SAFE_ZONE_PROTECTION", "1")
    SKIP_FINISHED_PLAYERS: bool = _env_flag("LUDO_SKIP_FINISHED_PLAYERS", "1")

    # Tooling
    LOG_LEVEL: str = os.getenv("LUDO_LOG_LEVEL", "INFO")
    MAX_TURNS: int = int(os.getenv("LUDO_MAX_TURNS", 5000))

    # Shared clockwise track, (row, col) on the 15x15 grid
    MAIN_PATH: list[tuple[int, int]] = field(
        default_factory=lambda: [
            (6, 1), (6, 2), (6, 3), (6, 4), (6, 5),
            (5, 6), (4, 6), (3, 6), (2, 6), (1, 6), (0, 6),
            (0, 7),
            (0, 8), (1, 8), (2, 8), (3, 8), (4, 8), (5, 8),
            (6, 9), (6, 10), (6, 11), (6, 12), (6, 13), (6, 14),
            (7, 14),
            (8, 14), (8, 13), (8, 12), (8, 11), (8, 10), (8, 9),
            (9, 8), (10, 8), (11, 8), (12, 8), (13, 8), (14, 8),
            (14, 7),
            (14, 6), (13, 6), (12, 6), (11, 6), (10, 6), (9, 6),
            (8, 5), (8, 4), (8, 3), (8, 2), (8, 1), (8, 0),
            (7, 0),
        ]
    )

    # Per color, indexed by Color: Red, Green, Yellow, Blue
    HOME_PATHS: list[list[tuple[int, int]]] = field(
        default_factory=lambda: [
            [(7, 1), (7, 2), (7, 3), (7, 4), (7, 5)],
            [(13, 7), (12, 7), (11, 7), (10, 7), (9, 7)],
            [(7, 13), (7, 12), (7, 11), (7, 10), (7, 9)],
            [(1, 7), (2, 7), (3, 7), (4, 7), (5, 7)],
        ]
    )
    START_CELLS: list[tuple[int, int]] = field(
        default_factory=lambda: [(6, 1), (1, 8), (8, 13), (13, 6)]
    )
    # Last shared cell before turning off; Green's (9,6) sits next to its
    # innermost home cell (9,7) like Red's (6,5) and Yellow's (8,9).
    HOME_ENTRANCE_CELLS: list[tuple[int, int]] = field(
        default_factory=lambda: [(6, 5), (9, 6), (8, 9), (6, 9)]
    )
    BASE_SLOTS: list[list[tuple[int, int]]] = field(
        default_factory=lambda: [
            [(1, 1), (1, 4), (4, 1), (4, 4)],
            [(10, 1), (10, 4), (13, 1), (13, 4)],
            [(10, 10), (10, 13), (13, 10), (13, 13)],
            [(1, 10), (1, 13), (4, 10), (4, 13)],
        ]
    )
    # Star squares on MAIN_PATH, every start cell included
    SAFE_INDICES: list[int] = field(
        default_factory=lambda: [0, 5, 8, 13, 18, 21, 26, 31, 34, 39, 42]
    )
    CENTER_CELL: tuple[int, int] = (7, 7)

    # Derived (populated in __post_init__ due to slots)
    MAIN_PATH_LENGTH: int = 0

    def __post_init__(self):
        self.MAIN_PATH_LENGTH = len(self.MAIN_PATH)

        if self.MAX_CONSECUTIVE_SIXES < 1:
            raise ValueError("MAX_CONSECUTIVE_SIXES must be at least 1")
        if self.MAX_TURNS < 1:
            raise ValueError("MAX_TURNS must be positive")


config = Config()
