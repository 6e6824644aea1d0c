class LudoError(Exception):
    """Base exception for engine errors."""

    pass


class InvalidMoveSelection(LudoError):
    """Raised when the chosen move is not in the current legal set."""

    pass


class GameNotStarted(LudoError):
    """Raised on a mutating call before new_game or after reset."""

    pass


class GameAlreadyOver(LudoError):
    """Raised on a mutating call after a player has won."""

    pass


class IllegalPhaseError(LudoError):
    """Raised when an operation does not fit the current turn phase."""

    pass


class LookupNotFound(LudoError, LookupError):
    """Raised when a cell is not on the expected path (board data fault)."""

    pass
