import random
import unittest
from unittest import mock

from loguru import logger

from ludo_royale import board, engine
from ludo_royale.config import config
from ludo_royale.dice import ScriptedDice
from ludo_royale.errors import (
    GameNotStarted,
    IllegalPhaseError,
    InvalidMoveSelection,
)
from ludo_royale.game import Game
from ludo_royale.types import (
    Color,
    NoLegalMoves,
    PieceState,
    RollOutcome,
    TurnForfeited,
    TurnPhase,
)


class RollTests(unittest.TestCase):
    def test_roll_dice_range(self):
        game = Game.new(rng=random.Random(11))
        for _ in range(60):
            result = game.roll_dice()
            self.assertTrue(1 <= result.dice_value <= 6)
            if result.outcome is RollOutcome.MOVES_AVAILABLE:
                game.apply_move(result.legal_moves[0])
            if game.finished:
                break

    def test_no_legal_moves_passes_turn(self):
        game = Game.new()
        result = game.roll_dice(ScriptedDice([3]))
        self.assertEqual(result.outcome, RollOutcome.NO_LEGAL_MOVES)
        self.assertEqual(result.legal_moves, [])
        self.assertEqual(result.events, [NoLegalMoves(Color.RED, 3)])
        self.assertEqual(game.current_index, 1)
        self.assertEqual(game.phase, TurnPhase.AWAITING_ROLL)
        self.assertEqual(game.dice_value, 3)

    def test_moves_available_waits_for_selection(self):
        game = Game.new()
        result = game.roll_dice(ScriptedDice([6]))
        self.assertEqual(result.outcome, RollOutcome.MOVES_AVAILABLE)
        self.assertEqual(game.phase, TurnPhase.AWAITING_MOVE_SELECTION)
        self.assertEqual(game.legal_moves, result.legal_moves)
        with self.assertRaises(IllegalPhaseError):
            game.roll_dice(ScriptedDice([1]))

    def test_turn_order_wraps(self):
        game = Game.new(rng=ScriptedDice([1, 2, 3, 4, 5]))
        seen = []
        for _ in range(5):
            seen.append(game.current_player().color)
            game.roll_dice()
        self.assertEqual(
            seen, [Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE, Color.RED]
        )

    def test_injected_source_overrides_game_rng(self):
        game = Game.new(rng=ScriptedDice([2]))
        result = game.roll_dice(ScriptedDice([6]))
        self.assertEqual(result.dice_value, 6)
        self.assertEqual(game.rng.remaining(), 1)


class ConsecutiveSixesTests(unittest.TestCase):
    def setUp(self):
        self.game = Game.new(rng=ScriptedDice([6, 6, 6]))

    def test_three_sixes_forfeit_turn(self):
        first = self.game.roll_dice()
        self.game.apply_move(first.legal_moves[0])
        self.assertEqual(self.game.consecutive_sixes, 1)
        second = self.game.roll_dice()
        self.game.apply_move(second.legal_moves[-1])
        self.assertEqual(self.game.consecutive_sixes, 2)
        before = [(p.state, p.position) for p in self.game.players[0].pieces]

        third = self.game.roll_dice()
        self.assertEqual(third.outcome, RollOutcome.TURN_FORFEITED)
        self.assertEqual(third.legal_moves, [])
        self.assertEqual(third.events, [TurnForfeited(Color.RED)])
        self.assertEqual(self.game.consecutive_sixes, 0)
        self.assertEqual(self.game.current_index, 1)
        self.assertEqual(
            [(p.state, p.position) for p in self.game.players[0].pieces], before
        )

    def test_non_six_resets_counter(self):
        self.game = Game.new(rng=ScriptedDice([6, 2]))
        self.game.apply_move(self.game.roll_dice().legal_moves[0])
        self.assertEqual(self.game.consecutive_sixes, 1)
        self.game.roll_dice()
        self.assertEqual(self.game.consecutive_sixes, 0)

    def test_counter_resets_when_turn_changes_hands(self):
        red = self.game.players[0]
        for pc in red.pieces[1:]:
            pc.move_to(PieceState.HOME, None)
        red.pieces[0].move_to(PieceState.ON_HOME_PATH, board.home_path(Color.RED)[2])

        result = self.game.roll_dice()
        self.assertEqual(result.outcome, RollOutcome.NO_LEGAL_MOVES)
        self.assertEqual(self.game.current_index, 1)
        self.assertEqual(self.game.consecutive_sixes, 0)

    def test_forfeit_threshold_is_configurable(self):
        with mock.patch.object(config, "MAX_CONSECUTIVE_SIXES", 1):
            result = self.game.roll_dice()
        self.assertEqual(result.outcome, RollOutcome.TURN_FORFEITED)


class RotationTests(unittest.TestCase):
    def test_finished_players_are_skipped(self):
        game = Game.new(rng=ScriptedDice([1]))
        game.players[1].has_finished = True
        game.roll_dice()
        self.assertEqual(game.current_player().color, Color.YELLOW)

    def test_rotation_without_skipping(self):
        game = Game.new(rng=ScriptedDice([1]))
        game.players[1].has_finished = True
        with mock.patch.object(config, "SKIP_FINISHED_PLAYERS", False):
            game.roll_dice()
        self.assertEqual(game.current_player().color, Color.GREEN)


class LifecycleTests(unittest.TestCase):
    def test_unstarted_game_rejects_rolls(self):
        game = Game()
        self.assertEqual(game.phase, TurnPhase.NOT_STARTED)
        with self.assertRaises(GameNotStarted):
            game.roll_dice(ScriptedDice([6]))

    def test_reset_returns_to_unstarted(self):
        game = Game.new(rng=ScriptedDice([6]))
        game.roll_dice()
        game.reset()
        self.assertFalse(game.started)
        self.assertEqual(game.players, [])
        self.assertEqual(game.legal_moves, [])
        self.assertEqual(game.phase, TurnPhase.NOT_STARTED)
        with self.assertRaises(GameNotStarted):
            game.roll_dice(ScriptedDice([6]))
        with self.assertRaises(GameNotStarted):
            game.current_player()

    def test_restart_after_reset(self):
        game = Game.new()
        game.reset()
        game.start()
        self.assertTrue(game.started)
        self.assertEqual(len(game.players), 4)
        for player in game.players:
            self.assertEqual(len(player.pieces), 4)
            self.assertTrue(all(p.is_in_base() for p in player.pieces))


class WarningLogTests(unittest.TestCase):
    def setUp(self):
        self.messages = []
        self.sink_id = logger.add(self.messages.append, level="WARNING", format="{message}")

    def tearDown(self):
        logger.remove(self.sink_id)

    def test_unstarted_game_logs_before_raising(self):
        with self.assertRaises(GameNotStarted):
            Game().roll_dice(ScriptedDice([6]))
        self.assertEqual(len(self.messages), 1)
        self.assertIn("before the game started", self.messages[0])

    def test_roll_out_of_phase_logs_before_raising(self):
        game = Game.new(rng=ScriptedDice([6, 6]))
        game.roll_dice()
        with self.assertRaises(IllegalPhaseError):
            game.roll_dice()
        self.assertEqual(len(self.messages), 1)
        self.assertIn("awaiting", self.messages[0])

    def test_unknown_piece_selection_logs_before_raising(self):
        game = Game.new(rng=ScriptedDice([1]))
        with self.assertRaises(InvalidMoveSelection):
            engine.find_move(game, Color.RED, 0)
        self.assertEqual(len(self.messages), 1)
        self.assertIn("Red piece 0", self.messages[0])


if __name__ == "__main__":
    unittest.main()
