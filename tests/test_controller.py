import unittest

from blocktris.core.controller import GameController
from blocktris.core.factory import new_piece
from blocktris.core.pieces import O_SHAPE
from blocktris.core.snapshot import GameStatus
from blocktris.core.sound import SoundEvent
from tests.helpers import ManualTimer, MemoryLeaderboard, RecordingSound

GRAY = (1, 1, 1)


class ControllerTests(unittest.TestCase):
    def setUp(self):
        self.timer = ManualTimer()
        self.sound = RecordingSound()
        self.board = MemoryLeaderboard([1200, 300])
        self.controller = GameController(self.board, self.timer, self.sound, rng_seed=9)
        self.snapshots = []
        self.controller.add_render_listener(self.snapshots.append)

    def test_initial_state_is_idle(self):
        snap = self.controller.snapshot()
        self.assertIs(snap.status, GameStatus.IDLE)
        self.assertIsNone(snap.current)
        self.assertIsNone(snap.next_piece)
        self.assertEqual(len(snap.cells), 20)
        self.assertEqual(len(snap.cells[0]), 10)

    def test_start_spawns_and_schedules(self):
        self.controller.start(400)
        self.assertIs(self.controller.status, GameStatus.RUNNING)
        self.assertTrue(self.timer.active)
        self.assertEqual(self.timer.interval_ms, 400)
        self.assertEqual(self.controller.top_scores, [1200, 300])
        snap = self.snapshots[-1]
        self.assertIsNotNone(snap.current)
        self.assertIsNotNone(snap.next_piece)
        self.assertEqual(snap.score, 0)
        self.assertEqual(self.sound.music, ["start"])

    def test_restart_replaces_timer_and_state(self):
        self.controller.start(400)
        self.controller.game.score = 500
        self.controller.game.board.grid[19][0] = GRAY
        self.controller.start(250)
        self.assertEqual(self.timer.starts, 2)
        self.assertEqual(self.timer.cancels, 1)
        self.assertEqual(self.timer.interval_ms, 250)
        self.assertEqual(self.controller.score, 0)
        self.assertIsNone(self.controller.game.board.grid[19][0])

    def test_tick_moves_piece_down_and_renders(self):
        self.controller.start(400)
        y0 = self.controller.game.current.y
        count = len(self.snapshots)
        self.timer.fire()
        self.assertEqual(self.controller.game.current.y, y0 + 1)
        self.assertEqual(len(self.snapshots), count + 1)
        self.assertEqual(self.snapshots[-1].current.y, y0 + 1)

    def test_pause_keeps_timer_but_ticks_do_nothing(self):
        self.controller.start(400)
        self.controller.pause()
        self.assertIs(self.controller.status, GameStatus.PAUSED)
        self.assertTrue(self.snapshots[-1].paused)
        self.assertTrue(self.timer.active)
        y0 = self.controller.game.current.y
        self.timer.fire(3)
        self.controller.move_left()
        self.controller.hard_drop()
        self.assertEqual(self.controller.game.current.y, y0)

        self.controller.resume()
        self.assertIs(self.controller.status, GameStatus.RUNNING)
        self.timer.fire()
        self.assertEqual(self.controller.game.current.y, y0 + 1)
        self.assertEqual(self.sound.music, ["start", "pause", "resume"])

    def test_toggle_pause_flips_session_flag(self):
        self.controller.start(400)
        self.controller.toggle_pause()
        self.assertTrue(self.controller.game.paused)
        self.controller.toggle_pause()
        self.assertFalse(self.controller.game.paused)

    def test_inputs_are_noops_when_idle(self):
        for action in (
            self.controller.move_left,
            self.controller.move_right,
            self.controller.soft_drop,
            self.controller.rotate_cw,
            self.controller.hard_drop,
            self.controller.tick,
        ):
            action()
        self.assertEqual(self.snapshots, [])
        self.assertIs(self.controller.status, GameStatus.IDLE)

    def test_inputs_render_after_each_action(self):
        self.controller.start(400)
        x0 = self.controller.game.current.x
        self.controller.move_right()
        self.assertEqual(self.snapshots[-1].current.x, x0 + 1)
        self.assertIn(SoundEvent.MOVE, self.sound.events)
        self.controller.rotate_cw()
        self.controller.soft_drop()
        self.controller.hard_drop()
        self.assertIn(SoundEvent.DROP, self.sound.events)

    def test_game_over_records_score_and_stops_timer(self):
        self.controller.start(400)
        game = self.controller.game
        game._random_piece = lambda: new_piece(O_SHAPE, game.board.width)
        game.score = 700
        for row in range(2, 20):
            game.board.grid[row][4] = GRAY
        game.current = new_piece(O_SHAPE, game.board.width)

        self.timer.fire()

        self.assertIs(self.controller.status, GameStatus.ENDED)
        self.assertFalse(self.timer.active)
        self.assertEqual(self.board.recorded, [700])
        self.assertEqual(self.controller.top_scores, [1200, 700, 300])
        self.assertIn(SoundEvent.GAME_OVER, self.sound.events)
        self.assertEqual(self.sound.music[-1], "stop")
        self.assertIs(self.snapshots[-1].status, GameStatus.ENDED)

        # depois do fim, nada mais mexe no estado
        self.timer.fire()
        self.controller.move_left()
        self.controller.end()
        self.assertEqual(self.board.recorded, [700])

    def test_start_after_game_over_runs_again(self):
        self.controller.start(400)
        self.controller.end()
        self.assertIs(self.controller.status, GameStatus.ENDED)
        self.controller.start(400)
        self.assertIs(self.controller.status, GameStatus.RUNNING)
        self.assertTrue(self.timer.active)

    def test_quit_discards_everything_but_leaderboard(self):
        self.controller.start(400)
        self.controller.game.score = 100
        self.controller.quit()
        self.assertIs(self.controller.status, GameStatus.IDLE)
        self.assertIsNone(self.controller.game)
        self.assertFalse(self.timer.active)
        self.assertEqual(self.board.recorded, [])
        snap = self.snapshots[-1]
        self.assertIsNone(snap.current)
        self.assertEqual(snap.score, 0)

    def test_toggle_sound_flips_mute(self):
        self.assertFalse(self.controller.toggle_sound())
        self.assertTrue(self.sound.muted)
        self.assertTrue(self.controller.toggle_sound())
        self.assertFalse(self.sound.muted)

    def test_remove_render_listener(self):
        self.controller.remove_render_listener(self.snapshots.append)
        self.controller.start(400)
        self.assertEqual(self.snapshots, [])

    def test_snapshot_is_detached_from_board(self):
        self.controller.start(400)
        snap = self.controller.snapshot()
        self.controller.game.board.grid[19][0] = GRAY
        self.assertIsNone(snap.cells[19][0])


if __name__ == "__main__":
    unittest.main()
