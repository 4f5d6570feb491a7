import contextlib
import io
import threading
import unittest

from gomoku_ai.config import BLACK, EMPTY, WHITE
from gomoku_ai.core_api import GomokuCoreAPI
from gomoku_ai.difficulty import SearchConfig


class TestGomokuCoreAPI(unittest.TestCase):
    def setUp(self):
        self.game = GomokuCoreAPI(board_size=9, difficulty='easy')

    def test_defaults(self):
        game = GomokuCoreAPI()
        self.assertEqual(game.get_board_size(), (19, 19))
        self.assertEqual(game.difficulty, 'medium')
        self.assertEqual(game.human_role, BLACK)

    def test_human_move_validation(self):
        self.assertTrue(self.game.human_move(4, 4))
        self.assertFalse(self.game.human_move(4, 4))
        self.assertFalse(self.game.human_move(9, 0))
        self.assertFalse(self.game.human_move(0, -1))
        self.assertFalse(self.game.apply_ai_move(4, 4))

        with self.assertLogs('gomoku_ai.core_api', level='ERROR'):
            self.game.human_move(4, 4)

    def test_first_ai_move_is_center(self):
        move = self.game.get_ai_move()
        self.assertEqual(move, (4, 4))
        self.assertTrue(self.game.apply_ai_move(*move))
        self.assertEqual(self.game.get_board_state()[4][4], WHITE)

    def test_ai_blocks_four(self):
        for c in range(1, 5):
            self.game.human_move(4, c)
        self.game.apply_ai_move(4, 0)
        self.assertEqual(self.game.get_ai_move(), (4, 5))

    def test_set_difficulty_replaces_engine(self):
        engine = self.game.engine
        self.game.set_difficulty('HARD')
        self.assertIsNot(self.game.engine, engine)
        self.assertEqual(self.game.difficulty, 'hard')
        self.assertEqual(self.game.engine.config.time_budget_ms, 3000)

        self.game.set_difficulty('unknown')
        self.assertEqual(self.game.difficulty, 'medium')

    def test_custom_presets(self):
        configs = {'easy': SearchConfig('easy', max_depth=1),
                   'medium': SearchConfig('medium', max_depth=2)}
        game = GomokuCoreAPI(board_size=9, difficulty='easy', configs=configs)
        self.assertEqual(game.engine.config.max_depth, 1)

    def test_ai_can_play_black(self):
        game = GomokuCoreAPI(board_size=9, difficulty='easy', ai_role=BLACK)
        self.assertEqual(game.human_role, WHITE)
        game.apply_ai_move(*game.get_ai_move())
        self.assertEqual(game.get_board_state()[4][4], BLACK)

    def test_winner_and_game_over(self):
        for c in range(5):
            self.game.human_move(0, c)
        self.assertEqual(self.game.check_winner(), BLACK)
        self.assertTrue(self.game.is_game_over())
        self.assertIsNone(self.game.get_ai_move())

    def test_reset(self):
        self.game.human_move(4, 4)
        self.game.reset()
        self.assertTrue(all(cell == EMPTY for row in self.game.get_board_state() for cell in row))
        self.assertEqual(self.game.check_winner(), EMPTY)

    def test_board_state_is_a_copy(self):
        state = self.game.get_board_state()
        state[0][0] = BLACK
        self.assertEqual(self.game.board.get(0, 0), EMPTY)

    def test_print_board(self):
        self.game.human_move(0, 0)
        self.game.apply_ai_move(1, 1)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.game.print_board()

        text = out.getvalue()
        self.assertIn("9x9, 2 stones, black = human", text)
        self.assertIn(self.game.board.display(), text)

    def test_async_move(self):
        self.game.human_move(4, 4)
        done = threading.Event()
        result = []

        def on_done(move):
            result.append(move)
            done.set()

        thread = self.game.get_ai_move_async(on_done)
        self.assertTrue(done.wait(timeout=30))
        thread.join(timeout=5)

        self.assertEqual(len(result), 1)
        self.assertEqual(self.game.board.get(*result[0]), EMPTY)

    def test_async_error_reaches_callback(self):
        errors = []
        done = threading.Event()

        def boom(board):
            raise RuntimeError("search failed")

        def on_error(e):
            errors.append(e)
            done.set()

        self.game.engine.find_best_move = boom
        with self.assertLogs('gomoku_ai.core_api', level='ERROR'):
            self.game.get_ai_move_async(lambda move: None, on_error).join(timeout=5)

        self.assertTrue(done.is_set())
        self.assertIsInstance(errors[0], RuntimeError)


if __name__ == '__main__':
    unittest.main()
