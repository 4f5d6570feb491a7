"""
Gomoku Core API
===============
Game-level wrapper around the engine for the code that orchestrates a turn
(web handlers, robot controllers, console demos).

Core API:
- Board: Game state management
- SearchEngine: AI move calculation, one instance per difficulty
- BLACK=1, WHITE=-1: Player constants
"""

import logging
import threading

from .board import Board
from .config import BLACK, DEFAULT_BOARD_SIZE, EMPTY, WHITE
from .difficulty import DEFAULT_DIFFICULTY, get_search_config
from .minmax import (DEPTH_COMPLETED, FORCED_LOSS, FORCED_WIN, SEARCH_COMPLETED,
                     TIME_LIMIT, SearchEngine, describe_score)

logger = logging.getLogger(__name__)


class GomokuCoreAPI:
    """
    Simplified API wrapper: one board, one human, one engine.
    """

    def __init__(self, board_size=DEFAULT_BOARD_SIZE, difficulty=DEFAULT_DIFFICULTY,
                 ai_role=WHITE, configs=None):
        """
        Initialize the Gomoku game.

        Args:
            board_size: Board size (15 and 19 are the usual choices)
            difficulty: 'easy', 'medium' or 'hard'
            ai_role: Side the AI plays; the human plays the other one
            configs: Optional difficulty presets, e.g. from load_search_configs()
        """
        self.board_size = board_size
        self.board = Board(board_size)
        self.ai_role = ai_role
        self.human_role = -ai_role
        self.configs = configs
        self.engine = None
        self.set_difficulty(difficulty)

    def set_difficulty(self, difficulty):
        """Select a difficulty; builds a fresh engine for it."""
        config = get_search_config(difficulty, self.configs)
        self.engine = SearchEngine(config, self.ai_role, on_event=self._log_search_event)
        logger.info("Difficulty set to %s (depth=%d, budget=%s ms)",
                    config.difficulty, config.max_depth, config.time_budget_ms)

    @property
    def difficulty(self):
        return self.engine.config.difficulty

    def reset(self):
        """Reset the game to initial state."""
        self.board = Board(self.board_size)
        logger.info("Game reset! Board size: %dx%d", self.board_size, self.board_size)

    def human_move(self, x: int, y: int) -> bool:
        """
        Register a human move.

        Args:
            x: Row position (0 to board_size-1)
            y: Column position (0 to board_size-1)

        Returns:
            True if move was valid, False otherwise
        """
        return self._apply(x, y, self.human_role, "Human")

    def get_ai_move(self):
        """
        Calculate the best AI move.

        Returns:
            (x, y) tuple for the best move, or None if game over
        """
        if self.board.is_game_over():
            logger.warning("Game is already over!")
            return None

        logger.debug("AI thinking (%s)...", self.difficulty)
        return self.engine.find_best_move(self.board)

    def get_ai_move_async(self, on_done, on_error=None):
        """
        Calculate the AI move on a worker thread.

        Args:
            on_done: Called with the move (or None) when the search finishes
            on_error: Called with the exception if the search fails

        Returns:
            The started thread
        """
        def ai_thread():
            try:
                move = self.get_ai_move()
            except Exception as e:
                logger.exception("AI search failed")
                if on_error is None:
                    raise
                on_error(e)
            else:
                on_done(move)

        thread = threading.Thread(target=ai_thread, daemon=True)
        thread.start()
        return thread

    def apply_ai_move(self, x: int, y: int) -> bool:
        """
        Apply the AI's move to the board.

        Returns:
            True if move was valid
        """
        return self._apply(x, y, self.ai_role, "AI")

    def _apply(self, x, y, role, who):
        if not self.board.in_bounds(x, y):
            logger.error("%s move (%d, %d) out of bounds for %dx%d board",
                         who, x, y, self.board_size, self.board_size)
            return False

        if self.board.board[x][y] != EMPTY:
            logger.error("%s move (%d, %d): position already occupied", who, x, y)
            return False

        self.board.put(x, y, role)
        logger.info("%s placed at (%d, %d)", who, x, y)
        return True

    def check_winner(self) -> int:
        """
        Check if there's a winner.

        Returns:
            BLACK (1) or WHITE (-1) for the winner, 0 if no winner
        """
        return self.board.get_winner()

    def is_game_over(self) -> bool:
        """Check if game has ended."""
        return self.board.is_game_over()

    def get_board_state(self) -> list:
        """
        Get current board state.

        Returns:
            NxN 2D list: 0=empty, 1=black, -1=white
        """
        return [row[:] for row in self.board.board]

    def get_board_size(self) -> tuple:
        """Get the board dimensions as (rows, cols)."""
        return (self.board_size, self.board_size)

    def print_board(self):
        """Print the board to console (for debugging). Black is O, white is X."""
        who = 'human' if self.human_role == BLACK else 'AI'
        print(f"\n{self.board_size}x{self.board_size}, {self.board.stone_count} stones, black = {who}")
        print(self.board.display())

    def _log_search_event(self, event):
        if event.kind == DEPTH_COMPLETED:
            logger.debug("Depth %d, score %s, move %s (%d nodes, %.0f ms)",
                         event.depth, event.score, event.move, event.nodes, event.elapsed_ms)
        elif event.kind == FORCED_WIN:
            logger.info("Found winning move at depth %d", event.depth)
        elif event.kind == FORCED_LOSS:
            logger.info("Detecting forced loss at depth %d, searching deeper", event.depth)
        elif event.kind == TIME_LIMIT:
            logger.info("Time limit reached at depth %d", event.depth)
        elif event.kind == SEARCH_COMPLETED:
            quality = describe_score(event.score, self.engine.win_threshold)
            logger.info("AI chose %s in %.0f ms | move quality: %s (score %s)",
                        event.move, event.elapsed_ms, quality, event.score)
