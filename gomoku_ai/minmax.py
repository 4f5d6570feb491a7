"""
Minimax algorithm with Alpha-Beta pruning for the Gomoku engine.
Fixed-depth search for easy/medium, iterative deepening under a time
budget for hard.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .config import EMPTY, FORCED_WIN_RATIO, MAX_SCORE, WHITE
from .evaluate import Evaluator, find_immediate_threat, is_winning_point
from .moves import Move, generate_moves
from .shape import ThreatType

# Search event kinds
DEPTH_COMPLETED = 'depth_completed'
FORCED_WIN = 'forced_win'
FORCED_LOSS = 'forced_loss'
TIME_LIMIT = 'time_limit'
SEARCH_COMPLETED = 'search_completed'


class SearchTimeout(Exception):
    """Raised inside a search when the time budget runs out mid-depth."""


@dataclass
class EvaluationResult:
    score: float
    best_move: Optional[Move] = None


@dataclass(frozen=True)
class SearchEvent:
    """Diagnostics reported to the engine's observer."""
    kind: str
    depth: int
    score: float = 0
    move: Optional[Tuple[int, int]] = None
    elapsed_ms: float = 0
    nodes: int = 0


def describe_score(score, win_threshold=90000):
    """Human-readable quality of a root score."""
    if score >= win_threshold:
        return 'winning'
    if score >= 5000:
        return 'excellent'
    if score >= 1000:
        return 'strong'
    if score >= 100:
        return 'good'
    if score <= -win_threshold:
        return 'defensive'
    return 'solid'


class SearchEngine:
    """
    Minimax AI with Alpha-Beta pruning, bound to one side and one
    SearchConfig. Build a new engine when the difficulty changes.
    """

    def __init__(self, config, ai_role=WHITE,
                 on_event: Optional[Callable[[SearchEvent], None]] = None,
                 clock: Callable[[], float] = time.perf_counter):
        """
        Args:
            config: SearchConfig for the chosen difficulty
            ai_role: Side the engine plays (BLACK or WHITE)
            on_event: Optional observer receiving SearchEvent diagnostics
            clock: Monotonic clock in seconds
        """
        self.config = config
        self.ai_role = ai_role
        self.human_role = -ai_role
        self.evaluator = Evaluator(ai_role, radius=config.search_radius)
        self.on_event = on_event or (lambda event: None)
        self.clock = clock
        self.node_count = 0
        self.completed_depth = 0
        self._deadline = None
        self.win_threshold = FORCED_WIN_RATIO * self.evaluator.costs[ThreatType.FIVE]

    def generate_moves(self, board):
        return generate_moves(board, self.evaluator, self.config.candidate_cap)

    def leaf_score(self, board, maximizing):
        """Evaluation of a leaf, read from the AI's side."""
        score = self.evaluator.evaluate(board, ai_to_move=maximizing)
        return score if maximizing else -score

    def search(self, board, depth, alpha=-MAX_SCORE, beta=MAX_SCORE, maximizing=True, last=None):
        """
        Alpha-Beta search.

        Args:
            board: Game board, restored before returning
            depth: Remaining search depth
            alpha: Best score the AI can guarantee so far
            beta: Best score the human can guarantee so far
            maximizing: True if the AI moves at this node
            last: Move that led to this node, None at the root

        Returns:
            EvaluationResult; best_move is None at leaves

        Raises:
            SearchTimeout: if a deadline is set and has passed
        """
        self.node_count += 1
        if self._deadline is not None and self.clock() > self._deadline:
            raise SearchTimeout()

        if depth <= 0 or self._is_terminal(board, last):
            return EvaluationResult(self.leaf_score(board, maximizing))

        role = self.ai_role if maximizing else self.human_role
        best_score = -MAX_SCORE if maximizing else MAX_SCORE
        best_move = None

        for move in self.generate_moves(board):
            with board.placed(move.row, move.col, role):
                result = self.search(board, depth - 1, alpha, beta, not maximizing,
                                     (move.row, move.col))

            if maximizing:
                if result.score > best_score:
                    best_score = result.score
                    best_move = Move(move.row, move.col, best_score)
                alpha = max(alpha, result.score)
            else:
                if result.score < best_score:
                    best_score = result.score
                    best_move = Move(move.row, move.col, best_score)
                beta = min(beta, result.score)

            if beta <= alpha:
                break

        return EvaluationResult(best_score, best_move)

    @staticmethod
    def _is_terminal(board, last):
        # A non-terminal parent means any new five runs through the last move
        if last is None:
            return board.is_game_over()
        return board.winner_at(*last) != EMPTY or board.is_full()

    def _elapsed_ms(self, start):
        return (self.clock() - start) * 1000

    def iterative_deepening(self, board, start=None):
        """
        Search depth 1, 2, ... up to max_depth until the time budget runs out.
        Only fully completed depths are used; a depth still running when the
        budget expires is abandoned.
        """
        if start is None:
            start = self.clock()
        budget = self.config.time_budget_ms
        best = EvaluationResult(-MAX_SCORE)

        for depth in range(1, self.config.max_depth + 1):
            elapsed = self._elapsed_ms(start)
            # Depth 1 always runs so there is an answer to fall back on
            if depth > 1 and elapsed > budget:
                self.on_event(SearchEvent(TIME_LIMIT, depth - 1, best.score, self._coords(best),
                                          elapsed, self.node_count))
                break

            self._deadline = None if depth == 1 else start + budget / 1000
            try:
                result = self.search(board, depth)
            except SearchTimeout:
                self.on_event(SearchEvent(TIME_LIMIT, depth - 1, best.score, self._coords(best),
                                          self._elapsed_ms(start), self.node_count))
                break
            finally:
                self._deadline = None

            if result.best_move is not None:
                best = result
                self.completed_depth = depth
                self.on_event(SearchEvent(DEPTH_COMPLETED, depth, result.score, self._coords(result),
                                          self._elapsed_ms(start), self.node_count))

                if result.score >= self.win_threshold:
                    self.on_event(SearchEvent(FORCED_WIN, depth, result.score, self._coords(result),
                                              self._elapsed_ms(start), self.node_count))
                    break

            if result.score <= -self.win_threshold:
                # Keep going: a deeper search may still find a defence
                self.on_event(SearchEvent(FORCED_LOSS, depth, result.score, self._coords(result),
                                          self._elapsed_ms(start), self.node_count))

        return best

    def forced_reply(self, board):
        """
        One-move tactics settled without searching: complete a five when the
        AI has one, otherwise take a point the human would win on.

        Returns:
            (row, col) or None
        """
        for role in (self.ai_role, self.human_role):
            point = find_immediate_threat(board, role)
            if point is not None and is_winning_point(board, role, *point):
                return point
        return None

    def find_best_move(self, board):
        """
        Main entry point.

        Args:
            board: Current position; left unchanged

        Returns:
            (row, col) of the chosen move, or None if the board is full
        """
        if board.is_full():
            return None

        self.node_count = 0
        self.completed_depth = 0
        start = self.clock()

        point = self.forced_reply(board)
        if point is not None:
            with board.placed(point[0], point[1], self.ai_role):
                score = self.leaf_score(board, False)
                won = board.winner_at(*point) == self.ai_role
            if won:
                self.on_event(SearchEvent(FORCED_WIN, 0, score, point,
                                          self._elapsed_ms(start), self.node_count))
            self.on_event(SearchEvent(SEARCH_COMPLETED, 0, score, point,
                                      self._elapsed_ms(start), self.node_count))
            return point

        if self.config.iterative:
            result = self.iterative_deepening(board, start)
        else:
            result = self.search(board, self.config.max_depth)
            self.completed_depth = self.config.max_depth
            self.on_event(SearchEvent(DEPTH_COMPLETED, self.config.max_depth, result.score,
                                      self._coords(result), self._elapsed_ms(start), self.node_count))

        move = result.best_move
        if move is None:
            # Position is already decided; still answer with a legal move
            move = self.generate_moves(board)[0]

        self.on_event(SearchEvent(SEARCH_COMPLETED, self.completed_depth, result.score,
                                  (move.row, move.col), self._elapsed_ms(start), self.node_count))
        return (move.row, move.col)

    @staticmethod
    def _coords(result):
        if result.best_move is None:
            return None
        return (result.best_move.row, result.best_move.col)
