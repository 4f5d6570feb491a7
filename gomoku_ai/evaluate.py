"""
Board evaluation module for the Gomoku engine.
Scores empty points by the threats they would create and detects
one-move wins for either side.
"""

from .config import ALL_DIRECTIONS, EMPTY, NEED_TO_WIN, SEARCH_RADIUS, TACTICAL_BONUS
from .shape import THREAT_COST, combination_bonus, threats_at


# Share of the evaluation given to the side to move
ATTACK_WEIGHT = 1.5


def is_winning_point(board, role, i, j):
    """True if a `role` stone at empty (i, j) would make five or more in a row."""
    for dx, dy in ALL_DIRECTIONS:
        count, _ = board.line_run(i, j, dx, dy, role)
        if count >= NEED_TO_WIN:
            return True
    return False


def is_critical_four(board, role, i, j):
    """True if a `role` stone at empty (i, j) would make a run of four or more with an open end."""
    for dx, dy in ALL_DIRECTIONS:
        count, open_ends = board.line_run(i, j, dx, dy, role)
        if count >= 4 and open_ends:
            return True
    return False


def find_immediate_threat(board, role, points=None):
    """
    Find a point where `role` wins at once, or failing that, a point that
    gives `role` a four with an open end.

    Points are tried as hypothetical placements; the board is not modified.

    Args:
        board: Game board
        role: Player to look for threats for
        points: Empty points to try, in row-major order (default: all of them)

    Returns:
        (row, col) of the first such point in row-major order, or None
    """
    empty_points = board.get_valid_moves() if points is None else points

    for i, j in empty_points:
        if is_winning_point(board, role, i, j):
            return (i, j)

    for i, j in empty_points:
        if is_critical_four(board, role, i, j):
            return (i, j)

    return None


class Evaluator:
    """
    Evaluator for Gomoku positions, bound to the side the AI plays.
    """

    def __init__(self, ai_role, radius=SEARCH_RADIUS, costs=None):
        self.ai_role = ai_role
        self.human_role = -ai_role
        self.radius = radius
        self.costs = costs or THREAT_COST

    def score_at(self, board, role, x, y):
        """
        Value of placing a `role` stone at empty (x, y): the cost of the
        threat along each axis plus a bonus for every pair of axes that
        forms a fork. Occupied points score 0.
        """
        if board.get(x, y) != EMPTY:
            return 0

        threats = threats_at(board, role, x, y, self.radius)
        score = sum(self.costs[threat] for threat in threats)
        for a in range(len(threats)):
            for b in range(a + 1, len(threats)):
                score += combination_bonus(threats[a], threats[b], self.costs)
        return score

    def points_in_reach(self, board):
        """
        Empty points sharing an axis with a stone at most `radius` cells away,
        in row-major order. Every other empty point classifies as NOTHING on
        all four axes, so it scores 0 and cannot hold a threat.
        """
        size = board.size
        grid = board.board
        reach = set()
        for i in range(size):
            for j in range(size):
                if grid[i][j] == EMPTY:
                    continue
                for dx, dy in ALL_DIRECTIONS:
                    for k in range(1, self.radius + 1):
                        for x, y in ((i + k * dx, j + k * dy), (i - k * dx, j - k * dy)):
                            if 0 <= x < size and 0 <= y < size and grid[x][y] == EMPTY:
                                reach.add((x, y))
        return sorted(reach)

    def potentials(self, board, points=None):
        """Sum of score_at over the empty points, as (ai, human)."""
        if points is None:
            points = self.points_in_reach(board)
        ai_score = 0
        human_score = 0
        for i, j in points:
            ai_score += self.score_at(board, self.ai_role, i, j)
            human_score += self.score_at(board, self.human_role, i, j)
        return ai_score, human_score

    def tactical_bonus(self, board, points=None):
        """+TACTICAL_BONUS if the AI has an immediate threat, minus it if the human has one."""
        if points is None:
            points = self.points_in_reach(board)
        bonus = 0
        if find_immediate_threat(board, self.ai_role, points) is not None:
            bonus += TACTICAL_BONUS
        if find_immediate_threat(board, self.human_role, points) is not None:
            bonus -= TACTICAL_BONUS
        return bonus

    def evaluate(self, board, ai_to_move):
        """
        Evaluate the position from the point of view of the side to move.

        Args:
            board: Game board
            ai_to_move: True if the AI moves next, False for the human

        Returns:
            Score, positive when good for the side to move
        """
        points = self.points_in_reach(board)
        ai_score, human_score = self.potentials(board, points)
        bonus = self.tactical_bonus(board, points)

        if ai_to_move:
            return ATTACK_WEIGHT * ai_score - human_score + bonus
        return ATTACK_WEIGHT * human_score - ai_score - bonus
