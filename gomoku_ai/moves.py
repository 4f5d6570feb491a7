"""
Candidate move generation for the search.
"""

from dataclasses import dataclass

from .config import CANDIDATE_CAP, DEFEND_PRIORITY, EMPTY, WIN_PRIORITY
from .evaluate import find_immediate_threat


@dataclass
class Move:
    row: int
    col: int
    score: float = 0


def has_neighbor(board, i, j):
    """True if any of the 8 cells around (i, j) holds a stone."""
    for di in (-1, 0, 1):
        for dj in (-1, 0, 1):
            if di == 0 and dj == 0:
                continue
            ni, nj = i + di, j + dj
            if 0 <= ni < board.size and 0 <= nj < board.size and board.board[ni][nj] != EMPTY:
                return True
    return False


def generate_moves(board, evaluator, cap=CANDIDATE_CAP):
    """
    Get candidate moves for a search node.

    Forced points (an immediate win for the AI, or a point the human would
    win from) are always included; the rest are empty points next to a
    stone, ordered by their value to the AI.

    Args:
        board: Game board
        evaluator: Evaluator bound to the AI side
        cap: Maximum number of candidates

    Returns:
        List of Move sorted by score, highest first
    """
    if board.is_empty():
        center = board.size // 2
        return [Move(center, center, 0)]

    # A winning or four-making point always touches a stone of its side
    neighbours = [(i, j) for i, j in board.get_valid_moves() if has_neighbor(board, i, j)]

    forced = {}
    defend = find_immediate_threat(board, evaluator.human_role, neighbours)
    if defend is not None:
        forced[defend] = Move(defend[0], defend[1], DEFEND_PRIORITY)
    win = find_immediate_threat(board, evaluator.ai_role, neighbours)
    if win is not None:
        forced[win] = Move(win[0], win[1], WIN_PRIORITY)

    candidates = []
    for i, j in neighbours:
        if (i, j) in forced:
            continue
        candidates.append(Move(i, j, evaluator.score_at(board, evaluator.ai_role, i, j)))

    candidates.sort(key=lambda move: move.score, reverse=True)
    moves = list(forced.values()) + candidates[:max(cap - len(forced), 0)]
    moves.sort(key=lambda move: move.score, reverse=True)
    return moves
