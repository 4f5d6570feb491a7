"""
Threat detection for Gomoku patterns.
Classifies the line through a point into threat categories like
five, straight four, broken three, etc.
"""

from enum import IntEnum

from .config import ALL_DIRECTIONS, EMPTY, NEED_TO_WIN, OUT_OF_BOUNDS, SEARCH_RADIUS


class ThreatType(IntEnum):
    """
    Threat through one point along one axis. Plain categories are ordered
    by danger; the combination members are only used as cost table keys.
    """
    NOTHING = 0
    NEAR_ENEMY = 1        # Next to an opponent stone (defensive value)
    TWO = 2               # Two in a row with room to grow
    THREE_BROKEN = 3      # Three stones with a gap
    FOUR_BROKEN = 4       # Four stones with a gap
    THREE = 5             # Open three
    FOUR = 6              # Four with space on one end
    STRAIGHT_FOUR = 7     # Four with space on both ends (unstoppable)
    FIVE = 8              # Five in a row (winning)

    # Combinations of two directions through the same point
    THREE_AND_THREE_BROKEN = 32
    THREE_AND_THREE = 33
    THREE_AND_FOUR = 43


THREAT_COST = {
    ThreatType.FIVE: 100000,
    ThreatType.STRAIGHT_FOUR: 50000,
    ThreatType.FOUR: 20000,
    ThreatType.THREE_AND_FOUR: 10000,
    ThreatType.THREE_AND_THREE: 7000,
    ThreatType.THREE_AND_THREE_BROKEN: 3000,
    ThreatType.THREE: 1000,
    ThreatType.FOUR_BROKEN: 900,
    ThreatType.THREE_BROKEN: 300,
    ThreatType.TWO: 20,
    ThreatType.NEAR_ENEMY: 5,
    ThreatType.NOTHING: 0,
}


def extract_line(board, x, y, direction, radius=SEARCH_RADIUS):
    """
    Extract the cells along one axis around (x, y).

    Args:
        board: Game board
        x, y: Center position
        direction: Axis offset, one of ALL_DIRECTIONS
        radius: Cells taken on each side of the center

    Returns:
        List of 2 * radius + 1 cell values, center at index `radius`,
        padded with OUT_OF_BOUNDS past the board edge
    """
    dx, dy = direction
    line = [OUT_OF_BOUNDS] * (2 * radius + 1)
    line[radius] = board.get(x, y)
    for k in range(1, radius + 1):
        line[radius + k] = board.get(x + k * dx, y + k * dy)
        line[radius - k] = board.get(x - k * dx, y - k * dy)
    return line


def _walk(line, indices, player):
    """Walk one side of a line. Returns (stones, contiguous stones, holes, enemy met)."""
    stones = 0
    contiguous = 0
    holes = 0
    last = player
    for i in indices:
        cell = line[i]
        if cell == OUT_OF_BOUNDS:
            break
        if cell == player:
            stones += 1
            if holes == 0:
                contiguous += 1
        elif cell == EMPTY:
            if last == EMPTY:
                break
            holes += 1
        else:
            return stones, contiguous, holes, True
        last = cell
    return stones, contiguous, holes, False


def classify(line, player):
    """
    Classify the threat `player` would have through the center of `line`,
    treating the center as the player's stone.

    Args:
        line: Cell values as returned by extract_line
        player: Role to classify for

    Returns:
        ThreatType
    """
    center = len(line) // 2
    right_stones, right_contiguous, right_holes, right_enemy = _walk(
        line, range(center + 1, len(line)), player)
    left_stones, left_contiguous, left_holes, left_enemy = _walk(
        line, range(center - 1, -1, -1), player)

    total = 1 + right_stones + left_stones
    contiguous = 1 + right_contiguous + left_contiguous
    holes = left_holes + right_holes
    length = total + holes
    enemy = right_enemy or left_enemy

    if contiguous >= NEED_TO_WIN:
        return ThreatType.FIVE
    if contiguous == 4 and right_holes and left_holes:
        return ThreatType.STRAIGHT_FOUR
    if contiguous == 4 and holes:
        return ThreatType.FOUR
    if contiguous == 3 and right_holes and left_holes:
        return ThreatType.THREE
    if total >= 4 and holes and length >= 5:
        return ThreatType.FOUR_BROKEN
    if total >= 3 and holes and length >= 5:
        return ThreatType.THREE_BROKEN
    if contiguous >= 2 and holes and length >= 4:
        return ThreatType.TWO
    if (right_holes == 0 or left_holes == 0) and enemy:
        return ThreatType.NEAR_ENEMY
    return ThreatType.NOTHING


def combination_bonus(one, two, costs=THREAT_COST):
    """
    Bonus for two threats meeting at one point (fork value).

    Returns:
        THREE_AND_FOUR cost for a three with a (broken) four, THREE_AND_THREE
        cost for two threes, else 0
    """
    fours = (ThreatType.FOUR, ThreatType.FOUR_BROKEN)
    if (one == ThreatType.THREE and two in fours) or (two == ThreatType.THREE and one in fours):
        return costs[ThreatType.THREE_AND_FOUR]
    if one == ThreatType.THREE and two == ThreatType.THREE:
        return costs[ThreatType.THREE_AND_THREE]
    return 0


def threats_at(board, role, x, y, radius=SEARCH_RADIUS):
    """Classify the four axes through (x, y) for `role`."""
    return [classify(extract_line(board, x, y, direction, radius), role)
            for direction in ALL_DIRECTIONS]
