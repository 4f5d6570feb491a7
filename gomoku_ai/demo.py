#!/usr/bin/env python3
"""
Gomoku Core API Demo
=====================
Plays a short scripted game against the AI without any GUI.

Usage:
    python -m gomoku_ai.demo --size 9 --difficulty easy --verbose
"""

import argparse
import logging

from .config import BLACK, WHITE
from .core_api import GomokuCoreAPI
from .difficulty import DIFFICULTY_MAP


def demo_game(board_size=9, difficulty='easy'):
    """
    Simulate a short game: the human (black) builds a line from the center,
    the AI (white) answers each move.
    """
    print("=" * 50)
    print(f"Gomoku Core API Demo ({board_size}x{board_size} board, {difficulty})")
    print("=" * 50)

    game = GomokuCoreAPI(board_size=board_size, difficulty=difficulty, ai_role=WHITE)
    center = board_size // 2
    human_moves = [
        (center, center),
        (center, center + 1),
        (center - 1, center),
        (center + 1, center + 1),
    ]

    for turn, move in enumerate(human_moves, start=1):
        print(f"\n--- Turn {turn} ---")

        if not game.human_move(*move):
            # The AI already took this point; pick the next free neighbour
            free = [(r, c) for r, c in game.board.get_valid_moves()
                    if abs(r - move[0]) <= 1 and abs(c - move[1]) <= 1]
            if not free or not game.human_move(*free[0]):
                print("Invalid human move!")
                continue

        if game.check_winner() == BLACK:
            print("Human wins!")
            break

        ai_move = game.get_ai_move()
        if ai_move:
            game.apply_ai_move(*ai_move)
            print(f"AI plays {ai_move}")
            if game.check_winner() == WHITE:
                print("AI wins!")
                break

        game.print_board()

    print("\nFinal board state:")
    game.print_board()
    return game


def main(argv=None):
    parser = argparse.ArgumentParser(description="Gomoku engine demo")
    parser.add_argument('--size', type=int, default=9, help="Board size (default 9)")
    parser.add_argument('--difficulty', choices=sorted(DIFFICULTY_MAP), default='easy')
    parser.add_argument('--verbose', action='store_true', help="Show per-depth search diagnostics")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    demo_game(board_size=args.size, difficulty=args.difficulty)


if __name__ == "__main__":
    main()
