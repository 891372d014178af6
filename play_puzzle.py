#!/usr/bin/env python
"""
Sliding Tile Puzzle - command line player

Usage:
    python play_puzzle.py <image_path> [--grid <size>] [--shuffle] [--moves L,U,R,D]
    
Examples:
    python play_puzzle.py ./photo.jpg --grid 4 --shuffle --seed 7 --output ./debug/board.png
    python play_puzzle.py ./photo.jpg --grid 2 --moves Up,Left --no-display

Moves:
    Left/Up/Right/Down (or L/U/R/D) move the empty runner cell one step.
    Moves off the edge of the grid are ignored.
"""

import argparse
import os
import random
import sys

from pipeline import DEFAULT_CONFIG, load_puzzle, save_board


SHORT_MOVES = {'L': 'Left', 'U': 'Up', 'R': 'Right', 'D': 'Down'}
NAMED_MOVES = {name.upper(): name for name in SHORT_MOVES.values()}


def parse_moves(text):
    """Split a comma separated move list, expanding L/U/R/D and move names in any case."""
    if not text:
        return []
    moves = []
    for token in text.split(','):
        token = token.strip()
        if token:
            key = token.upper()
            moves.append(SHORT_MOVES.get(key) or NAMED_MOVES.get(key, token))
    return moves


def build_parser():
    parser = argparse.ArgumentParser(
        description="Image-based sliding tile puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image_path", help="Path to the image to play with")
    parser.add_argument("--grid", "-g", type=int, default=DEFAULT_CONFIG.grid_size,
                        choices=list(DEFAULT_CONFIG.level_choices),
                        help="Grid size (default: %(default)s)")
    parser.add_argument("--shuffle", "-s", action="store_true",
                        help=f"Scramble with {DEFAULT_CONFIG.shuffle_moves} random moves")
    parser.add_argument("--seed", type=int, help="Random seed for shuffling")
    parser.add_argument("--moves", "-m", help="Comma separated moves to apply (e.g. L,U,R,D)")
    parser.add_argument("--numbers", action="store_true", help="Draw tile numbers on the board")
    parser.add_argument("--tiles", action="store_true", help="Show the cut tiles with their indices")
    parser.add_argument("--output", "-o", help="Output path for the board image")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output")
    parser.add_argument("--no-display", action="store_true", help="Don't display result")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    
    if not os.path.exists(args.image_path):
        print(f"Error: Image not found: {args.image_path}")
        sys.exit(1)
    
    verbose = not args.quiet
    rng = random.Random(args.seed) if args.seed is not None else None
    
    session = load_puzzle(args.image_path, args.grid, rng=rng, verbose=verbose)
    
    if args.shuffle:
        session.shuffle()
        if verbose:
            print(f"Shuffled with {session.shuffler.moves} moves")
    
    for move in parse_moves(args.moves):
        result = session.move(move)
        if verbose:
            if not result.recognized:
                print(f"Ignored unrecognized move: {move}")
            elif not result.swapped:
                print(f"{result.direction.value}: blocked by edge")
            else:
                print(f"{result.direction.value}: swapped cells {result.cells}")
    
    solved = session.is_solved()
    board = session.render(show_numbers=args.numbers)
    
    if verbose:
        size, cells, runner = session.snapshot()
        print(f"\nCells: {list(cells)}")
        print(f"Runner: {runner}")
        print(f"Solved: {solved}")
    
    if args.output:
        save_board(board, args.output, verbose=verbose)
    
    if not args.no_display:
        from visualization import display_comparison
        display_comparison(session.image, board, solved=solved)
        if args.tiles:
            from visualization import display_tiles
            display_tiles(session.tiles, session.size)
    
    return session


if __name__ == "__main__":
    main()
