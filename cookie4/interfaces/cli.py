"""
cli.py - Command-line interface for the Cookies & Milk engine

This module provides a CLI for playing interactively, printing random boards,
replaying move sequences and benchmarking the board operations.
"""

import argparse
import sys
from typing import List, Optional, Tuple

import numpy as np

from cookie4.debug import debug, DebugLevel
from cookie4.utils import DEFAULT_SEED, PLAYABLE_COLS, Team, BoardError, BoardFinishedError
from cookie4.game.board import Board
from cookie4.game.rules import CookieMilkGame

DEBUG_LEVEL_CHOICES = ['none', 'error', 'warning', 'info', 'debug', 'trace']


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser shared by this module and run.py."""
    parser = argparse.ArgumentParser(description='Cookies & Milk four-in-a-row CLI')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help=f'Seed for the board random generator (default: {DEFAULT_SEED})')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level', choices=DEBUG_LEVEL_CHOICES, default='warning',
                        help='Set debug level: none (silent) through trace (most verbose)')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log output to this file')
    parser.add_argument('--components', type=str, default=None,
                        help='Comma-separated components to log (board,game,env,cli); all if omitted')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play on the board interactively')

    random_parser = subparsers.add_parser('random', help='Print consecutive random boards')
    random_parser.add_argument('--count', type=positive_int, default=1,
                               help='Number of random boards to print')

    replay_parser = subparsers.add_parser('replay', help='Play a sequence of moves')
    replay_parser.add_argument('--moves', type=str, required=True,
                               help='Comma-separated team:column pairs, e.g. cookie:1,milk:2')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark board operations')
    benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                  help='Number of iterations for benchmarking')

    return parser


def parse_moves(moves_str: str) -> List[Tuple[str, int]]:
    """
    Parse a move list such as "cookie:1,milk:2".

    Team names are passed through untouched so the board decides whether they
    are valid.

    Raises:
        ValueError: If an entry is not of the form team:column
    """
    moves = []
    for entry in moves_str.split(','):
        entry = entry.strip()
        if not entry:
            continue
        team, sep, column = entry.partition(':')
        if not sep:
            raise ValueError(f"Move '{entry}' must look like team:column")
        moves.append((team.strip(), int(column)))
    return moves


class SimpleCLI:
    """Simple command-line interface around one shared game."""

    def __init__(self, args: Optional[argparse.Namespace] = None):
        """Initialize the CLI."""
        self.args = args
        self.game: Optional[CookieMilkGame] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(argv)

    def configure_debug(self) -> None:
        """Set the debug level from the parsed arguments."""
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        components = None
        if self.args.components:
            components = [c.strip() for c in self.args.components.split(',') if c.strip()]
        debug.configure(log_file=self.args.log_file, components=components)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments and return an exit code."""
        if not self.args:
            self.parse_args()

        self.configure_debug()
        self.game = CookieMilkGame(seed=self.args.seed)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'random':
            return self.random_boards()
        elif self.args.command == 'replay':
            return self.replay_moves()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play on the board interactively."""
        print("Cookies & Milk: four in a row wins.")
        print(f"Enter 'cookie N' or 'milk N' to drop a piece (N = {PLAYABLE_COLS[0]}-{PLAYABLE_COLS[-1]}).")
        print("Other commands: 'random', 'reset', 'board', 'q' to quit.")
        print(self.game.render(), end="")

        while True:
            try:
                line = input("> ").strip().lower()
            except EOFError:
                print()
                return 0

            if not line:
                continue
            if line in ('q', 'quit'):
                print("Bye.")
                return 0

            print(self.handle_command(line), end="")

    def handle_command(self, line: str) -> str:
        """
        Execute one interactive command.

        Returns:
            Text to show the player, newline terminated
        """
        parts = line.split()
        command = parts[0]

        if command == 'board' and len(parts) == 1:
            return self.game.render()
        if command == 'reset' and len(parts) == 1:
            return self.game.reset()
        if command == 'random' and len(parts) == 1:
            return self.game.randomize()

        if len(parts) != 2:
            return f"Unknown command: {line}\n"

        try:
            column = int(parts[1])
        except ValueError:
            return f"Column must be a number, got '{parts[1]}'.\n"

        try:
            return self.game.place(command, column)
        except BoardFinishedError as e:
            return f"Cannot place: {e}.\n{e.payload}"
        except BoardError as e:
            return f"Invalid move: {e}.\n"

    def random_boards(self) -> int:
        """Print consecutive random fills of the same board."""
        for i in range(self.args.count):
            print(f"Board {i + 1}:")
            print(self.game.randomize(), end="")
        return 0

    def replay_moves(self) -> int:
        """Replay a move list on a fresh board and print the result."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 2

        self.game.reset()
        exit_code = 0
        for i, (team, column) in enumerate(moves):
            try:
                self.game.place(team, column)
            except BoardError as e:
                print(f"Move {i + 1} ({team} {column}) rejected: {e}")
                exit_code = 1
                break

        print(self.game.render(), end="")
        return exit_code

    def benchmark(self) -> int:
        """Benchmark the performance of the board operations."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")
        rng = np.random.default_rng(self.args.seed)
        teams = list(Team)

        debug.start_timer("board_init")
        for _ in range(iterations):
            board = Board(seed=self.args.seed)
        board_init_time = debug.end_timer("board_init", "cli")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        board = Board(seed=self.args.seed)
        moves_made = 0
        debug.start_timer("moves")
        for _ in range(iterations):
            column = int(rng.integers(PLAYABLE_COLS[0], PLAYABLE_COLS[-1] + 1))
            try:
                board.place(teams[moves_made % 2], column)
            except BoardFinishedError:
                board.reset()
                continue
            board.check_winner()
            moves_made += 1
        moves_time = debug.end_timer("moves", "cli")
        print(f"Making {moves_made} moves: {moves_time:.6f} seconds total, "
              f"{moves_time / max(moves_made, 1) * 1000:.6f} ms per move")

        board = Board(seed=self.args.seed)
        debug.start_timer("randomize")
        for _ in range(iterations):
            board.randomize()
        randomize_time = debug.end_timer("randomize", "cli")
        print(f"Random fills: {randomize_time:.6f} seconds total, "
              f"{randomize_time / iterations * 1000:.6f} ms per fill")

        debug.start_timer("rendering")
        for _ in range(iterations):
            board.render()
        rendering_time = debug.end_timer("rendering", "cli")
        print(f"Rendering board {iterations} times: {rendering_time:.6f} seconds total, "
              f"{rendering_time / iterations * 1000:.6f} ms per render")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
