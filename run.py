#!/usr/bin/env python3
"""
run.py - Main entry point for the Cookies & Milk engine
"""

import argparse
import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from cookie4.interfaces.cli import SimpleCLI, build_parser

EPILOG = """
    Examples:

    # Play interactively (cookie 1, milk 3, random, reset, board, q)
    python run.py play

    # Print three consecutive random boards from the default seed
    python run.py random --count 3

    # Print random boards from another seed
    python run.py --seed 7 random --count 2

    # Replay a sequence of moves and show the final board
    python run.py replay --moves cookie:1,milk:2,cookie:2,milk:3,milk:3,cookie:3,milk:4,milk:4,milk:4,cookie:4

    # Benchmark with 5000 iterations and debug output
    python run.py --debug_level debug benchmark --iterations 5000

    # Log only board events, to a file
    python run.py --debug --components board --log_file board.log replay --moves cookie:1,milk:1
    """


def main():
    """Main entry point for the Cookies & Milk engine."""
    parser = build_parser()
    parser.formatter_class = argparse.RawDescriptionHelpFormatter
    parser.epilog = EPILOG

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return 1

    return SimpleCLI(args).run()


if __name__ == "__main__":
    sys.exit(main())
