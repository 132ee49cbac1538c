"""
Main script to play Reversi on the console.
"""
import os
import sys
import argparse

from reversi.config import Config, get_default_config
from reversi.game import ReversiGame, run_console
from reversi.logger import setup_logger

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Play Reversi on the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--width', type=int, default=None,
                      help='Number of playable columns (overrides config)')
    parser.add_argument('--height', type=int, default=None,
                      help='Number of playable rows (overrides config)')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Logging level, e.g. INFO or DEBUG (overrides config)')
    return parser.parse_args(argv)

def load_config(args) -> Config:
    """Load the config file if it exists and apply command line overrides."""
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.width is not None:
        config.board.width = args.width
    if args.height is not None:
        config.board.height = args.height
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    return config.validate()

def main(argv=None):
    """Run one console game with the specified configuration."""
    args = parse_args(argv)
    try:
        config = load_config(args)
        setup_logger(config)
        game = ReversiGame(config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        run_console(game)
    except (EOFError, KeyboardInterrupt):
        print("\nGame interrupted.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
