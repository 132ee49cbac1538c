"""
Reversi: a two-player Othello board engine with a console game loop.
"""

from .config import Config, get_default_config
from .game import Board, Piece, Point, ReversiGame

__version__ = '0.1'

__all__ = ['Config', 'get_default_config', 'Board', 'Piece', 'Point', 'ReversiGame']
