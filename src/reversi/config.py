"""
Configuration parameters for Reversi.
"""
import os
import json
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, Any

@dataclass
class BoardConfig:
    """Configuration for the board dimensions."""
    width: int = 8
    height: int = 8

@dataclass
class PlayConfig:
    """Configuration for the console turn loop."""
    first_player: str = "black"
    # Also end the game when neither side can move. Off by default: the
    # board alone decides the end (full board or one color left).
    end_on_double_pass: bool = False
    quit_command: str = "q"

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    board: BoardConfig = field(default_factory=BoardConfig)
    play: PlayConfig = field(default_factory=PlayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """
        Check values that the dataclass types alone do not enforce.

        Raises:
            ValueError: If a setting is not usable
        """
        from .game.pieces import Piece
        Piece.from_name(self.play.first_player)
        if not isinstance(logging.getLevelName(self.logging.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.logging.log_level!r}")
        if not self.play.quit_command.strip():
            raise ValueError("Quit command must not be empty")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            board=BoardConfig(**config_dict.get('board', {})),
            play=PlayConfig(**config_dict.get('play', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        ).validate()

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
