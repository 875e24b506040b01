"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSettings, GameState, GuessOutcome, GuessResult, LetterStatus, TerminalState
from .room import Player, RoomPhase

__all__ = [
    'GameSettings', 'GameState', 'GuessOutcome', 'GuessResult', 'LetterStatus', 'TerminalState',
    'Player', 'RoomPhase'
]
