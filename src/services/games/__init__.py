"""
Console Games

Base framework plus the five hub games: dice roll, number guessing,
tic-tac-toe, rock-paper-scissors and hangman.
"""

from .base_game import BaseGame, GameManager
from .board import Board, Marker, MatchOutcome, evaluate, choose_ai_move
from .tictactoe import (
    TicTacToeGame, HumanVsHumanMatch, HumanVsAIMatch, MatchListener,
    start_human_vs_human, start_human_vs_ai
)
from .dice import DiceGame
from .guessing import NumberGuessingGame
from .rps import RockPaperScissorsGame
from .hangman import HangmanGame
from .menu_system import MainMenu

__all__ = [
    'BaseGame', 'GameManager', 'MainMenu',
    'Board', 'Marker', 'MatchOutcome', 'evaluate', 'choose_ai_move',
    'TicTacToeGame', 'HumanVsHumanMatch', 'HumanVsAIMatch', 'MatchListener',
    'start_human_vs_human', 'start_human_vs_ai',
    'DiceGame', 'NumberGuessingGame', 'RockPaperScissorsGame', 'HangmanGame'
]
