"""
Console Game Hub - Text Menu Mini-Games

A single-player console collection of five mini-games: dice roll, number
guessing, tic-tac-toe (against a friend or the CPU), rock-paper-scissors
and hangman.
"""

__version__ = "1.0.0"
__author__ = "Console Game Hub Development Team"
