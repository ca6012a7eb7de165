"""
Number Guessing Game Implementation

The computer locks a secret number between 1 and 100 and the player homes
in on it with too-high and too-low hints.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.console import Console, COLOR_YELLOW
from .base_game import BaseGame


LOWEST_NUMBER = 1
HIGHEST_NUMBER = 100


class GuessResult(Enum):
    """Hint returned for a guess"""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


@dataclass
class GuessingRound:
    """State of one round: the secret and how many guesses were made"""
    secret: int
    attempts: int = 0
    solved: bool = False

    @classmethod
    def new(cls, rng: random.Random) -> 'GuessingRound':
        return cls(secret=rng.randint(LOWEST_NUMBER, HIGHEST_NUMBER))

    def guess(self, value: int) -> GuessResult:
        """Count the attempt and compare it with the secret"""
        self.attempts += 1

        if value == self.secret:
            self.solved = True
            return GuessResult.CORRECT
        if value < self.secret:
            return GuessResult.TOO_LOW
        return GuessResult.TOO_HIGH


class NumberGuessingGame(BaseGame):
    """Secret number guessing"""

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        super().__init__("guessing", "Secret Number Guessing", console, rng)

    def play(self) -> int:
        """Play one round and return the number of attempts it took"""
        self.console.clear_screen()
        self.console.draw_header("BINARY SEARCH GAME")

        round_ = GuessingRound.new(self.rng)
        self.console.write(f"\tTarget Locked: Number between {LOWEST_NUMBER}-{HIGHEST_NUMBER}.")

        while not round_.solved:
            value = self.console.get_validated_int("\n\tInput Guess > ", LOWEST_NUMBER, HIGHEST_NUMBER)
            result = round_.guess(value)

            if result is GuessResult.CORRECT:
                self.console.success(f"\n\t[SUCCESS] Target neutralized in {round_.attempts} attempts!")
            elif result is GuessResult.TOO_LOW:
                self.console.write("\t>>> Too Low. Adjust upwards.", COLOR_YELLOW)
            else:
                self.console.write("\t>>> Too High. Adjust downwards.", COLOR_YELLOW)

        self.logger.info(f"Secret {round_.secret} found in {round_.attempts} attempts")
        self.console.pause()
        return round_.attempts
