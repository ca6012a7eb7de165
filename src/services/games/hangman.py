"""
Hangman Game Implementation

Classic word guessing game where players try to guess a word by suggesting
letters. Features a built-in word list and an ASCII gallows that fills in
as lives run out.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from src.core.console import Console, COLOR_BLUE, COLOR_RED
from .base_game import BaseGame


WORD_LIST = [
    "PROGRAMMING", "COMPUTER", "KEYBOARD", "DEVELOPER",
    "ALGORITHM", "VARIABLE", "POINTER"
]

MAX_LIVES = 6
HIDDEN_LETTER = '_'


class GuessOutcome(Enum):
    """What happened to a single guess"""
    INVALID = "invalid"
    REPEATED = "repeated"
    HIT = "hit"
    MISS = "miss"


@dataclass
class HangmanRound:
    """Word, remaining lives and guess history for one round"""
    word: str
    lives: int = MAX_LIVES
    guessed_letters: List[str] = field(default_factory=list)

    @classmethod
    def new(cls, rng: random.Random, words: Optional[List[str]] = None) -> 'HangmanRound':
        return cls(word=rng.choice(words or WORD_LIST))

    @property
    def masked_word(self) -> str:
        """The word with unguessed letters hidden"""
        return ''.join(
            letter if letter in self.guessed_letters else HIDDEN_LETTER
            for letter in self.word
        )

    @property
    def is_won(self) -> bool:
        return HIDDEN_LETTER not in self.masked_word

    @property
    def is_lost(self) -> bool:
        return self.lives <= 0

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost

    def guess(self, user_input: str) -> GuessOutcome:
        """
        Apply one line of player input

        Only a single letter counts; anything else, and letters already
        tried, leave the round unchanged. A miss costs one life.
        """
        if len(user_input) != 1 or not (user_input.isascii() and user_input.isalpha()):
            return GuessOutcome.INVALID

        letter = user_input.upper()
        if letter in self.guessed_letters:
            return GuessOutcome.REPEATED

        self.guessed_letters.append(letter)
        if letter in self.word:
            return GuessOutcome.HIT

        self.lives -= 1
        return GuessOutcome.MISS


def render_gallows(lives: int) -> str:
    """ASCII gallows, one more body part for every life lost"""
    head = "O" if lives < 6 else ""
    left_arm = "/" if lives < 4 else " "
    body = "|" if lives < 5 else ""
    right_arm = "\\" if lives < 3 else ""
    left_leg = "/" if lives < 2 else " "
    right_leg = "\\" if lives < 1 else ""

    return (
        "\n\t  _______"
        "\n\t  |     |"
        f"\n\t  |     {head}"
        f"\n\t  |    {left_arm}{body}{right_arm}"
        f"\n\t  |    {left_leg} {right_leg}"
        "\n\t__|__"
    )


class HangmanGame(BaseGame):
    """Hangman word guessing game"""

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        super().__init__("hangman", "Hangman (Word Survival)", console, rng)
        self.word_list = list(WORD_LIST)

    def play(self) -> bool:
        """Play one round, returns True if the word was found"""
        round_ = HangmanRound.new(self.rng, self.word_list)

        while not round_.is_over:
            self.console.clear_screen()
            self.console.draw_header("HANGMAN SURVIVAL")
            self._show_gallows(round_.lives)

            self.console.write(f"\n\tLives: {round_.lives}")
            self.console.write("\tWord:  " + self.console.paint(' '.join(round_.masked_word), COLOR_BLUE))
            self.console.write(f"\n\tHistory: {' '.join(round_.guessed_letters)}")

            user_input = self.console.read_line("\n\tEnter Char > ")
            outcome = round_.guess(user_input)

            if outcome is GuessOutcome.INVALID:
                self.console.write("\t[!] Single letter input required.")
                self.console.delay(1.0)
            elif outcome is GuessOutcome.REPEATED:
                self.console.write("\t[!] Already attempted.")
                self.console.delay(1.0)
            elif outcome is GuessOutcome.HIT:
                self.console.success("\n\tMatch Found!")
                self.console.delay(0.8)
            else:
                self.console.error("\n\tIncorrect!")
                self.console.delay(0.8)

        self.console.clear_screen()
        self.console.draw_header("MISSION ACCOMPLISHED" if round_.is_won else "MISSION FAILED")
        self._show_gallows(round_.lives)

        if round_.is_won:
            self.console.success(f"\n\tYou survived! Word: {round_.word}")
        else:
            self.console.error(f"\n\tEliminated. Word: {round_.word}")

        self.logger.info(
            f"Round over: word={round_.word} won={round_.is_won} "
            f"lives={round_.lives} guesses={len(round_.guessed_letters)}"
        )
        self.console.pause()
        return round_.is_won

    def _show_gallows(self, lives: int) -> None:
        self.console.write(render_gallows(lives), COLOR_RED)
