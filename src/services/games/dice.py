"""
Dice Roll Game Implementation

Roll two six-sided dice and hope for doubles.
"""

import random
from dataclasses import dataclass
from typing import Optional

from src.core.console import Console, COLOR_YELLOW
from .base_game import BaseGame


DIE_FACES = 6


@dataclass(frozen=True)
class DiceRoll:
    """A pair of dice"""
    first: int
    second: int

    @property
    def is_doubles(self) -> bool:
        return self.first == self.second


def roll_dice(rng: random.Random) -> DiceRoll:
    return DiceRoll(rng.randint(1, DIE_FACES), rng.randint(1, DIE_FACES))


class DiceGame(BaseGame):
    """Dice roll challenge"""

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        super().__init__("dice", "Dice Roll Challenge", console, rng)

    def play(self) -> Optional[DiceRoll]:
        last_roll = None

        while True:
            self.console.clear_screen()
            self.console.draw_header("DICE SIMULATOR")
            self.console.write("\t[1] Roll Dice\n\t[0] Return")

            choice = self.console.get_validated_int("\n\tAction > ", 0, 1)
            if choice == 0:
                return last_roll

            self.console.write("\n\tRolling physics...", COLOR_YELLOW, end="")
            self.console.delay(0.5)

            last_roll = roll_dice(self.rng)
            self.console.write(f"\r\t[ DIE 1: {last_roll.first} ]   [ DIE 2: {last_roll.second} ]     ")

            if last_roll.is_doubles:
                self.console.success("\n\t>>> CRITICAL HIT! DOUBLES! <<<")
            else:
                self.console.error("\n\tNo match.")
            self.logger.debug(f"Rolled {last_roll.first} and {last_roll.second}")

            self.console.pause()
