"""
Rock, Paper, Scissors Game Implementation
"""

import random
from enum import Enum
from typing import Optional

from src.core.console import Console
from .base_game import BaseGame


class Move(Enum):
    """Weapons, numbered as on the menu"""
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def label(self) -> str:
        return self.name.title()


class RoundResult(Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


# Each move and the move it defeats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def judge(player: Move, cpu: Move) -> RoundResult:
    """Result from the player's point of view"""
    if player is cpu:
        return RoundResult.TIE
    if BEATS[player] is cpu:
        return RoundResult.WIN
    return RoundResult.LOSE


class RockPaperScissorsGame(BaseGame):
    """Rock, paper, scissors against the CPU"""

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        super().__init__("rps", "Rock, Paper, Scissors", console, rng)

    def play(self) -> Optional[RoundResult]:
        last_result = None

        while True:
            self.console.clear_screen()
            self.console.draw_header("R.P.S BATTLE")
            self.console.write("\t[1] Rock\n\t[2] Paper\n\t[3] Scissors\n\t[0] Return")

            choice = self.console.get_validated_int("\n\tWeapon Choice > ", 0, 3)
            if choice == 0:
                return last_result

            player = Move(choice)
            cpu = self.rng.choice(list(Move))
            self.console.write(f"\n\tYou deployed: {player.label}")
            self.console.write(f"\tCPU deployed: {cpu.label}")

            self.console.delay(0.5)
            self.console.draw_divider()

            last_result = judge(player, cpu)
            if last_result is RoundResult.TIE:
                self.console.warning("\n\tEFFECT: NO DAMAGE (TIE)")
            elif last_result is RoundResult.WIN:
                self.console.success("\n\tEFFECT: CRITICAL HIT (WIN)")
            else:
                self.console.error("\n\tEFFECT: DEFEAT")
            self.logger.debug(f"{player.name} vs {cpu.name}: {last_result.value}")

            self.console.pause()
