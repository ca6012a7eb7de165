"""
Tic-Tac-Toe Game Implementation

Match controllers for human-vs-human and human-vs-computer play on a
3x3 board, plus the console game that renders them. Players address
cells 1-9, left to right and top to bottom.
"""

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

from src.core.console import Console, COLOR_BLUE
from src.core.logging import get_structured_logger
from .base_game import BaseGame
from .board import Board, Marker, MatchOutcome, choose_ai_move, evaluate


# get_validated_int(prompt, min_value, max_value) -> int
ReadInt = Callable[[str, int, int], int]


class MatchListener:
    """
    Receives match progress from a controller

    Every hook does nothing by default; the console game overrides them
    to draw the board and messages.
    """

    def turn_started(self, board: Board, marker: Marker) -> None:
        pass

    def cell_occupied(self, board: Board, marker: Marker, cell_number: int) -> None:
        pass

    def ai_turn_started(self, board: Board) -> None:
        pass

    def ai_moved(self, board: Board, cell_number: int) -> None:
        pass

    def match_finished(self, board: Board, outcome: MatchOutcome) -> None:
        pass


class MatchController(ABC):
    """
    Drives one match from an empty board to a terminal outcome

    Controllers only use Board.place() and evaluate(); they never look at
    the cells themselves.
    """

    mode = "match"
    prompt = "\n\tSelect Sector (1-9) > "

    def __init__(self, read_int: ReadInt, listener: Optional[MatchListener] = None,
                 rng: Optional[random.Random] = None):
        self.read_int = read_int
        self.listener = listener or MatchListener()
        self.rng = rng or random.Random()
        self.board = Board()
        self.logger = get_structured_logger("games.tictactoe").bind(mode=self.mode)

    @abstractmethod
    def run(self) -> MatchOutcome:
        """Play the match to completion and return the outcome"""
        pass

    def _human_move(self, marker: Marker) -> int:
        """Prompt until the player picks an empty cell; an occupied cell costs no turn"""
        while True:
            self.listener.turn_started(self.board, marker)
            cell_number = self.read_int(self.prompt, 1, 9)
            if self.board.place(cell_number, marker):
                self.logger.debug("move_placed", marker=marker.value, cell=cell_number)
                return cell_number

            self.logger.debug("cell_occupied", marker=marker.value, cell=cell_number)
            self.listener.cell_occupied(self.board, marker, cell_number)

    def _finish(self, outcome: MatchOutcome) -> MatchOutcome:
        self.logger.info("match_finished", outcome=outcome.value, board=repr(self.board))
        self.listener.match_finished(self.board, outcome)
        return outcome


class HumanVsHumanMatch(MatchController):
    """Two players share the keyboard, X moves first"""

    mode = "pvp"

    def run(self) -> MatchOutcome:
        self.board = Board()
        self.logger.info("match_started")
        current = Marker.X

        while True:
            self._human_move(current)
            outcome = evaluate(self.board)
            if outcome.is_terminal:
                return self._finish(outcome)
            current = current.opponent


class HumanVsAIMatch(MatchController):
    """The player is X and moves first, the computer answers with O"""

    mode = "pvc"
    prompt = "\n\tYour Command (1-9) > "
    human = Marker.X
    computer = Marker.O

    def run(self) -> MatchOutcome:
        self.board = Board()
        self.logger.info("match_started")

        while True:
            self._human_move(self.human)
            outcome = evaluate(self.board)
            if outcome.is_terminal:
                return self._finish(outcome)

            self.listener.ai_turn_started(self.board)
            cell_number = choose_ai_move(self.board, self.rng) + 1
            # choose_ai_move only returns empty cells
            self.board.place(cell_number, self.computer)
            self.logger.debug("ai_move", cell=cell_number)
            self.listener.ai_moved(self.board, cell_number)

            outcome = evaluate(self.board)
            if outcome.is_terminal:
                return self._finish(outcome)


def start_human_vs_human(read_int: ReadInt, listener: Optional[MatchListener] = None) -> MatchOutcome:
    """Run a full human-vs-human match on a fresh board"""
    return HumanVsHumanMatch(read_int, listener).run()


def start_human_vs_ai(read_int: ReadInt, listener: Optional[MatchListener] = None,
                      rng: Optional[random.Random] = None) -> MatchOutcome:
    """Run a full human-vs-computer match on a fresh board"""
    return HumanVsAIMatch(read_int, listener, rng).run()


class TicTacToeGame(BaseGame, MatchListener):
    """Tic-Tac-Toe console game with a mode sub-menu"""

    MODE_PVP = 1
    MODE_PVC = 2

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        super().__init__("tictactoe", "Tic-Tac-Toe (PvP & PvCPU)", console, rng)
        self.mode = None

    def play(self) -> Optional[MatchOutcome]:
        """Mode menu loop, each match starts from a fresh board"""
        last_outcome = None

        while True:
            self.console.clear_screen()
            self.console.draw_header("STRATEGY ARENA (TTT)")
            self.console.write("\t[1] PvHuman")
            self.console.write("\t[2] PvAI (CPU)")
            self.console.write("\t[0] Return")

            choice = self.console.get_validated_int("\n\tSelect Mode > ", 0, 2)
            if choice == 0:
                return last_outcome

            last_outcome = self.play_match(choice)

    def play_match(self, mode: int) -> MatchOutcome:
        """Run one match in the given mode and show the result screen"""
        self.mode = mode
        if mode == self.MODE_PVP:
            outcome = start_human_vs_human(self.console.get_validated_int, self)
        else:
            outcome = start_human_vs_ai(self.console.get_validated_int, self, self.rng)

        self.logger.info(f"Match ended ({'pvp' if mode == self.MODE_PVP else 'pvc'}): {outcome.value}")
        self.console.pause()
        return outcome

    # MatchListener hooks

    def turn_started(self, board: Board, marker: Marker) -> None:
        self.console.clear_screen()
        if self.mode == self.MODE_PVP:
            self.console.draw_header("PvP MATCH")
            self.show_board(board)
            self.console.write(f"\tPlayer {marker.value}'s turn.", end="")
        else:
            self.console.draw_header("MAN VS MACHINE")
            self.show_board(board)

    def cell_occupied(self, board: Board, marker: Marker, cell_number: int) -> None:
        if self.mode == self.MODE_PVP:
            self.console.error("\tSector Occupied!")
        else:
            self.console.write("\n\tSector Invalid!")
        self.console.delay(0.5)

    def ai_turn_started(self, board: Board) -> None:
        self.console.write("\n\tAI Calculating...")
        self.console.delay(0.6)

    def match_finished(self, board: Board, outcome: MatchOutcome) -> None:
        self.console.clear_screen()
        self.console.draw_header("GAME OVER" if self.mode == self.MODE_PVP else "GAME RESULT")
        self.show_board(board)

        if self.mode == self.MODE_PVP:
            if outcome is MatchOutcome.DRAW:
                self.console.warning("\n\tSTALEMATE (DRAW)!")
            else:
                self.console.success(f"\n\tPLAYER {outcome.winner.value} DOMINATED!")
        elif outcome is MatchOutcome.X_WINS:
            self.console.success("\n\tHUMANITY WINS!")
        elif outcome is MatchOutcome.O_WINS:
            self.console.error("\n\tMACHINE DOMINATION!")
        else:
            self.console.warning("\n\tTACTICAL DRAW.")

    def show_board(self, board: Board) -> None:
        self.console.write(self.format_board(board), COLOR_BLUE)

    def format_board(self, board: Board) -> str:
        """Format the board as a 3x3 grid of cells"""
        lines = [""]
        rows = board.rows()
        for i, row in enumerate(rows):
            lines.append("\t     |     |     ")
            lines.append(f"\t  {row[0]}  |  {row[1]}  |  {row[2]}  ")
            if i < len(rows) - 1:
                lines.append("\t_____|_____|_____")
            else:
                lines.append("\t     |     |     ")
        lines.append("")
        return "\n".join(lines)
