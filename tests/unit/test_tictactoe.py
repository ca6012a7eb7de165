"""
Tests for the tic-tac-toe match controllers and console game.
"""

import random

import pytest

from src.services.games.board import Board, Marker, MatchOutcome, evaluate
from src.services.games.tictactoe import (
    HumanVsHumanMatch, HumanVsAIMatch, MatchListener, TicTacToeGame,
    start_human_vs_human, start_human_vs_ai
)
from tests.utils import PickIndex, scripted_cells


class RecordingListener(MatchListener):
    """Collects every hook call"""

    def __init__(self):
        self.turns = []
        self.occupied = []
        self.ai_moves = []
        self.ai_turns = 0
        self.finished = []

    def turn_started(self, board, marker):
        self.turns.append(marker)

    def cell_occupied(self, board, marker, cell_number):
        self.occupied.append((marker, cell_number))

    def ai_turn_started(self, board):
        self.ai_turns += 1

    def ai_moved(self, board, cell_number):
        self.ai_moves.append(cell_number)

    def match_finished(self, board, outcome):
        self.finished.append((board.copy(), outcome))


class TestHumanVsHuman:
    """Test the two-player controller"""

    def test_x_wins_top_row(self):
        """Test X wins on the top row"""
        read_int = scripted_cells([1, 4, 2, 5, 3])
        listener = RecordingListener()

        outcome = start_human_vs_human(read_int, listener)

        assert outcome is MatchOutcome.X_WINS
        assert listener.turns == [Marker.X, Marker.O, Marker.X, Marker.O, Marker.X]
        assert listener.finished[0][0] == Board.from_string("XXXOO____")

    def test_cells_requested_in_range(self):
        """Test cells are requested in 1-9"""
        read_int = scripted_cells([1, 4, 2, 5, 3])

        start_human_vs_human(read_int)

        assert all(lo == 1 and hi == 9 for _, lo, hi in read_int.calls)

    def test_occupied_cell_keeps_the_turn(self):
        """Test an occupied cell keeps the turn"""
        read_int = scripted_cells([5, 5, 1, 2, 3, 8])
        listener = RecordingListener()

        outcome = start_human_vs_human(read_int, listener)

        assert outcome is MatchOutcome.X_WINS
        assert listener.occupied == [(Marker.O, 5)]
        assert listener.turns == [Marker.X, Marker.O, Marker.O, Marker.X, Marker.O, Marker.X]

    def test_o_can_win(self):
        """Test O can win"""
        read_int = scripted_cells([1, 4, 2, 5, 9, 6])

        assert start_human_vs_human(read_int) is MatchOutcome.O_WINS

    def test_draw(self):
        """Test a drawn match"""
        read_int = scripted_cells([1, 2, 3, 5, 4, 6, 8, 7, 9])
        match = HumanVsHumanMatch(read_int)

        outcome = match.run()

        assert outcome is MatchOutcome.DRAW
        assert match.board == Board.from_string("XOXXOOOXX")

    def test_each_match_starts_fresh(self):
        """Test each match starts from an empty board"""
        match = HumanVsHumanMatch(scripted_cells([1, 4, 2, 5, 3]))
        match.run()

        match.read_int = scripted_cells([7, 1, 8, 2, 9])

        assert match.run() is MatchOutcome.X_WINS
        assert match.board == Board.from_string("OO____XXX")


class TestHumanVsAI:
    """Test the player-vs-computer controller"""

    def test_ai_never_plays_the_humans_center(self):
        """Test the computer never plays the human's center"""
        for seed in range(20):
            listener = RecordingListener()
            match = HumanVsAIMatch(None, listener, random.Random(seed))
            moves = [5]

            def read_int(prompt, lo, hi):
                if moves:
                    return moves.pop(0)
                return match.board.empty_cells()[0] + 1

            match.read_int = read_int
            outcome = match.run()

            assert listener.ai_moves[0] != 5
            assert outcome.is_terminal
            assert evaluate(match.board) is outcome

    def test_ai_takes_center_when_free(self):
        """Test the computer takes a free center"""
        listener = RecordingListener()

        start_human_vs_ai(scripted_cells([1, 4, 6, 3]), listener, PickIndex(-1))

        assert listener.ai_moves[0] == 5

    def test_human_wins(self):
        """Test the human beating the computer"""
        listener = RecordingListener()

        outcome = start_human_vs_ai(scripted_cells([1, 2, 4, 7]), listener, PickIndex(0))

        assert outcome is MatchOutcome.X_WINS
        assert listener.ai_moves == [5, 3, 6]
        assert listener.ai_turns == 3

    def test_ai_wins(self):
        """Test the computer winning"""
        listener = RecordingListener()

        outcome = start_human_vs_ai(scripted_cells([1, 4, 6, 3]), listener, PickIndex(-1))

        assert outcome is MatchOutcome.O_WINS
        assert listener.ai_moves == [5, 9, 8, 7]
        assert listener.finished[0][0] == Board.from_string("X_XXOXOOO")

    def test_occupied_cell_reprompts_human_and_draw(self):
        """Test an occupied cell re-prompts the human"""
        listener = RecordingListener()

        outcome = start_human_vs_ai(scripted_cells([1, 5, 2, 7, 6, 9]), listener, PickIndex(0))

        assert outcome is MatchOutcome.DRAW
        assert listener.occupied == [(Marker.X, 5)]
        assert listener.ai_moves == [5, 3, 4, 8]
        assert set(listener.turns) == {Marker.X}

    def test_human_is_x(self):
        """Test the human plays X and the computer O"""
        match = HumanVsAIMatch(scripted_cells([1, 2, 4, 7]), rng=PickIndex(0))
        match.run()

        assert match.board.cell(0) is Marker.X
        assert match.board.cell(4) is Marker.O


class TestTicTacToeGame:
    """Test the console game wrapped around the controllers"""

    def test_pvp_match_from_menu(self, make_console):
        """Test a PvP match from the mode menu"""
        console = make_console(["1", "1", "4", "2", "5", "3", "", "0"])
        game = TicTacToeGame(console)

        outcome = game.play()
        output = console.output.getvalue()

        assert outcome is MatchOutcome.X_WINS
        assert "STRATEGY ARENA (TTT)" in output
        assert "PvP MATCH" in output
        assert "Player O's turn." in output
        assert "PLAYER X DOMINATED!" in output

    def test_pvp_occupied_and_bad_input(self, make_console):
        """Test PvP occupied cells and bad input"""
        console = make_console(["1", "5", "abc", "10", "5", "1", "2", "3", "8", "", "0"])
        game = TicTacToeGame(console)

        outcome = game.play()
        output = console.output.getvalue()

        assert outcome is MatchOutcome.X_WINS
        assert "Invalid format. Numbers only." in output
        assert "Range Error: Enter 1-9." in output
        assert "Sector Occupied!" in output

    def test_pvc_match_lost(self, make_console):
        """Test a PvAI match lost to the computer"""
        console = make_console(["2", "1", "4", "6", "3", "", "0"])
        game = TicTacToeGame(console, rng=PickIndex(-1))

        outcome = game.play()
        output = console.output.getvalue()

        assert outcome is MatchOutcome.O_WINS
        assert "MAN VS MACHINE" in output
        assert "AI Calculating..." in output
        assert "MACHINE DOMINATION!" in output

    def test_pvc_match_won(self, make_console):
        """Test a PvAI match won by the human"""
        console = make_console(["2", "1", "2", "4", "7", "", "0"])
        game = TicTacToeGame(console, rng=PickIndex(0))

        assert game.play() is MatchOutcome.X_WINS
        assert "HUMANITY WINS!" in console.output.getvalue()

    def test_pvc_draw_with_invalid_sector(self, make_console):
        """Test a PvAI draw with an invalid sector"""
        console = make_console(["2", "1", "5", "2", "7", "6", "9", "", "0"])
        game = TicTacToeGame(console, rng=PickIndex(0))

        assert game.play() is MatchOutcome.DRAW
        output = console.output.getvalue()
        assert "Sector Invalid!" in output
        assert "TACTICAL DRAW." in output

    def test_return_without_playing(self, make_console):
        """Test returning without a match"""
        console = make_console(["0"])

        assert TicTacToeGame(console).play() is None

    def test_format_board(self, make_console):
        """Test board formatting"""
        game = TicTacToeGame(make_console())

        text = game.format_board(Board.from_string("X_O___O_X"))

        assert "  X  |     |  O  " in text
        assert "  O  |     |  X  " in text
        assert text.count("_____|_____|_____") == 2

    def test_console_eof_propagates(self, make_console):
        """Test end of input propagates out of the game"""
        console = make_console(["1", "5"])

        with pytest.raises(EOFError):
            TicTacToeGame(console).play()
