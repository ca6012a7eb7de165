"""
Main Menu for the Console Game Hub

Lists the registered games in order and launches the one the player
picks until they choose to exit.
"""

from src.core.console import Console, COLOR_RED
from src.core.logging import get_logger
from .base_game import GameManager


EXIT_CHOICE = 0


class MainMenu:
    """Numbered main menu over a GameManager"""

    def __init__(self, game_manager: GameManager, console: Console):
        self.logger = get_logger("menu")
        self.game_manager = game_manager
        self.console = console

    def show(self) -> None:
        """Draw the main menu screen"""
        self.console.clear_screen()
        self.console.draw_header("MAIN MENU")

        for number, game_type in enumerate(self.game_manager.get_available_games(), start=1):
            game = self.game_manager.get_game(game_type)
            self.console.menu_option(number, game.menu_label)

        self.console.draw_divider()
        self.console.menu_option(EXIT_CHOICE, "Exit Application", COLOR_RED)

    def run(self) -> None:
        """Menu loop, returns when the player picks Exit"""
        while True:
            games = self.game_manager.get_available_games()
            self.show()

            choice = self.console.get_validated_int("\n\tSelect Module > ", EXIT_CHOICE, len(games))
            if choice == EXIT_CHOICE:
                self.logger.info("Exit selected from main menu")
                self.console.success("\n\tTerminating session. Goodbye!")
                self.console.delay(1.0)
                return

            self.game_manager.play_game(games[choice - 1])
