"""
Console Game Hub Main Application Entry Point

Loads configuration, sets up logging and the console, registers the games
and runs the main menu until the player exits.
"""

import argparse
import random
import sys
import traceback
from typing import List, Optional

import colorama

from src.core.config import ConfigurationManager, ConfigurationError
from src.core.console import Console
from src.core.logging import initialize_logging, get_logger
from src.services.games import (
    GameManager, MainMenu, DiceGame, NumberGuessingGame, TicTacToeGame,
    RockPaperScissorsGame, HangmanGame
)


class GameHubApplication:
    """Main hub application: owns the console, the RNG and the game registry"""

    def __init__(self, config_dir: str = "config", console: Optional[Console] = None):
        self.config_dir = config_dir
        self.config_manager: Optional[ConfigurationManager] = None
        self.console = console
        self.rng: Optional[random.Random] = None
        self.game_manager: Optional[GameManager] = None
        self.logger = None

    def initialize(self, overrides: Optional[dict] = None):
        """Initialize configuration, logging, console and games"""
        self.config_manager = ConfigurationManager(self.config_dir)
        self.config_manager.load_config()
        for key, value in (overrides or {}).items():
            self.config_manager.set(key, value)

        initialize_logging(self.config_manager.config)
        self.logger = get_logger('main')

        self.logger.info(f"{self.config_manager.get('app.name')} starting up...")
        self.logger.info(f"Version: {self.config_manager.get('app.version', '1.0.0')}")

        seed = self.config_manager.get_seed()
        self.rng = random.Random(seed)
        if seed is not None:
            self.logger.info(f"Using fixed random seed {seed}")

        if self.console is None:
            if self.config_manager.get('ui.color', True):
                colorama.just_fix_windows_console()
            self.console = Console.from_config(self.config_manager)

        self.game_manager = GameManager(self.console)
        for game_class in (DiceGame, NumberGuessingGame, TicTacToeGame,
                           RockPaperScissorsGame, HangmanGame):
            self.game_manager.register_game(game_class(self.console, self.rng))

        self.logger.info("Core systems initialized successfully")

    def run(self) -> int:
        """Run the main menu, returns the process exit code"""
        self.console.loading_screen("INITIALIZING KERNEL")
        try:
            MainMenu(self.game_manager, self.console).run()
        except (EOFError, KeyboardInterrupt):
            self.logger.info("Input closed, shutting down")
            self.console.write("\n\n\tSession interrupted. Goodbye!")
        finally:
            self.logger.info(f"Session stats: {self.game_manager.get_session_stats()}")
        return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Console Game Hub")
    parser.add_argument("--config-dir", default="config", help="Directory holding default.yaml / config.yaml")
    parser.add_argument("--seed", type=int, help="Fix the random seed for reproducible games")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--no-delay", action="store_true", help="Skip cosmetic delays")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    overrides = {}
    if args.seed is not None:
        overrides['app.seed'] = args.seed
    if args.no_color:
        overrides['ui.color'] = False
    if args.no_delay:
        overrides['ui.delays'] = False

    app = GameHubApplication(config_dir=args.config_dir)
    try:
        app.initialize(overrides)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Application failed to start: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    return app.run()


if __name__ == "__main__":
    sys.exit(main())
