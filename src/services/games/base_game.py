"""
Base Game Framework

Provides the base class for the hub's console games and the manager the
main menu uses to list and launch them.
"""

import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.core.console import Console
from src.core.logging import get_logger


class BaseGame(ABC):
    """
    Abstract base class for all console games

    A game owns its console loop in play(); its rules live in plain
    functions or small state objects beside it so they can be tested
    without a terminal.
    """

    def __init__(self, game_type: str, menu_label: str, console: Console,
                 rng: Optional[random.Random] = None):
        self.game_type = game_type
        self.menu_label = menu_label
        self.console = console
        self.rng = rng or random.Random()
        self.logger = get_logger(f"games.{game_type}")

    @abstractmethod
    def play(self) -> Any:
        """
        Run the game until the player returns to the main menu

        Returns:
            A game-specific result (outcome of the last round), or None
        """
        pass


class GameManager:
    """
    Keeps the registered games in menu order and launches them
    """

    def __init__(self, console: Console):
        self.logger = get_logger("games.manager")
        self.console = console
        self.games: Dict[str, BaseGame] = {}
        self.play_counts: Dict[str, int] = {}

    def register_game(self, game: BaseGame):
        """Register a game implementation"""
        self.games[game.game_type] = game
        self.play_counts.setdefault(game.game_type, 0)
        self.logger.info(f"Registered game: {game.game_type}")

    def get_available_games(self) -> List[str]:
        """Get list of available game types in menu order"""
        return list(self.games.keys())

    def get_game(self, game_type: str) -> Optional[BaseGame]:
        """Get game implementation by type"""
        return self.games.get(game_type)

    def play_game(self, game_type: str) -> Any:
        """
        Launch a game and return its result

        Errors raised by a game are logged and reported on the console so
        the player lands back on the main menu. End of input and Ctrl-C
        propagate to the application.
        """
        game = self.games.get(game_type)
        if not game:
            self.logger.warning(f"Unknown game requested: {game_type}")
            return None

        self.play_counts[game_type] += 1
        self.logger.info(f"Starting {game_type} (play #{self.play_counts[game_type]})")

        try:
            result = game.play()
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as e:
            self.logger.error(f"Error while playing {game_type}: {e}", exc_info=True)
            self.console.error(f"\n\t[!] {game.menu_label} crashed. Returning to menu.")
            self.console.pause()
            return None

        self.logger.info(f"Finished {game_type}: {result}")
        return result

    def get_session_stats(self) -> Dict[str, Any]:
        """Get play statistics for this run"""
        return {
            'total_games': len(self.games),
            'games_played': sum(self.play_counts.values()),
            'plays_by_type': dict(self.play_counts)
        }
