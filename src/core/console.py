"""
Console Presentation Layer

Validated input, colored output, headers, screen clearing, pause prompts
and the loading animation shared by every game. Games only talk to the
terminal through a Console, so tests can script input and capture output.
"""

import sys
import time
from typing import Callable, Optional, TextIO

from colorama import Fore, Style

from .config import ConfigurationManager


# Console palette
COLOR_DEFAULT = None
COLOR_BLUE = Fore.LIGHTCYAN_EX
COLOR_GREEN = Fore.LIGHTGREEN_EX
COLOR_RED = Fore.LIGHTRED_EX
COLOR_YELLOW = Fore.LIGHTYELLOW_EX
COLOR_PURPLE = Fore.LIGHTMAGENTA_EX
COLOR_CYAN = Fore.CYAN

CLEAR_SEQUENCE = "\033[2J\033[H"
RULE = "\t========================================="
DIVIDER = "\n\t-----------------------------------------"


class Console:
    """
    Text console used by the main menu and all games

    Output goes to a stream (stdout by default) and input comes from an
    input function (builtin input by default). Cosmetic delays are scaled
    by delay_scale; 0 disables them.
    """

    def __init__(self, color: bool = True, clear_screen: bool = True,
                 delay_scale: float = 1.0, branding: str = "",
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None,
                 sleep_func: Callable[[float], None] = time.sleep):
        self.color = color
        self.clear_enabled = clear_screen
        self.delay_scale = delay_scale
        self.branding = branding
        self.input_func = input_func
        self.output = output
        self.sleep_func = sleep_func

    @classmethod
    def from_config(cls, config: ConfigurationManager, **kwargs) -> 'Console':
        """Build a console from the 'ui' configuration section"""
        return cls(
            color=config.get('ui.color', True),
            clear_screen=config.get('ui.clear_screen', True),
            delay_scale=config.get_delay_scale(),
            branding=config.get('ui.branding', ''),
            **kwargs
        )

    @property
    def stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    # Output

    def paint(self, text: str, color: Optional[str] = None) -> str:
        """Wrap text in a color code when colors are enabled"""
        if not self.color or color is None:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def write(self, text: str = "", color: Optional[str] = None, end: str = "\n") -> None:
        self.stream.write(self.paint(text, color) + end)
        self.stream.flush()

    def success(self, text: str) -> None:
        self.write(text, COLOR_GREEN)

    def error(self, text: str) -> None:
        self.write(text, COLOR_RED)

    def warning(self, text: str) -> None:
        self.write(text, COLOR_YELLOW)

    def clear_screen(self) -> None:
        if self.clear_enabled:
            self.write(CLEAR_SEQUENCE, end="")

    def draw_header(self, title: str) -> None:
        """Branding line followed by the boxed screen title"""
        if self.branding:
            self.write(f"\n  // {self.branding} // ", COLOR_CYAN)
        self.write(f"{RULE}\n\t   {title}\n{RULE}\n", COLOR_PURPLE)

    def draw_divider(self) -> None:
        self.write(DIVIDER, COLOR_PURPLE)

    def menu_option(self, key: int, label: str, color: str = COLOR_BLUE) -> None:
        self.write(self.paint(f"\t[{key}] ", color) + label)

    def delay(self, seconds: float) -> None:
        """Cosmetic pause, never affects game logic"""
        scaled = seconds * self.delay_scale
        if scaled > 0:
            self.sleep_func(scaled)

    def loading_screen(self, message: str) -> None:
        self.write(f"\n\n\t{message}", end="")
        for _ in range(3):
            self.write(".", end="")
            self.delay(0.2)
        self.write()
        self.clear_screen()

    # Input

    def read_line(self, prompt: str = "") -> str:
        """Read one raw line, raises EOFError when input is exhausted"""
        return self.input_func(prompt)

    def pause(self) -> None:
        self.read_line("\n\tPress [ENTER] to return...")

    def get_validated_int(self, prompt: str, min_value: int, max_value: int) -> int:
        """
        Prompt until the player enters a whole number within bounds

        Args:
            prompt: Text shown before each read
            min_value: Smallest accepted value (inclusive)
            max_value: Largest accepted value (inclusive)

        Returns:
            The first valid value entered
        """
        while True:
            text = self.read_line(prompt)

            if not text:
                self.error("\t[!] Input required.")
                continue

            # ASCII digits only, which also rejects signs, decimals and spaces
            if not (text.isascii() and text.isdigit()):
                self.error("\t[!] Invalid format. Numbers only.")
                continue

            value = int(text)
            if min_value <= value <= max_value:
                return value

            self.error(f"\t[!] Range Error: Enter {min_value}-{max_value}.")
