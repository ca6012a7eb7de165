"""
Test utilities and helper functions for Console Game Hub testing.
"""
from typing import Iterable, List


class ScriptedInput:
    """Stands in for input(): replays lines and records prompts, EOF when exhausted."""

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("scripted input exhausted")
        return self.lines.pop(0)


class PickIndex:
    """Random source whose choice() always takes a fixed position."""

    def __init__(self, index: int = 0, randint_value: int = 1):
        self.index = index
        self.randint_value = randint_value

    def choice(self, seq):
        return seq[self.index]

    def randint(self, a, b):
        return self.randint_value


def scripted_cells(cells):
    """get_validated_int stand-in that replays cell numbers and records its calls."""
    queue = list(cells)
    calls = []

    def read_int(prompt, min_value, max_value):
        calls.append((prompt, min_value, max_value))
        return queue.pop(0)

    read_int.calls = calls
    return read_int
