"""Interactive yes/no confirmation."""

from typing import Optional

from rich.console import Console

AFFIRMATIVE_ANSWERS = ("yes", "y")


class ConsolePrompt:
    """Ask the user on the terminal; only ``yes`` or ``y`` confirm."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def confirm(self, message: str) -> bool:
        try:
            answer = self.console.input(message)
        except (EOFError, KeyboardInterrupt, OSError):
            return False
        return is_affirmative(answer)


def is_affirmative(answer: str) -> bool:
    """True for ``yes``/``y`` in any case, ignoring surrounding whitespace."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS
