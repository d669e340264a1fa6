"""Interactive yes/no confirmation"""

from typing import Optional

from rich.console import Console

AFFIRMATIVE_ANSWERS = ("y", "yes")


def is_affirmative(answer: Optional[str]) -> bool:
    """True only for y/yes, in any case."""
    return (answer or "").strip().lower() in AFFIRMATIVE_ANSWERS


def ask_confirmation(question: str, console: Optional[Console] = None) -> bool:
    """Ask a yes/no question. Anything other than y/yes, including EOF, is a no."""
    console = console if console is not None else Console()
    try:
        response = console.input(question)
    except EOFError:
        return False
    return is_affirmative(response)
