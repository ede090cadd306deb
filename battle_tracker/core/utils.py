"""
Utilities module for the battle tracker.

Provides common helpers shared by the combat components: console printing with
rich formatting, the ability modifier formula, hit point bars and the parsing
rule applied to free-text numeric input.
"""

import re
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)

# Leading signed integer, surrounding text is ignored.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def get_stat_modifier(score: int) -> int:
    """
    Calculates the D&D ability score modifier.

    Args:
        score (int): The ability score.

    Returns:
        int: The modifier for the given ability score.

    """
    return (score - 10) // 2


def parse_int_input(value: Any, default: int | None = 0) -> int | None:
    """
    Reads an integer typed by a user.

    Integers pass through unchanged. Strings yield their leading signed
    integer ("12abc" gives 12). Anything else yields the default.

    Args:
        value (Any): The raw input.
        default (int | None): Value returned when nothing can be parsed.

    Returns:
        int | None: The parsed integer or the default.

    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1))


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    filled = int((current / maximum) * length) if maximum > 0 else 0
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
