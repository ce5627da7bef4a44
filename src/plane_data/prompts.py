"""Parsing of single lines of interactive input.

These never prompt or loop; the session re-asks when they raise.
"""

from __future__ import annotations

from .errors import InputError


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InputError("Invalid input. Please enter a number.") from None


def parse_menu_choice(text: str, low: int = 1, high: int = 3) -> int:
    """Parse a menu choice in [low, high].

    Raises:
        InputError: if the text is not a number in range.
    """
    choice = _parse_int(text)
    if not low <= choice <= high:
        raise InputError(
            f"Invalid choice. Please enter a number between {low} and {high}."
        )
    return choice


def parse_plane_number(text: str, count: int) -> int:
    """Parse a 1-based plane number and return it as a 0-based index."""
    try:
        n = parse_menu_choice(text, 1, count)
    except InputError:
        raise InputError(
            f"Invalid selection. Please enter a number between 1 and {count}."
        ) from None
    return n - 1


def parse_yes_no(text: str) -> bool:
    """Y/N answer, judged on its first non-blank character."""
    stripped = text.strip()
    answer = stripped[:1].upper()
    if answer == "Y":
        return True
    if answer == "N":
        return False
    raise InputError("Invalid input. Please enter Y or N.")
