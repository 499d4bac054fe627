"""
Latrones - Input Validation Utilities

Provides validation functions for engine inputs. Validators either return
the validated value or raise a descriptive ValueError; the `is_*` helpers
return a bool for callers that must not raise.
"""

from latrones.engine.base import BOARD_SIZE, SQUARE_COUNT

FILES = "ABCDEFGH"


def is_valid_square_index(index: object) -> bool:
    """Return True if `index` is an integer square index in 0-63."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < SQUARE_COUNT


def validate_square_index(index: object) -> int:
    """
    Validate a board square index.

    Args:
        index: Candidate row-major square index

    Returns:
        The validated index

    Raises:
        ValueError: If index is not an integer in 0-63
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Square index must be an integer, got {type(index).__name__}.")
    if not 0 <= index < SQUARE_COUNT:
        raise ValueError(
            f"Square index {index} is out of range. Must be between 0 and {SQUARE_COUNT - 1}."
        )
    return index


def square_name(index: int) -> str:
    """Algebraic name of a square, e.g. 0 -> "A1", 63 -> "H8"."""
    validate_square_index(index)
    row, col = divmod(index, BOARD_SIZE)
    return f"{FILES[col]}{row + 1}"


def parse_square(name: str) -> int:
    """
    Convert an algebraic square name back to its index.

    Raises:
        ValueError: If the name is not a file A-H followed by a rank 1-8
    """
    text = name.strip().upper() if isinstance(name, str) else ""
    if len(text) != 2 or text[0] not in FILES or text[1] not in "12345678":
        raise ValueError(f"Invalid square name {name!r}. Expected A1-H8.")
    return (int(text[1]) - 1) * BOARD_SIZE + FILES.index(text[0])
