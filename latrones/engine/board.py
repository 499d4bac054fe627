"""
Latrones - Board State

The 64-square grid. Index `i` maps to row `i // 8` and column `i % 8`,
rows counted bottom-to-top. The board only checks index bounds; legality
of what is written is the caller's concern.
"""

from latrones.engine.base import BOARD_SIZE, SQUARE_COUNT, Square
from latrones.engine.validators import FILES, validate_square_index

# (row delta, column delta) for up, down, right, left
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

_GLYPHS = {Square.EMPTY: ".", Square.LIGHT: "L", Square.DARK: "D"}


class BoardState:
    """Mutable 8x8 grid of squares."""

    def __init__(self) -> None:
        self._squares: list[Square] = [Square.EMPTY] * SQUARE_COUNT

    def read(self, index: int) -> Square:
        return self._squares[validate_square_index(index)]

    def write(self, index: int, square: Square) -> None:
        self._squares[validate_square_index(index)] = Square(square)

    def count(self, square: Square) -> int:
        return self._squares.count(square)

    def clear(self) -> None:
        """Set every square to Empty."""
        self._squares = [Square.EMPTY] * SQUARE_COUNT

    def indices_of(self, square: Square) -> list[int]:
        """Indices holding `square`, in ascending order."""
        return [i for i, value in enumerate(self._squares) if value == square]

    def to_list(self) -> list[int]:
        """Board as plain integers (0=Empty, 1=Light, 2=Dark)."""
        return [int(value) for value in self._squares]

    @staticmethod
    def neighbor(index: int, drow: int, dcol: int) -> int | None:
        """Index one step from `index` in the given direction, or None off the board."""
        row, col = divmod(validate_square_index(index), BOARD_SIZE)
        row += drow
        col += dcol
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return row * BOARD_SIZE + col
        return None

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __getitem__(self, index: int) -> Square:
        return self.read(index)

    def __str__(self) -> str:
        # Rank 8 on top, as the board is viewed.
        lines = []
        for row in reversed(range(BOARD_SIZE)):
            cells = " ".join(
                _GLYPHS[self._squares[row * BOARD_SIZE + col]] for col in range(BOARD_SIZE)
            )
            lines.append(f"{row + 1} {cells}")
        lines.append("  " + " ".join(FILES))
        return "\n".join(lines)
