"""Word search: count XMAS occurrences and X-shaped MAS crosses."""

from collections.abc import Iterable, Iterator

_XMAS = ("XMAS", "SAMX")
_MAS = ("MAS", "SAM")


class WordGrid:
    """A rectangular grid of letters."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.rows = list(lines)
        if not self.rows:
            raise ValueError("empty grid")
        self.width = len(self.rows[0])
        self.columns = ["".join(column) for column in zip(*self.rows)]

    def _windows(self, size: int) -> Iterator[tuple[int, int]]:
        for top in range(len(self.rows) - size + 1):
            for left in range(self.width - size + 1):
                yield top, left

    def _diagonals(self, top: int, left: int, size: int) -> tuple[str, str]:
        main = "".join(self.rows[top + i][left + i] for i in range(size))
        anti = "".join(self.rows[top + i][left + size - 1 - i] for i in range(size))
        return main, anti

    def xmas_count(self) -> int:
        """Occurrences of XMAS horizontally, vertically and diagonally, both ways."""
        straight = sum(
            line.count(word) for line in self.rows + self.columns for word in _XMAS
        )
        diagonal = sum(
            word in _XMAS
            for top, left in self._windows(4)
            for word in self._diagonals(top, left, 4)
        )
        return straight + diagonal

    def x_mas_count(self) -> int:
        """Number of 3x3 windows whose two diagonals both spell MAS either way."""
        count = 0
        for top, left in self._windows(3):
            main, anti = self._diagonals(top, left, 3)
            if main in _MAS and anti in _MAS:
                count += 1
        return count


def xmas_count(lines: Iterable[str]) -> int:
    """Count XMAS in the grid given as lines."""
    return WordGrid(lines).xmas_count()


def x_mas_count(lines: Iterable[str]) -> int:
    """Count X-MAS crosses in the grid given as lines."""
    return WordGrid(lines).x_mas_count()