"""Dense symmetric distance matrix: random generation, text load/save, rendering."""
import random

from tsp.services.naming import city_name


class MatrixFormatError(ValueError):
    """Raised when a matrix text file is malformed or truncated."""


class DistanceMatrix:
    """
    Square table of non-negative integer distances between cities.

    Values are stored flattened in row-major order and never change after
    construction, so one instance can back any number of sequential solves.
    """

    def __init__(self, size: int, values) -> None:
        if size < 1:
            raise ValueError(f"Matrix size must be at least 1, got {size}")
        values = tuple(values)
        if len(values) != size * size:
            raise ValueError(
                f"Expected {size * size} values for a {size}x{size} matrix, got {len(values)}"
            )
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Distances must be integers, got {value!r}")
            if value < 0:
                raise ValueError(f"Distances must be non-negative, got {value}")
        for i in range(size):
            for j in range(i):
                if values[i * size + j] != values[j * size + i]:
                    raise ValueError(
                        f"Matrix is not symmetric: d[{i}][{j}] != d[{j}][{i}]"
                    )
        self.size = size
        self._values = values

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> "DistanceMatrix":
        size = len(rows)
        for i, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {i} has {len(row)} values, expected {size}")
        return cls(size, [value for row in rows for value in row])

    @classmethod
    def random(cls, size: int, seed: int = 0, distmax: int = 10) -> "DistanceMatrix":
        """
        Generate a random symmetric matrix with distances in [1, distmax].

        The generator is local to the call, so the same seed always yields the
        same matrix regardless of any other random state in the process.
        """
        if size < 1:
            raise ValueError(f"Matrix size must be at least 1, got {size}")
        if distmax < 1:
            raise ValueError(f"distmax must be at least 1, got {distmax}")
        rng = random.Random(seed)
        values = [0] * (size * size)
        for i in range(size):
            for j in range(i):
                dist = rng.randint(1, distmax)
                values[i * size + j] = values[j * size + i] = dist
        return cls(size, values)

    def dist(self, first: int, second: int) -> int:
        return self._values[first * self.size + second]

    def rows(self) -> list[list[int]]:
        return [
            list(self._values[i * self.size : (i + 1) * self.size])
            for i in range(self.size)
        ]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return self.size == other.size and self._values == other._values

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"

    # -- text format -------------------------------------------------------

    @classmethod
    def loads(cls, text: str) -> "DistanceMatrix":
        """Parse a size token followed by size*size integers, row-major."""
        tokens = text.split()
        if not tokens:
            raise MatrixFormatError("Empty matrix file")
        try:
            size = int(tokens[0])
        except ValueError:
            raise MatrixFormatError(f"Invalid matrix size: {tokens[0]!r}") from None
        if size < 1:
            raise MatrixFormatError(f"Invalid matrix size: {size}")

        expected = size * size
        body = tokens[1:]
        if len(body) < expected:
            raise MatrixFormatError(
                f"Truncated matrix: expected {expected} values, found {len(body)}"
            )
        try:
            values = [int(token) for token in body[:expected]]
        except ValueError as exc:
            raise MatrixFormatError(f"Invalid distance value: {exc}") from None

        try:
            return cls(size, values)
        except ValueError as exc:
            raise MatrixFormatError(str(exc)) from None

    def dumps(self) -> str:
        lines = [str(self.size)]
        lines.extend(" ".join(str(value) for value in row) for row in self.rows())
        return "\n".join(lines) + "\n"

    @classmethod
    def load(cls, filename: str) -> "DistanceMatrix":
        with open(filename) as f:
            return cls.loads(f.read())

    def save(self, filename: str) -> None:
        with open(filename, "w") as f:
            f.write(self.dumps())

    def render(self) -> str:
        """Fixed-width table with letter headers, one row per city."""
        separator = "  --" + "---" * self.size + "-"
        lines = ["    " + "".join(f" {city_name(j)} " for j in range(self.size))]
        lines.append(separator)
        for i, row in enumerate(self.rows()):
            cells = "".join(f"{value:2d} " for value in row)
            lines.append(f"{city_name(i)} | {cells}|")
        lines.append(separator)
        return "\n".join(lines)
