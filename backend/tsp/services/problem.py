"""Solve request: city count, starting city, distance matrix and solver options."""
from dataclasses import dataclass, field

from tsp.services.distmat import DistanceMatrix


@dataclass(frozen=True)
class Options:
    verbose: bool = False  # report every complete tour
    debug: bool = False  # trace every partial path visited
    optimize: bool = False  # branch-and-bound pruning

    @classmethod
    def from_verbosity(cls, verbosity: int, optimize: bool = False) -> "Options":
        """Map a Django ``--verbosity`` level: 2 reports tours, 3 also traces."""
        return cls(verbose=verbosity >= 2, debug=verbosity >= 3, optimize=optimize)


@dataclass(frozen=True)
class Problem:
    size: int
    first: int
    matrix: DistanceMatrix
    options: Options = field(default_factory=Options)

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"Problem size must be at least 2, got {self.size}")
        if not 0 <= self.first < self.size:
            raise ValueError(
                f"First city {self.first} out of range [0, {self.size})"
            )
        if self.matrix.size != self.size:
            raise ValueError(
                f"Matrix size {self.matrix.size} does not match problem size {self.size}"
            )

    @classmethod
    def for_matrix(
        cls, matrix: DistanceMatrix, first: int = 0, options: Options | None = None
    ) -> "Problem":
        return cls(matrix.size, first, matrix, options or Options())
