"""Bounded city sequence with an incrementally maintained total distance."""
from contextlib import contextmanager

from tsp.services.distmat import DistanceMatrix
from tsp.services.naming import city_name


class Path:
    """
    Ordered list of visited cities, used as a stack by the solver.

    ``dist`` always equals the sum of the consecutive edge distances of the
    current sequence. Cities are only ever added or removed at the tail, so
    each push/pop adjusts it by a single edge.
    """

    def __init__(
        self, capacity: int, matrix: DistanceMatrix, dist: int | float = 0
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"Path capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.matrix = matrix
        self.dist = dist
        self._cities: list[int] = []

    def __len__(self) -> int:
        return len(self._cities)

    @property
    def cities(self) -> tuple[int, ...]:
        return tuple(self._cities)

    def last(self) -> int:
        if not self._cities:
            raise IndexError("last() on an empty path")
        return self._cities[-1]

    def total_distance(self) -> int | float:
        return self.dist

    def push(self, city: int) -> None:
        if len(self._cities) >= self.capacity:
            raise IndexError(f"Path is full (capacity {self.capacity})")
        if not 0 <= city < self.matrix.size:
            raise ValueError(f"City {city} out of range [0, {self.matrix.size})")
        if self._cities:
            self.dist += self.matrix.dist(self._cities[-1], city)
        self._cities.append(city)

    def pop(self) -> int:
        if not self._cities:
            raise IndexError("pop() on an empty path")
        city = self._cities.pop()
        if self._cities:
            self.dist -= self.matrix.dist(self._cities[-1], city)
        return city

    @contextmanager
    def extended(self, city: int):
        """Push ``city`` for the duration of the block, popping it on exit."""
        self.push(city)
        try:
            yield self
        finally:
            self.pop()

    def copy_into(self, dst: "Path") -> None:
        """Overwrite ``dst`` with this path's cities and distance."""
        dst.capacity = self.capacity
        dst.matrix = self.matrix
        dst.dist = self.dist
        dst._cities = list(self._cities)

    def render(self) -> str:
        """Format as ``[ A B C A ] => (12)``, with ``-`` for unused slots."""
        slots = [city_name(city) for city in self._cities]
        slots.extend("-" * (self.capacity - len(self._cities)))
        return f"[ {' '.join(slots)} ] => ({self.dist})"

    def __repr__(self) -> str:
        return f"Path(cities={self._cities!r}, dist={self.dist!r})"
