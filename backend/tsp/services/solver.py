"""
Exact TSP solver: depth-first backtracking with optional branch-and-bound.

Every tour starts and ends at ``problem.first``. Without pruning the search
visits all (size-1)! cycles anchored at the first city; with pruning it skips
any partial path that is already at least as long as the best tour found.
"""
import logging
import math
import sys
import threading
from dataclasses import dataclass
from typing import TextIO

from tsp.services.path import Path
from tsp.services.problem import Problem

logger = logging.getLogger(__name__)


class SolveCancelled(Exception):
    """Raised when the cancel event is set while a search is running."""


@dataclass
class SolveResult:
    path: Path
    count: int

    @property
    def distance(self):
        return self.path.total_distance()

    @property
    def explored_total(self) -> int:
        """Number of tours an exhaustive search examines: (size-1)!."""
        return math.factorial(self.path.matrix.size - 1)


def check_path(problem: Problem, cur: Path, best: Path | None = None) -> bool:
    """
    Return False if ``cur`` revisits a city, or, with pruning on, if it is
    already no shorter than ``best``.
    """
    if len(cur) <= 1:
        return True
    cities = cur.cities
    if cities[-1] in cities[:-1]:
        return False

    # distances are non-negative, so the partial sum only grows
    if problem.options.optimize and best is not None and len(best) > 0:
        if cur.total_distance() >= best.total_distance():
            return False

    return True


class _Search:
    def __init__(self, problem: Problem, out: TextIO, cancel: threading.Event | None):
        self.problem = problem
        self.out = out
        self.cancel = cancel
        self.count = 0

    def run(self, cur: Path, best: Path) -> None:
        problem = self.problem
        if self.cancel is not None and self.cancel.is_set():
            raise SolveCancelled(f"Search cancelled after {self.count} tours")
        if len(cur) == problem.size:
            return
        if problem.options.debug:
            self.out.write(cur.render() + "\n")

        for city in range(problem.size):
            with cur.extended(city):
                if not check_path(problem, cur, best):
                    continue
                if len(cur) == problem.size:
                    with cur.extended(problem.first):
                        if cur.total_distance() < best.total_distance():
                            cur.copy_into(best)
                        if problem.options.verbose:
                            self.out.write(cur.render() + "\n")
                        self.count += 1
                else:
                    self.run(cur, best)


def solve(
    problem: Problem,
    out: TextIO | None = None,
    cancel: threading.Event | None = None,
) -> SolveResult:
    """
    Find the shortest tour through every city of ``problem``.

    Ties keep the first tour found in ascending city order. Verbose and debug
    output is written to ``out`` (stdout by default); it never affects the
    result. Setting ``cancel`` from another thread aborts the search with
    ``SolveCancelled``.
    """
    capacity = problem.size + 1  # room for the closing edge
    cur = Path(capacity, problem.matrix)
    best = Path(capacity, problem.matrix, dist=math.inf)
    cur.push(problem.first)

    search = _Search(problem, out if out is not None else sys.stdout, cancel)
    search.run(cur, best)

    logger.info(
        "Solved TSP of size %d from city %d (optimize=%s): %d tours explored, distance %s",
        problem.size,
        problem.first,
        problem.options.optimize,
        search.count,
        best.total_distance(),
    )
    return SolveResult(path=best, count=search.count)
