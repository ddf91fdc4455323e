"""Tests for solve request validation and options."""
import pytest

from tsp.services.distmat import DistanceMatrix
from tsp.services.problem import Options, Problem

MATRIX = DistanceMatrix.random(4, seed=1)


class TestProblem:
    def test_valid_problem(self):
        problem = Problem(4, 3, MATRIX)
        assert problem.size == 4
        assert problem.first == 3
        assert problem.options == Options()

    def test_first_city_out_of_range(self):
        with pytest.raises(ValueError):
            Problem(4, 4, MATRIX)

    def test_negative_first_city(self):
        with pytest.raises(ValueError):
            Problem(4, -1, MATRIX)

    def test_size_below_two(self):
        with pytest.raises(ValueError):
            Problem(1, 0, DistanceMatrix(1, [0]))

    def test_matrix_size_mismatch(self):
        with pytest.raises(ValueError):
            Problem(5, 0, MATRIX)

    def test_for_matrix_takes_size_from_matrix(self):
        problem = Problem.for_matrix(MATRIX, first=2, options=Options(optimize=True))
        assert problem.size == 4
        assert problem.options.optimize

    def test_is_immutable(self):
        problem = Problem.for_matrix(MATRIX)
        with pytest.raises(AttributeError):
            problem.first = 1


class TestOptions:
    @pytest.mark.parametrize(
        "verbosity,verbose,debug",
        [(0, False, False), (1, False, False), (2, True, False), (3, True, True)],
    )
    def test_from_verbosity(self, verbosity, verbose, debug):
        options = Options.from_verbosity(verbosity)
        assert options.verbose is verbose
        assert options.debug is debug
        assert options.optimize is False

    def test_from_verbosity_optimize(self):
        assert Options.from_verbosity(1, optimize=True).optimize is True
