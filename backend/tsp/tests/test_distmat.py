"""Tests for the distance matrix model and its text format."""
import pytest

from tsp.services.distmat import DistanceMatrix, MatrixFormatError

ROWS_3 = [
    [0, 3, 5],
    [3, 0, 7],
    [5, 7, 0],
]


class TestConstruction:
    def test_from_rows(self):
        matrix = DistanceMatrix.from_rows(ROWS_3)
        assert matrix.size == 3
        assert matrix.dist(0, 2) == 5
        assert matrix.dist(2, 1) == 7
        assert matrix.rows() == ROWS_3

    def test_non_square_rejected(self):
        with pytest.raises(ValueError):
            DistanceMatrix.from_rows([[0, 1], [1, 0, 2]])

    def test_wrong_value_count_rejected(self):
        with pytest.raises(ValueError):
            DistanceMatrix(2, [0, 1, 1])

    def test_negative_distance_rejected(self):
        with pytest.raises(ValueError):
            DistanceMatrix.from_rows([[0, -1], [-1, 0]])

    def test_asymmetric_rejected(self):
        with pytest.raises(ValueError):
            DistanceMatrix.from_rows([[0, 1], [2, 0]])

    def test_non_integer_rejected(self):
        with pytest.raises(ValueError):
            DistanceMatrix.from_rows([[0, 1.5], [1.5, 0]])

    def test_equality(self):
        assert DistanceMatrix.from_rows(ROWS_3) == DistanceMatrix.from_rows(ROWS_3)
        assert DistanceMatrix.from_rows(ROWS_3) != DistanceMatrix.from_rows([[0, 1], [1, 0]])


class TestRandom:
    def test_same_seed_same_matrix(self):
        assert DistanceMatrix.random(6, seed=7) == DistanceMatrix.random(6, seed=7)

    def test_different_seeds_differ(self):
        matrices = {tuple(map(tuple, DistanceMatrix.random(6, seed=s).rows())) for s in range(5)}
        assert len(matrices) > 1

    def test_values_in_range_and_symmetric(self):
        matrix = DistanceMatrix.random(8, seed=3, distmax=4)
        for i in range(8):
            assert matrix.dist(i, i) == 0
            for j in range(8):
                assert matrix.dist(i, j) == matrix.dist(j, i)
                if i != j:
                    assert 1 <= matrix.dist(i, j) <= 4

    def test_invalid_distmax(self):
        with pytest.raises(ValueError):
            DistanceMatrix.random(3, distmax=0)


class TestTextFormat:
    def test_dumps_layout(self):
        text = DistanceMatrix.from_rows(ROWS_3).dumps()
        assert text == "3\n0 3 5\n3 0 7\n5 7 0\n"

    def test_loads_any_whitespace(self):
        matrix = DistanceMatrix.loads("3  0 3 5\n3 0\t7 5 7 0")
        assert matrix.rows() == ROWS_3

    def test_save_then_load_round_trip(self, tmp_path):
        original = DistanceMatrix.random(7, seed=11, distmax=99)
        filename = tmp_path / "matrix.txt"
        original.save(str(filename))
        assert DistanceMatrix.load(str(filename)) == original

    def test_empty_text(self):
        with pytest.raises(MatrixFormatError):
            DistanceMatrix.loads("   ")

    def test_bad_size_token(self):
        with pytest.raises(MatrixFormatError):
            DistanceMatrix.loads("three 0 1 1 0")

    def test_truncated(self):
        with pytest.raises(MatrixFormatError):
            DistanceMatrix.loads("3\n0 3 5\n3 0 7\n5 7")

    def test_non_integer_value(self):
        with pytest.raises(MatrixFormatError):
            DistanceMatrix.loads("2\n0 x\nx 0")

    def test_asymmetric_file(self):
        with pytest.raises(MatrixFormatError):
            DistanceMatrix.loads("2\n0 1\n2 0")

    def test_format_error_is_value_error(self):
        assert issubclass(MatrixFormatError, ValueError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DistanceMatrix.load(str(tmp_path / "absent.txt"))


class TestRender:
    def test_table(self):
        matrix = DistanceMatrix.from_rows([[0, 5], [5, 0]])
        assert matrix.render().splitlines() == [
            "     A  B ",
            "  ---------",
            "A |  0  5 |",
            "B |  5  0 |",
            "  ---------",
        ]
