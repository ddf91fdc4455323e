"""Tests for city letter names."""
import pytest

from tsp.services.naming import MAX_NAMED_CITIES, city_name


class TestCityName:
    def test_first_and_last_letters(self):
        assert city_name(0) == "A"
        assert city_name(MAX_NAMED_CITIES - 1) == "Z"

    @pytest.mark.parametrize("city", [-1, MAX_NAMED_CITIES])
    def test_out_of_range(self, city):
        with pytest.raises(ValueError):
            city_name(city)
