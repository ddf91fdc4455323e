"""Letter names for city indices: 0 → 'A', 1 → 'B', ..."""

MAX_NAMED_CITIES = 26


def city_name(city: int) -> str:
    if not 0 <= city < MAX_NAMED_CITIES:
        raise ValueError(f"City {city} has no letter name (0-{MAX_NAMED_CITIES - 1})")
    return chr(ord("A") + city)
