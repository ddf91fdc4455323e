"""Request validation for the solve endpoint."""
from django.conf import settings
from rest_framework import serializers

from tsp.services.distmat import DistanceMatrix
from tsp.services.naming import MAX_NAMED_CITIES


class SolveRequestSerializer(serializers.Serializer):
    matrix = serializers.ListField(
        child=serializers.ListField(child=serializers.IntegerField(min_value=0)),
        min_length=2,
    )
    first = serializers.IntegerField(min_value=0, default=0)
    optimize = serializers.BooleanField(default=True)

    def validate_matrix(self, rows: list[list[int]]) -> DistanceMatrix:
        max_size = min(settings.TSP_MAX_SIZE, MAX_NAMED_CITIES)
        if len(rows) > max_size:
            raise serializers.ValidationError(f"At most {max_size} cities are supported")
        try:
            return DistanceMatrix.from_rows(rows)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from exc

    def validate(self, attrs: dict) -> dict:
        size = attrs["matrix"].size
        if attrs["first"] >= size:
            raise serializers.ValidationError(
                {"first": f"Must be less than the number of cities ({size})"}
            )
        return attrs
