"""Solve endpoint — exact TSP over a user-supplied distance matrix."""
import json

from asgiref.sync import sync_to_async
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from tsp.serializers import SolveRequestSerializer
from tsp.services.naming import city_name
from tsp.services.problem import Options, Problem
from tsp.services.solver import solve


@csrf_exempt
@require_http_methods(["POST"])
async def solve_tour(request):
    """
    POST /api/solve

    Request body:
        {
            "matrix": [[int, ...], ...],   // symmetric, non-negative
            "first": int,                  // starting city, default 0
            "optimize": bool               // branch-and-bound, default true
        }

    Response:
        {
            "tour": [int, ...],            // closed: ends with the first city
            "cities": ["A", ...],
            "distance": int,
            "count": int,                  // complete tours examined
            "explored_total": int          // (size-1)!
        }
    """
    try:
        body = json.loads(request.body)
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON body"}, status=400)

    serializer = SolveRequestSerializer(data=body)
    if not serializer.is_valid():
        return JsonResponse(
            {"error": "Invalid solve request", "details": serializer.errors},
            status=400,
        )

    data = serializer.validated_data
    problem = Problem.for_matrix(
        data["matrix"], first=data["first"], options=Options(optimize=data["optimize"])
    )
    result = await sync_to_async(solve)(problem)

    tour = list(result.path.cities)
    return JsonResponse(
        {
            "tour": tour,
            "cities": [city_name(city) for city in tour],
            "distance": result.distance,
            "count": result.count,
            "explored_total": result.explored_total,
        }
    )
