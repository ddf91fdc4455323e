"""Random distance matrix generator."""
from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from tsp.services.distmat import DistanceMatrix


@require_http_methods(["GET"])
async def random_matrix(request):
    """
    GET /api/matrix/random?size=N&seed=S&distmax=M

    Query params:
        size    (int, required) — number of cities, 2..TSP_MAX_SIZE
        seed    (int, optional) — random seed, default 0
        distmax (int, optional) — largest distance, default TSP_DISTMAX
    """
    try:
        size = int(request.GET["size"])
        seed = int(request.GET.get("seed", 0))
        distmax = int(request.GET.get("distmax", settings.TSP_DISTMAX))
    except KeyError as exc:
        return JsonResponse(
            {"error": f"Missing required query parameter: {exc.args[0]}"}, status=400
        )
    except ValueError:
        return JsonResponse(
            {"error": "size, seed and distmax must be integers"}, status=400
        )

    if not 2 <= size <= settings.TSP_MAX_SIZE:
        return JsonResponse(
            {"error": f"size must be between 2 and {settings.TSP_MAX_SIZE}"}, status=400
        )
    if distmax < 1:
        return JsonResponse({"error": "distmax must be at least 1"}, status=400)

    matrix = DistanceMatrix.random(size, seed=seed, distmax=distmax)
    return JsonResponse({"size": matrix.size, "matrix": matrix.rows()})
