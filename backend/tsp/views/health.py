from django.conf import settings
from django.http import JsonResponse


async def healthz(request):
    return JsonResponse({"status": "ok", "max_size": settings.TSP_MAX_SIZE})
