from django.http import JsonResponse


def route_not_found(request, exception=None):
    """404 → {"error": "Route not found"}"""
    return JsonResponse({'error': 'Route not found'}, status=404)
