from django.http import JsonResponse

from apps.core.api import api_view, parse_json_body
from .models import Month, OrganizationSettings
from .utils import update_settings


@api_view(['GET'])
def month_list(request):
    """월 기준표 (1~12월)"""
    months = [m.to_dict() for m in Month.objects.all()]
    return JsonResponse(months, safe=False)


@api_view(['GET', 'PUT'])
def settings_detail(request):
    """
    조직 설정 조회/수정

    PUT 본문에 없는 키는 기존 값을 유지합니다.
    """
    if request.method == 'GET':
        return JsonResponse(OrganizationSettings.get_solo().to_dict())

    settings_obj = update_settings(parse_json_body(request))
    return JsonResponse(settings_obj.to_dict())
