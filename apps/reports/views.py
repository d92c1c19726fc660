import logging

from django.http import HttpResponse, JsonResponse

from apps.core.api import api_view
from .exports import (
    CSV_FILENAME,
    EXCEL_FILENAME,
    export_report_to_csv,
    export_report_to_excel,
)
from .forms import parse_report_filters
from .utils import generate_report

logger = logging.getLogger(__name__)


@api_view(['GET'])
def report_list(request):
    """납부 현황 (month / year / status / search 필터)"""
    filters = parse_report_filters(request.GET)
    report = generate_report(**filters)
    return JsonResponse([row.to_dict() for row in report], safe=False)


@api_view(['GET'])
def report_export_csv(request):
    """납부 현황 CSV 다운로드"""
    filters = parse_report_filters(request.GET)
    report = generate_report(**filters)

    response = HttpResponse(export_report_to_csv(report), content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{CSV_FILENAME}"'
    return response


@api_view(['GET'])
def report_export_excel(request):
    """납부 현황 엑셀 다운로드"""
    filters = parse_report_filters(request.GET)
    report = generate_report(**filters)
    excel_file = export_report_to_excel(report)

    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{EXCEL_FILENAME}"'
    return response
