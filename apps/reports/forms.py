from django import forms

from apps.core.exceptions import InvalidFilter
from .utils import STATUSES


class ReportFilterForm(forms.Form):
    """리포트 조회 필터 (쿼리스트링)"""

    month = forms.IntegerField(min_value=1, max_value=12, required=False, label='월')
    year = forms.RegexField(regex=r'^\d{4}$', required=False, label='연도')
    status = forms.ChoiceField(
        choices=[('', '전체')] + [(s, s) for s in STATUSES],
        required=False,
        label='상태',
    )
    search = forms.CharField(required=False, label='회원 검색')


def parse_report_filters(params):
    """
    쿼리스트링 → 필터 dict

    잘못된 값은 무시하지 않고 InvalidFilter로 거부합니다.
    """
    form = ReportFilterForm(params)
    if not form.is_valid():
        field, errors = next(iter(form.errors.get_json_data().items()))
        raise InvalidFilter(field, params.get(field), f"Invalid value for '{field}': {errors[0]['message']}")

    data = form.cleaned_data
    return {
        'month': data['month'],
        'year': data['year'] or None,
        'status': data['status'] or None,
        'search': data['search'] or None,
    }
