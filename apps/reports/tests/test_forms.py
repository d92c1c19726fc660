import pytest
from django.http import QueryDict

from apps.core.exceptions import InvalidFilter
from apps.reports.forms import parse_report_filters


class TestParseReportFilters:
    """쿼리스트링 필터 검증"""

    def test_empty_query_means_no_filters(self):
        assert parse_report_filters(QueryDict('')) == {
            'month': None,
            'year': None,
            'status': None,
            'search': None,
        }

    def test_valid_filters(self):
        filters = parse_report_filters(QueryDict('month=6&year=2025&status=paid&search=%20Ana%20'))

        assert filters == {
            'month': 6,
            'year': '2025',
            'status': 'paid',
            'search': 'Ana',
        }

    @pytest.mark.parametrize('query,field', [
        ('month=abc', 'month'),
        ('month=0', 'month'),
        ('month=13', 'month'),
        ('year=25', 'year'),
        ('year=20x5', 'year'),
        ('status=lunas', 'status'),
    ])
    def test_malformed_filter_is_rejected(self, query, field):
        """잘못된 값은 무시하지 않고 InvalidFilter"""
        with pytest.raises(InvalidFilter) as exc_info:
            parse_report_filters(QueryDict(query))

        assert exc_info.value.field == field
        assert exc_info.value.status_code == 400

    def test_long_search_is_plain_text(self):
        """검색어는 길이와 관계없이 자유 텍스트"""
        filters = parse_report_filters(QueryDict(f"search={'A' * 150}"))

        assert filters['search'] == 'A' * 150
