import pytest
from django.core.checks.urls import check_url_config
from django.urls import reverse


class TestApiRoutes:
    """API 경로"""

    @pytest.mark.parametrize('name,args,expected', [
        ('accounts:login', [], '/api/login'),
        ('members:member_list', [], '/api/members'),
        ('members:member_detail', ['1b4e28ba-2fa1-11d2-883f-0016d3cca427'],
         '/api/members/1b4e28ba-2fa1-11d2-883f-0016d3cca427'),
        ('organization:settings', [], '/api/settings'),
        ('organization:month_list', [], '/api/months'),
        ('transactions:transaction_list', [], '/api/transactions'),
        ('transactions:income_create', [], '/api/transactions/income'),
        ('transactions:installment_create', [], '/api/transactions/installment'),
        ('transactions:expense_create', [], '/api/transactions/expense'),
        ('reports:report_list', [], '/api/reports'),
        ('reports:report_export', [], '/api/reports/export'),
        ('reports:report_export_excel', [], '/api/reports/export.xlsx'),
    ])
    def test_reverse(self, name, args, expected):
        assert reverse(name, args=args) == expected

    def test_url_check_has_no_warnings(self):
        """URL 패턴 시스템 체크 경고 없음"""
        assert check_url_config(None) == []


@pytest.mark.django_db
class TestNotFound:
    """없는 경로 → JSON 404"""

    def test_unknown_route(self, client):
        response = client.get('/api/nope')

        assert response.status_code == 404
        assert response.json() == {'error': 'Route not found'}

    def test_malformed_member_id(self, client, treasurer_headers):
        response = client.get('/api/members/bukan-uuid', headers=treasurer_headers)

        assert response.status_code == 404
        assert response.json() == {'error': 'Route not found'}


@pytest.mark.django_db
class TestCors:
    """브라우저 프론트엔드용 CORS 헤더"""

    def test_allow_origin_header(self, client, treasurer_headers, org_settings):
        response = client.get(
            '/api/months', headers={**treasurer_headers, 'Origin': 'http://localhost:5173'}
        )

        assert response.status_code == 200
        assert response['Access-Control-Allow-Origin'] == '*'

    def test_preflight(self, client, db):
        response = client.options(
            '/api/members',
            headers={
                'Origin': 'http://localhost:5173',
                'Access-Control-Request-Method': 'POST',
            },
        )

        assert response.status_code == 200
        assert response['Access-Control-Allow-Origin'] == '*'
