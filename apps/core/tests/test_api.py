import pytest
from django.core.exceptions import ValidationError
from django.db import OperationalError
from django.http import JsonResponse

from apps.core.api import (
    api_view,
    can_write,
    get_request_role,
    parse_json_body,
    storage_guard,
)
from apps.core.exceptions import InvalidFilter, SettingsMissing, StorageUnavailable


@api_view(['GET', 'POST'])
def echo_view(request):
    return JsonResponse({'role': request.kasapro_role})


@api_view(['GET'])
def failing_view(request):
    raise OperationalError('no such table: members')


@api_view(['GET'])
def settings_view(request):
    raise SettingsMissing()


@api_view(['GET'])
def filter_view(request):
    raise InvalidFilter('month', 'abc')


class TestRequestRole:
    """Authorization 헤더 → 역할"""

    @pytest.mark.parametrize('header,expected', [
        ('Bearer bendahara', 'bendahara'),
        ('bendahara', 'bendahara'),
        ('  Bearer   pengawas  ', 'pengawas'),
        ('', None),
    ])
    def test_role_from_header(self, rf, header, expected):
        request = rf.get('/', HTTP_AUTHORIZATION=header) if header else rf.get('/')
        assert get_request_role(request) == expected

    def test_can_write(self):
        assert can_write('bendahara')
        assert not can_write('pengawas')
        assert not can_write('PENGAWAS')
        assert not can_write(None)


class TestStorageGuard:

    def test_database_error_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailable) as exc_info:
            with storage_guard():
                raise OperationalError('database is locked')

        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert exc_info.value.as_dict() == {'error': 'Database error'}

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with storage_guard():
                raise KeyError('x')


class TestParseJsonBody:

    def test_object(self, rf):
        request = rf.post('/', '{"name": "Ana"}', content_type='application/json')
        assert parse_json_body(request) == {'name': 'Ana'}

    def test_empty_body(self, rf):
        assert parse_json_body(rf.post('/', '', content_type='application/json')) == {}

    @pytest.mark.parametrize('body', ['{bad', '[1, 2]'])
    def test_rejected(self, rf, body):
        with pytest.raises(ValidationError):
            parse_json_body(rf.post('/', body, content_type='application/json'))


class TestApiView:
    """api_view 응답 규칙"""

    def test_role_is_attached(self, rf):
        response = echo_view(rf.get('/', HTTP_AUTHORIZATION='Bearer pengawas'))

        assert response.status_code == 200
        assert response.content == b'{"role": "pengawas"}'

    def test_missing_header(self, rf):
        assert echo_view(rf.get('/')).status_code == 401

    def test_read_only_role_cannot_post(self, rf):
        assert echo_view(rf.post('/', HTTP_AUTHORIZATION='Bearer pengawas')).status_code == 403

    def test_method_not_allowed(self, rf):
        response = echo_view(rf.delete('/', HTTP_AUTHORIZATION='Bearer bendahara'))

        assert response.status_code == 405
        assert response['Allow'] == 'GET, POST'

    @pytest.mark.parametrize('view,status', [
        (failing_view, 503),
        (settings_view, 500),
        (filter_view, 400),
    ])
    def test_errors_are_mapped(self, rf, view, status):
        response = view(rf.get('/', HTTP_AUTHORIZATION='Bearer bendahara'))
        assert response.status_code == status
