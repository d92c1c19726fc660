"""
JSON API 공통 도구

- storage_guard: DB 예외를 StorageUnavailable로 변환
- api_view: 메서드 제한 + 역할 확인 + 예외 → JSON 응답 변환
- parse_json_body: 요청 본문(JSON) 파싱

역할(role)은 클라이언트가 보내는 Authorization 헤더 값을 그대로 사용합니다.
    Authorization: Bearer bendahara
토큰 검증은 하지 않습니다. 쓰기 권한은 엔티티가 아니라 뷰 계층에서 확인합니다.
"""

import json
import logging
from contextlib import contextmanager
from functools import wraps

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from .exceptions import KasaProError, StorageUnavailable

logger = logging.getLogger(__name__)

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')


@contextmanager
def storage_guard():
    """DB 계층 오류를 StorageUnavailable로 감싸서 올림 (재시도 없음)"""
    try:
        yield
    except DatabaseError as e:
        logger.error(f"저장소 오류: {e}", exc_info=True)
        raise StorageUnavailable() from e


def get_request_role(request):
    """Authorization 헤더에서 역할 추출 (없으면 None)"""
    header = request.headers.get('Authorization', '').strip()
    if not header:
        return None
    # "Bearer <role>" 또는 "<role>"
    return header.split()[-1]


def can_write(role):
    """쓰기 가능한 역할인지"""
    read_only = {r.lower() for r in settings.KASAPRO_READ_ONLY_ROLES}
    return bool(role) and role.lower() not in read_only


def parse_json_body(request):
    """요청 본문을 dict로 파싱 (빈 본문은 빈 dict)"""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise ValidationError('Malformed JSON body')
    if not isinstance(data, dict):
        raise ValidationError('JSON body must be an object')
    return data


def validation_error_response(error):
    """ValidationError → 400 응답"""
    if hasattr(error, 'message_dict'):
        details = error.message_dict
    else:
        details = {'__all__': error.messages}
    return JsonResponse({'error': 'Validation error', 'details': details}, status=400)


def api_view(methods, authenticated=True):
    """
    JSON API 뷰 데코레이터

    Args:
        methods: 허용 HTTP 메서드 목록
        authenticated: Authorization 헤더 필수 여부

    응답 규칙:
        - 헤더 없음 → 401
        - 읽기 전용 역할이 쓰기 메서드 호출 → 403
        - KasaProError → 예외의 status_code
        - ValidationError → 400
    """
    allowed = [m.upper() for m in methods]

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if request.method not in allowed:
                response = JsonResponse({'error': 'Method not allowed'}, status=405)
                response['Allow'] = ', '.join(allowed)
                return response

            if authenticated:
                role = get_request_role(request)
                if not role:
                    return JsonResponse({'error': 'No token provided'}, status=401)
                request.kasapro_role = role
                if request.method not in SAFE_METHODS and not can_write(role):
                    logger.warning(f"쓰기 거부: role={role} {request.method} {request.path}")
                    return JsonResponse({'error': 'Access denied'}, status=403)

            try:
                return view_func(request, *args, **kwargs)
            except ValidationError as e:
                return validation_error_response(e)
            except KasaProError as e:
                if e.status_code >= 500:
                    logger.error(f"{request.method} {request.path} 실패: {e.message}")
                return JsonResponse(e.as_dict(), status=e.status_code)
            except DatabaseError as e:
                logger.error(f"{request.method} {request.path} DB 오류: {e}", exc_info=True)
                error = StorageUnavailable()
                return JsonResponse(error.as_dict(), status=error.status_code)

        return _wrapped
    return decorator
