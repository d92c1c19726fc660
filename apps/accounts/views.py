import logging

from django.contrib.auth.models import User
from django.http import JsonResponse

from apps.core.api import api_view, parse_json_body
from .forms import LoginForm

logger = logging.getLogger(__name__)

INVALID_LOGIN = {'error': 'Invalid username, password, or role'}


@api_view(['POST'], authenticated=False)
def login(request):
    """
    역할 로그인

    아이디/역할은 대소문자를 구분하지 않고, 비밀번호는 Django 해시로 검증합니다.
    성공 시 {'role': ...} 을 돌려주며, 클라이언트는 이후 요청에
    'Authorization: Bearer <role>' 헤더를 붙입니다.
    """
    form = LoginForm(parse_json_body(request))
    if not form.is_valid():
        return JsonResponse(INVALID_LOGIN, status=401)

    username = form.cleaned_data['username']
    role = form.cleaned_data['role']
    logger.info(f"로그인 시도: {username} ({role})")

    user = User.objects.filter(username__iexact=username, is_active=True).select_related('profile').first()
    if (
        user is None
        or not user.check_password(form.cleaned_data['password'])
        or not hasattr(user, 'profile')
        or not user.profile.matches_role(role)
    ):
        logger.warning(f"로그인 실패: {username} ({role})")
        return JsonResponse(INVALID_LOGIN, status=401)

    return JsonResponse({'role': user.profile.role})
