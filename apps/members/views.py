import logging

from django.core.exceptions import ValidationError
from django.http import JsonResponse

from apps.core.api import api_view, parse_json_body
from .forms import MemberForm
from .models import Member

logger = logging.getLogger(__name__)

MEMBER_FIELDS = ['name', 'phone', 'address', 'rayon']


def _member_form_data(body, instance=None):
    """JSON 본문 → 폼 데이터 (수정 시 누락된 키는 기존 값 유지)"""
    data = {}
    for field in MEMBER_FIELDS:
        if field in body:
            data[field] = body[field] if body[field] is not None else ''
        elif instance is not None:
            data[field] = getattr(instance, field)
    return data


@api_view(['GET', 'POST'])
def member_list(request):
    """회원 목록 / 회원 등록"""
    if request.method == 'GET':
        members = [m.to_dict() for m in Member.objects.all()]
        return JsonResponse(members, safe=False)

    form = MemberForm(_member_form_data(parse_json_body(request)))
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())

    member = form.save()
    logger.info(f"회원 등록: {member.name} (ID: {member.id})")
    return JsonResponse(member.to_dict(), status=201)


@api_view(['GET', 'PUT'])
def member_detail(request, pk):
    """회원 조회 / 수정"""
    member = Member.objects.filter(pk=pk).first()
    if member is None:
        return JsonResponse({'error': 'Member not found'}, status=404)

    if request.method == 'GET':
        return JsonResponse(member.to_dict())

    form = MemberForm(_member_form_data(parse_json_body(request), member), instance=member)
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())

    member = form.save()
    logger.info(f"회원 수정: {member.name} (ID: {member.id})")
    return JsonResponse(member.to_dict())
