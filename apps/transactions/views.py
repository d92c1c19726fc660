import logging

from django.core.exceptions import ValidationError
from django.http import JsonResponse

from apps.core.api import api_view, parse_json_body
from .forms import DuesIncomeForm, ExpenseForm, GeneralIncomeForm, InstallmentForm
from .models import Transaction
from .utils import (
    current_year,
    record_dues_income,
    record_expense,
    record_general_income,
    record_installment,
)

logger = logging.getLogger(__name__)

# JSON 키 → 폼 필드
BODY_KEY_MAP = {'memberId': 'member'}


def _bind(form_class, body):
    """JSON 본문으로 폼을 만들고 검증 (실패 시 ValidationError)"""
    data = {BODY_KEY_MAP.get(key, key): value for key, value in body.items() if value is not None}
    form = form_class(data)
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())
    return form.cleaned_data


@api_view(['GET'])
def transaction_list(request):
    """전체 거래 목록"""
    transactions = [tx.to_dict() for tx in Transaction.objects.all()]
    return JsonResponse(transactions, safe=False)


@api_view(['POST'])
def income_create(request):
    """
    수입 기록

    - type == 'member': 회원 회비 (선택한 월마다 1건)
    - 그 외: 조직 일반 수입
    """
    body = parse_json_body(request)

    if body.get('type') == 'member':
        data = _bind(DuesIncomeForm, body)
        created = record_dues_income(
            member=data['member'],
            year=data['year'] or current_year(),
            months=list(data['months']),
            amount=data['amount'],
            method=data['method'],
            description=data['description'],
        )
        return JsonResponse({
            'success': True,
            'transactions': [tx.to_dict() for tx in created],
        }, status=201)

    data = _bind(GeneralIncomeForm, body)
    tx = record_general_income(
        amount=data['amount'],
        method=data['method'],
        description=data['description'],
    )
    return JsonResponse(tx.to_dict(), status=201)


@api_view(['POST'])
def installment_create(request):
    """회비 분납 기록"""
    data = _bind(InstallmentForm, parse_json_body(request))
    tx = record_installment(
        member=data['member'],
        month=data['month'],
        amount=data['amount'],
        method=data['method'],
        description=data['description'],
        year=data['year'] or None,
    )
    return JsonResponse(tx.to_dict(), status=201)


@api_view(['POST'])
def expense_create(request):
    """지출 기록"""
    data = _bind(ExpenseForm, parse_json_body(request))
    tx = record_expense(
        name=data['name'],
        category=data['category'],
        amount=data['amount'],
        method=data['method'],
    )
    return JsonResponse(tx.to_dict(), status=201)
