"""
거래 기록 함수

모든 기록은 원자적으로 처리되며, DB 오류는 StorageUnavailable로 올라갑니다.
잘못된 회원/월 참조는 Transaction.full_clean()에서 ValidationError로 거부됩니다.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.core.api import storage_guard
from .models import Transaction

logger = logging.getLogger(__name__)


def current_year():
    return str(timezone.localdate().year)


def record_dues_income(member, year, months, amount, method, description=''):
    """
    회비 납부 기록 (월마다 income 1건씩)

    Args:
        member: 회원
        year: 연도 태그 ('2025')
        months: 납부 대상 월 목록
        amount: 월별 기록 금액
    """
    if not months:
        raise ValidationError({'months': '납부할 월을 하나 이상 선택하세요'})

    today = timezone.localdate()
    with storage_guard(), transaction.atomic():
        created = [
            Transaction.objects.create(
                type=Transaction.TYPE_INCOME,
                description=description,
                amount=amount,
                method=method,
                date=today,
                member=member,
                month=month,
                year=year,
            )
            for month in months
        ]

    logger.info(f"회비 납부 기록: {member} {year}년 {len(created)}개월")
    return created


def record_general_income(amount, method, description=''):
    """조직 일반 수입 기록 (회원/월 없음)"""
    with storage_guard(), transaction.atomic():
        tx = Transaction.objects.create(
            type=Transaction.TYPE_INCOME,
            description=description,
            amount=amount,
            method=method,
        )
    logger.info(f"일반 수입 기록: {amount:,}")
    return tx


def record_installment(member, month, amount, method, description='', year=None):
    """회비 분납 기록 (연도 미지정 시 올해)"""
    with storage_guard(), transaction.atomic():
        tx = Transaction.objects.create(
            type=Transaction.TYPE_INSTALLMENT,
            description=description,
            amount=amount,
            method=method,
            member=member,
            month=month,
            year=year or current_year(),
        )
    logger.info(f"분납 기록: {member} {month} {amount:,}")
    return tx


def record_expense(name, category, amount, method):
    """조직 지출 기록 (지출명은 description에 저장)"""
    with storage_guard(), transaction.atomic():
        tx = Transaction.objects.create(
            type=Transaction.TYPE_EXPENSE,
            description=name,
            amount=amount,
            method=method,
            category=category,
        )
    logger.info(f"지출 기록: [{category}] {name} {amount:,}")
    return tx
