from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone
import logging

from apps.core.models import UUIDModel
from apps.members.models import Member
from apps.organization.models import Month

logger = logging.getLogger(__name__)

# 상수
YEAR_VALIDATOR = RegexValidator(regex=r'^\d{4}$', message='연도는 4자리 숫자여야 합니다')


class TransactionQuerySet(models.QuerySet):
    """Transaction 전용 QuerySet (헬퍼 메서드)"""
    def income(self): return self.filter(type=Transaction.TYPE_INCOME)
    def installment(self): return self.filter(type=Transaction.TYPE_INSTALLMENT)
    def expense(self): return self.filter(type=Transaction.TYPE_EXPENSE)
    def dues(self): return self.filter(type__in=Transaction.DUES_TYPES, member__isnull=False, month__isnull=False)
    def for_year(self, year): return self.filter(year=year)


class Transaction(UUIDModel):
    """
    장부 거래 (추가 전용)

    - income: 회비 납부(회원+월 지정) 또는 조직 일반 수입(둘 다 없음)
    - installment: 회비 분납 (회원+월 필수)
    - expense: 조직 지출 (회원/월 없음, 분류 필수)
    """
    TYPE_INCOME = 'income'
    TYPE_INSTALLMENT = 'installment'
    TYPE_EXPENSE = 'expense'
    TYPE_CHOICES = [
        (TYPE_INCOME, '수입'),
        (TYPE_INSTALLMENT, '분납'),
        (TYPE_EXPENSE, '지출'),
    ]
    DUES_TYPES = (TYPE_INCOME, TYPE_INSTALLMENT)

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    description = models.CharField(max_length=255, blank=True)
    amount = models.PositiveIntegerField()
    method = models.CharField(max_length=50, blank=True)
    date = models.DateField(default=timezone.localdate, db_index=True)

    member = models.ForeignKey(Member, on_delete=models.PROTECT, null=True, blank=True, related_name='transactions')
    month = models.ForeignKey(Month, on_delete=models.PROTECT, null=True, blank=True, related_name='transactions')
    year = models.CharField(max_length=4, blank=True, validators=[YEAR_VALIDATOR], db_index=True)
    category = models.CharField(max_length=50, blank=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = 'transactions'
        ordering = ['date', 'created_at', 'id']
        indexes = [
            models.Index(fields=['member', 'month'], name='transactions_member_month_idx'),
            models.Index(fields=['type', 'year'], name='transactions_type_year_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.amount:,} ({self.date})"

    @property
    def is_dues(self):
        """회원 회비 관련 거래인지"""
        return self.type in self.DUES_TYPES and self.member_id is not None

    def clean(self):
        errors = {}
        has_member = self.member_id is not None
        has_month = self.month_id is not None

        if self.type == self.TYPE_INSTALLMENT:
            if not has_member:
                errors['member'] = '분납 거래는 회원이 필요합니다'
            if not has_month:
                errors['month'] = '분납 거래는 월이 필요합니다'
        elif self.type == self.TYPE_INCOME:
            # 회비 수입은 회원과 월을 함께 가져야 함
            if has_member and not has_month:
                errors['month'] = '회비 수입은 월이 필요합니다'
            if has_month and not has_member:
                errors['member'] = '회비 수입은 회원이 필요합니다'
        elif self.type == self.TYPE_EXPENSE:
            if has_member:
                errors['member'] = '지출 거래에는 회원을 지정할 수 없습니다'
            if has_month:
                errors['month'] = '지출 거래에는 월을 지정할 수 없습니다'
            if not self.category:
                errors['category'] = '지출 거래는 분류가 필요합니다'

        if errors: raise ValidationError(errors)

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            raise ValidationError('거래는 수정할 수 없습니다 (추가 전용 장부)')
        # 존재하지 않는 회원/월 참조도 여기서 걸러짐
        self.full_clean()
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError('거래는 삭제할 수 없습니다 (추가 전용 장부)')

    def to_dict(self):
        return {
            'id': str(self.id),
            'type': self.type,
            'description': self.description,
            'amount': self.amount,
            'method': self.method,
            'date': self.date.isoformat() if self.date else None,
            'memberId': str(self.member_id) if self.member_id else None,
            'month': self.month_id,
            'year': self.year or None,
            'category': self.category or None,
        }
