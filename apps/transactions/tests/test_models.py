import uuid

import pytest
from django.core.exceptions import ValidationError

from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestTransactionModel:
    """거래 모델 불변 조건"""

    def test_dues_income(self, member, create_transaction):
        tx = create_transaction('income', 100000, member=member, month=6, year='2025')

        assert tx.is_dues
        assert tx.to_dict()['memberId'] == str(member.pk)
        assert tx.to_dict()['month'] == 6
        assert tx.to_dict()['year'] == '2025'

    def test_general_income_has_no_member(self, create_transaction):
        tx = create_transaction('income', 500000, description='Donasi')

        assert not tx.is_dues
        assert tx.to_dict()['memberId'] is None
        assert tx.to_dict()['month'] is None

    def test_installment_requires_member_and_month(self, months):
        """분납은 회원 + 월 필수"""
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(type='installment', amount=10000, method='cash')

        assert 'member' in exc_info.value.message_dict
        assert 'month' in exc_info.value.message_dict

    def test_income_with_member_needs_month(self, member, months):
        """회원만 있고 월이 없는 수입 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(type='income', amount=100000, member=member)

        assert 'month' in exc_info.value.message_dict

    def test_income_with_month_needs_member(self, months):
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(type='income', amount=100000, month=months[1])

        assert 'member' in exc_info.value.message_dict

    def test_expense_rejects_member_and_requires_category(self, member, months):
        """지출은 회원/월 없이, 분류 필수"""
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(type='expense', amount=50000, member=member, month=months[2])

        errors = exc_info.value.message_dict
        assert {'member', 'month', 'category'} <= set(errors)

    def test_unknown_member_is_rejected(self, months):
        """존재하지 않는 회원 참조 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(
                type='installment', amount=10000, member_id=uuid.uuid4(), month=months[1], year='2025'
            )

        assert 'member' in exc_info.value.message_dict
        assert Transaction.objects.count() == 0

    def test_invalid_year_is_rejected(self, member, months):
        with pytest.raises(ValidationError) as exc_info:
            Transaction.objects.create(
                type='installment', amount=10000, member=member, month=months[1], year='25'
            )

        assert 'year' in exc_info.value.message_dict

    def test_existing_transaction_cannot_be_modified(self, member, create_transaction):
        """추가 전용: 수정 불가"""
        tx = create_transaction('installment', 20000, member=member, month=7, year='2025')
        tx.amount = 99999

        with pytest.raises(ValidationError):
            tx.save()

        tx.refresh_from_db()
        assert tx.amount == 20000

    def test_transaction_cannot_be_deleted(self, member, create_transaction):
        """추가 전용: 삭제 불가"""
        tx = create_transaction('installment', 20000, member=member, month=7, year='2025')

        with pytest.raises(ValidationError):
            tx.delete()

        assert Transaction.objects.filter(pk=tx.pk).exists()


@pytest.mark.django_db
class TestTransactionQuerySet:

    def test_type_helpers(self, member, create_transaction):
        create_transaction('income', 100000, member=member, month=1, year='2025')
        create_transaction('income', 500000)
        create_transaction('installment', 10000, member=member, month=2, year='2024')
        create_transaction('expense', 50000, category='Acara')

        assert Transaction.objects.income().count() == 2
        assert Transaction.objects.installment().count() == 1
        assert Transaction.objects.expense().count() == 1
        assert Transaction.objects.dues().count() == 2
        assert Transaction.objects.for_year('2024').count() == 1
