from django import forms

from apps.members.models import Member
from apps.organization.models import Month
from .models import YEAR_VALIDATOR


class BaseTransactionForm(forms.Form):
    """거래 입력 공통 필드"""
    amount = forms.IntegerField(min_value=0, label='금액')
    method = forms.CharField(max_length=50, required=False, label='결제 수단')
    description = forms.CharField(max_length=255, required=False, label='내용')


class DuesIncomeForm(BaseTransactionForm):
    """회비 납부 (여러 달 한 번에)"""
    member = forms.ModelChoiceField(queryset=Member.objects.all(), label='회원')
    year = forms.CharField(max_length=4, required=False, validators=[YEAR_VALIDATOR], label='연도')
    months = forms.ModelMultipleChoiceField(queryset=Month.objects.all(), label='납부 월')


class GeneralIncomeForm(BaseTransactionForm):
    """조직 일반 수입"""


class InstallmentForm(BaseTransactionForm):
    """회비 분납"""
    member = forms.ModelChoiceField(queryset=Member.objects.all(), label='회원')
    month = forms.ModelChoiceField(queryset=Month.objects.all(), label='월')
    year = forms.CharField(max_length=4, required=False, validators=[YEAR_VALIDATOR], label='연도')


class ExpenseForm(forms.Form):
    """조직 지출"""
    name = forms.CharField(max_length=255, label='지출명')
    category = forms.CharField(max_length=50, label='분류')
    amount = forms.IntegerField(min_value=0, label='금액')
    method = forms.CharField(max_length=50, required=False, label='결제 수단')
