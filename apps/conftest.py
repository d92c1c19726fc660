# =============================================================================
# conftest.py - pytest 공통 설정 및 Fixtures
# =============================================================================

import pytest

from apps.members.models import Member
from apps.organization.models import Month, OrganizationSettings
from apps.organization.utils import seed_defaults
from apps.transactions.models import Transaction


# =============================================================================
# 조직 / 월 Fixtures
# =============================================================================

@pytest.fixture
def org_settings(db):
    """기본 조직 설정 (월회비 100,000)"""
    seed_defaults()
    settings_obj = OrganizationSettings.get_solo()
    settings_obj.monthly_fee = 100000
    settings_obj.save()
    return settings_obj


@pytest.fixture
def months(org_settings):
    """{1: Month(Januari), ..., 12: Month(Desember)}"""
    return {m.id: m for m in Month.objects.all()}


# =============================================================================
# 회원 / 거래 Fixtures
# =============================================================================

@pytest.fixture
def create_member(db):
    """테스트 회원 생성 팩토리"""
    def _create(name='Ana', **kwargs):
        defaults = {
            'phone': '081234567890',
            'address': 'Jl. Merdeka 1',
            'rayon': 'Rayon 1',
        }
        defaults.update(kwargs)
        return Member.objects.create(name=name, **defaults)
    return _create


@pytest.fixture
def member(create_member):
    """기본 회원 (Ana)"""
    return create_member('Ana')


@pytest.fixture
def create_transaction(months):
    """테스트 거래 생성 팩토리 (month는 1~12 숫자로 지정)"""
    def _create(type, amount, member=None, month=None, year='', method='cash', **kwargs):
        return Transaction.objects.create(
            type=type,
            amount=amount,
            member=member,
            month=months[month] if month else None,
            year=year,
            method=method,
            **kwargs
        )
    return _create


# =============================================================================
# API 헤더 Fixtures
# =============================================================================

@pytest.fixture
def treasurer_headers():
    """쓰기 가능한 역할 (bendahara)"""
    return {'Authorization': 'Bearer bendahara'}


@pytest.fixture
def supervisor_headers():
    """조회 전용 역할 (pengawas)"""
    return {'Authorization': 'Bearer pengawas'}
