"""
조직 기본 데이터 시딩 / 설정 수정

seed_defaults()는 여러 번 실행해도 안전합니다 (없을 때만 생성).
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.core.api import storage_guard
from .forms import SettingsForm
from .models import MONTH_NAMES, Month, OrganizationSettings

logger = logging.getLogger(__name__)


def seed_defaults():
    """
    월 기준표 12개 + 조직 설정 싱글톤 생성 (없을 때만)

    Returns:
        {'months_created': 새로 만든 월 수, 'settings_created': 설정 생성 여부}
    """
    with storage_guard(), transaction.atomic():
        months_created = 0
        for month_id, name in MONTH_NAMES:
            _, created = Month.objects.get_or_create(id=month_id, defaults={'name': name})
            if created:
                months_created += 1

        _, settings_created = OrganizationSettings.objects.get_or_create(
            pk=OrganizationSettings.SINGLETON_PK,
            defaults={
                'organization_name': settings.KASAPRO_DEFAULT_ORGANIZATION_NAME,
                'active_month_id': settings.KASAPRO_DEFAULT_ACTIVE_MONTH,
                'monthly_fee': settings.KASAPRO_DEFAULT_MONTHLY_FEE,
            },
        )

    if months_created or settings_created:
        logger.info(f"기본 데이터 생성: 월 {months_created}개, 설정 {'생성' if settings_created else '유지'}")

    return {'months_created': months_created, 'settings_created': settings_created}


# JSON 키 → 모델 필드
SETTINGS_FIELD_MAP = {
    'organizationName': 'organization_name',
    'activeMonth': 'active_month',
    'monthlyFee': 'monthly_fee',
}


def update_settings(changes):
    """
    조직 설정 부분 수정 (changes에 없는 키는 기존 값 유지)

    Args:
        changes: {'organizationName': ..., 'activeMonth': ..., 'monthlyFee': ...} 중 일부

    Raises:
        ValidationError: 값 검증 실패 (저장하지 않음)
        SettingsMissing: 설정 싱글톤 없음
    """
    settings_obj = OrganizationSettings.get_solo()
    data = {
        'organization_name': settings_obj.organization_name,
        'active_month': settings_obj.active_month_id,
        'monthly_fee': settings_obj.monthly_fee,
    }
    for key, field in SETTINGS_FIELD_MAP.items():
        if key in changes:
            data[field] = changes[key]

    form = SettingsForm(data, instance=settings_obj)
    if not form.is_valid():
        raise ValidationError(form.errors.as_data())

    old_fee = settings_obj.monthly_fee
    with storage_guard():
        settings_obj = form.save()
    if old_fee != settings_obj.monthly_fee:
        logger.info(f"월회비 변경: {old_fee:,} → {settings_obj.monthly_fee:,}")
    return settings_obj
