# =============================================================================
# organization/models.py - 월(月) 기준표 및 조직 설정
# =============================================================================

"""
조직 설정 및 월 기준표

- Month: 1~12월 고정 기준표 (최초 1회 시딩, 이후 변경 없음)
- OrganizationSettings: 조직명/진행 중인 월/월회비를 담는 싱글톤 (pk=1 고정)
"""
import logging

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.api import storage_guard
from apps.core.exceptions import SettingsMissing
from apps.core.models import TimeStampedModel

logger = logging.getLogger(__name__)

# (id, 표시 이름)
MONTH_NAMES = [
    (1, 'Januari'), (2, 'Februari'), (3, 'Maret'), (4, 'April'),
    (5, 'Mei'), (6, 'Juni'), (7, 'Juli'), (8, 'Agustus'),
    (9, 'September'), (10, 'Oktober'), (11, 'November'), (12, 'Desember'),
]


class Month(models.Model):
    """월 기준표 (1~12)"""

    id = models.PositiveSmallIntegerField(
        primary_key=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
    )
    name = models.CharField(max_length=20)

    class Meta:
        db_table = 'months'
        ordering = ['id']

    def __str__(self):
        return self.name

    def to_dict(self):
        return {'id': self.id, 'name': self.name}


class OrganizationSettings(TimeStampedModel):
    """조직 설정 싱글톤"""

    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, editable=False)
    organization_name = models.CharField(max_length=100, verbose_name="조직명")
    active_month = models.ForeignKey(
        Month,
        on_delete=models.PROTECT,
        related_name='+',
        verbose_name="진행 중인 월",
    )
    monthly_fee = models.PositiveIntegerField(verbose_name="월회비")

    class Meta:
        db_table = 'settings'
        verbose_name = '조직 설정'
        verbose_name_plural = '조직 설정'

    def __str__(self):
        return f"{self.organization_name} (월회비 {self.monthly_fee:,})"

    def save(self, *args, **kwargs):
        # 항상 같은 행을 갱신 (중복 생성 방지)
        self.pk = self.SINGLETON_PK
        if self._state.adding:
            created_at = type(self).objects.filter(pk=self.pk).values_list('created_at', flat=True).first()
            if created_at is not None:
                # 기존 행이 있으면 INSERT 대신 UPDATE (생성 시각 유지)
                self.created_at = created_at
                self._state.adding = False
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError('조직 설정은 삭제할 수 없습니다.')

    @classmethod
    def get_solo(cls):
        """
        싱글톤 조회

        Raises:
            SettingsMissing: 시딩이 되지 않은 경우
            StorageUnavailable: DB 접근 실패
        """
        with storage_guard():
            try:
                return cls.objects.select_related('active_month').get(pk=cls.SINGLETON_PK)
            except cls.DoesNotExist:
                logger.error("조직 설정이 없습니다. seed_defaults 실행 여부를 확인하세요.")
                raise SettingsMissing()

    def to_dict(self):
        return {
            'organizationName': self.organization_name,
            'activeMonth': self.active_month_id,
            'monthlyFee': self.monthly_fee,
        }
