"""
회원 관리

회원은 명시적 생성/수정만 가능하며 삭제(소프트 삭제 포함)는 지원하지 않습니다.
"""
from django.core.validators import RegexValidator
from django.db import models

from apps.core.models import UUIDModel


# 공통 검증 패턴
PHONE_VALIDATOR = RegexValidator(
    regex=r'^[0-9\-\+\(\)\s]+$',
    message='올바른 전화번호를 입력하세요'
)


class Member(UUIDModel):
    """회비 납부 회원"""

    name = models.CharField(max_length=100, db_index=True, verbose_name="이름")
    phone = models.CharField(max_length=20, blank=True, validators=[PHONE_VALIDATOR], verbose_name="전화번호")
    address = models.CharField(max_length=255, blank=True, verbose_name="주소")
    rayon = models.CharField(max_length=50, blank=True, db_index=True, verbose_name="구역(rayon)")

    class Meta:
        db_table = 'members'
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.name

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'phone': self.phone,
            'address': self.address,
            'rayon': self.rayon,
        }
