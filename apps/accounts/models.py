"""
운영자 프로필

Django 기본 User 모델을 확장하여 역할(role)을 저장합니다.
    - bendahara (재무): 조회 + 기록
    - pengawas (감사): 조회 전용
"""
from django.contrib.auth.models import User
from django.db import models

from apps.core.models import TimeStampedModel


class Profile(TimeStampedModel):
    """운영자 프로필 (Django User 확장)"""

    ROLE_BENDAHARA = 'bendahara'
    ROLE_PENGAWAS = 'pengawas'
    ROLE_CHOICES = [
        (ROLE_BENDAHARA, '재무 (bendahara)'),
        (ROLE_PENGAWAS, '감사 (pengawas)'),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_PENGAWAS, db_index=True)

    class Meta:
        db_table = 'profiles'

    def __str__(self):
        return f"{self.user.username} ({self.role})"

    def matches_role(self, role):
        """요청한 역할과 일치하는지 (대소문자 무시)"""
        return bool(role) and self.role.lower() == role.strip().lower()
