"""
User-Profile 자동 연동 시그널

    1. User 생성 → Profile 자동 생성 (기본 역할: pengawas)
    2. User 저장 → Profile도 함께 저장
"""

from django.db.models.signals import post_save
from django.dispatch import receiver
from django.contrib.auth.models import User
from .models import Profile

@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """User 생성 시 Profile 자동 생성"""
    if created:
        Profile.objects.create(user=instance)

@receiver(post_save, sender=User)
def save_user_profile(sender, instance, created, **kwargs):
    """User 저장 시 Profile도 함께 저장 (수정 시에만)"""
    if not created and hasattr(instance, 'profile'):
        instance.profile.save()
