"""
프로젝트 공통 추상 모델

- TimeStampedModel: 생성/수정 시간 자동 추적
- UUIDModel: 서버에서 발급하는 UUID 기본키 + 타임스탬프
"""

import uuid

from django.db import models


class TimeStampedModel(models.Model):
    """생성/수정 시간 자동 추적"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


"""
UUID 기본키 모델

식별자 규칙:
    - 생성 시점에 서버가 uuid4로 발급 (클라이언트가 지정 불가)
    - 전역 유일, 의미 없는 토큰 (순번 추측 불가)

사용 방법:
    class Member(UUIDModel):
        name = models.CharField(max_length=100)

    member = Member.objects.create(name='Ana')
    member.id  # UUID('...')
"""

class UUIDModel(TimeStampedModel):
    """UUID 기본키 추상 모델"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True
