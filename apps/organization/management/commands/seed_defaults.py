from django.conf import settings
from django.contrib.auth.models import User
from django.core.management.base import BaseCommand

from apps.organization.utils import seed_defaults


class Command(BaseCommand):
    help = '월 기준표 / 조직 설정 기본값 생성 (이미 있으면 유지)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--with-admin',
            action='store_true',
            help='기본 재무(bendahara) 계정도 함께 생성',
        )

    def handle(self, *args, **options):
        result = seed_defaults()
        self.stdout.write(
            self.style.SUCCESS(
                f"✅ 월 생성: {result['months_created']}개, "
                f"설정: {'생성' if result['settings_created'] else '기존 유지'}"
            )
        )

        if options['with_admin']:
            username = settings.KASAPRO_ADMIN_USERNAME
            user, created = User.objects.get_or_create(username=username)
            if created:
                user.set_password(settings.KASAPRO_ADMIN_PASSWORD)
                user.save()
                user.profile.role = 'bendahara'
                user.profile.save(update_fields=['role', 'updated_at'])
                self.stdout.write(self.style.SUCCESS(f"✅ 기본 계정 생성: {username}"))
            else:
                self.stdout.write(f"기본 계정 유지: {username}")
