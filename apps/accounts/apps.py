from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.accounts'
    verbose_name = '운영자 계정'

    def ready(self):
        # 이 부분이 없으면 signals.py는 그냥 장식일 뿐입니다.
        import apps.accounts.signals  # noqa: F401
