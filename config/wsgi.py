"""
WSGI 진입점

운영 환경에서는 DJANGO_SETTINGS_MODULE=config.settings.prod 로 실행합니다.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
