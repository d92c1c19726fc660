from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # JSON API
    path('api/', include('apps.accounts.urls')),
    path('api/', include('apps.members.urls')),
    path('api/', include('apps.organization.urls')),
    path('api/', include('apps.transactions.urls')),
    path('api/', include('apps.reports.urls')),
]

# 없는 경로도 JSON으로 응답
handler404 = 'apps.core.views.route_not_found'
