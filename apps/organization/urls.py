from django.urls import path
from . import views

app_name = 'organization'

urlpatterns = [
    path('settings', views.settings_detail, name='settings'),
    path('months', views.month_list, name='month_list'),
]
