from django.urls import path
from . import views

app_name = 'members'

urlpatterns = [
    path('members', views.member_list, name='member_list'),
    path('members/<uuid:pk>', views.member_detail, name='member_detail'),
]
