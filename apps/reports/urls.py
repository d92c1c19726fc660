from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('reports', views.report_list, name='report_list'),
    path('reports/export', views.report_export_csv, name='report_export'),
    path('reports/export.xlsx', views.report_export_excel, name='report_export_excel'),
]
