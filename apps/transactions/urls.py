from django.urls import path
from . import views

app_name = 'transactions'

urlpatterns = [
    path('transactions', views.transaction_list, name='transaction_list'),
    path('transactions/income', views.income_create, name='income_create'),
    path('transactions/installment', views.installment_create, name='installment_create'),
    path('transactions/expense', views.expense_create, name='expense_create'),
]
