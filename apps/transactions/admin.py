from django.contrib import admin
from django.utils.html import format_html

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    거래 장부 (조회 전용)

    추가 전용 장부이므로 관리자 화면에서도 수정/삭제하지 않습니다.
    """
    list_display = [
        'date',
        'get_type_display_colored',
        'get_amount_display',
        'member',
        'month',
        'year',
        'category',
        'method',
    ]

    date_hierarchy = 'date'

    list_filter = ['type', 'year', 'month', 'category']

    search_fields = ['description', 'member__name', 'category']

    list_select_related = ['member', 'month']

    @admin.display(description='구분', ordering='type')
    def get_type_display_colored(self, obj):
        if obj.type == Transaction.TYPE_EXPENSE:
            return format_html('<span style="color:red; font-weight:bold;">{}</span>', obj.get_type_display())
        return format_html('<span style="color:blue; font-weight:bold;">{}</span>', obj.get_type_display())

    @admin.display(description='금액', ordering='amount')
    def get_amount_display(self, obj):
        formatted = f"Rp {obj.amount:,}".replace(',', '.')
        if obj.type == Transaction.TYPE_EXPENSE:
            return format_html('<span style="color:red;">{}</span>', formatted)
        return format_html('<span style="color:blue;">{}</span>', formatted)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
