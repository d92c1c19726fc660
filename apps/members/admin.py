from django.contrib import admin
from django.db.models import Count

from .models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    """
    회원 관리
    """
    list_display = ['name', 'phone', 'rayon', 'get_transaction_count', 'created_at']
    list_filter = ['rayon']
    search_fields = ['name', 'phone', 'address']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = [
        ('기본 정보', {
            'fields': ('id', 'name', 'phone')
        }),
        ('주소', {
            'fields': ('address', 'rayon')
        }),
        ('타임스탬프', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_tx_count=Count('transactions'))

    @admin.display(description='거래 수', ordering='_tx_count')
    def get_transaction_count(self, obj):
        return obj._tx_count

    def has_delete_permission(self, request, obj=None):
        # 회원 삭제는 지원하지 않음
        return False
