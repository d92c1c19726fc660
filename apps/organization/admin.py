from django.contrib import admin

from .models import Month, OrganizationSettings


@admin.register(Month)
class MonthAdmin(admin.ModelAdmin):
    """월 기준표 (조회 전용)"""
    list_display = ['id', 'name']

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(OrganizationSettings)
class OrganizationSettingsAdmin(admin.ModelAdmin):
    """조직 설정 (싱글톤)"""
    list_display = ['organization_name', 'active_month', 'get_fee_display', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = [
        ('기본 정보', {
            'fields': ('organization_name', 'active_month', 'monthly_fee')
        }),
        ('타임스탬프', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    ]

    @admin.display(description='월회비', ordering='monthly_fee')
    def get_fee_display(self, obj):
        return f"Rp {obj.monthly_fee:,}".replace(',', '.')

    def has_add_permission(self, request):
        # 싱글톤이므로 추가 불가
        return not OrganizationSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
