from django import forms

from .models import OrganizationSettings


class SettingsForm(forms.ModelForm):
    """조직 설정 수정 폼"""

    class Meta:
        model = OrganizationSettings
        fields = ['organization_name', 'active_month', 'monthly_fee']
        labels = {
            'organization_name': '조직명',
            'active_month': '진행 중인 월',
            'monthly_fee': '월회비',
        }

    def clean_organization_name(self):
        name = (self.cleaned_data.get('organization_name') or '').strip()
        if not name:
            raise forms.ValidationError('조직명을 입력하세요.')
        return name
