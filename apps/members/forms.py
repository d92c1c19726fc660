from django import forms

from .models import Member


class MemberForm(forms.ModelForm):
    """회원 생성/수정 폼"""

    class Meta:
        model = Member
        fields = ['name', 'phone', 'address', 'rayon']
        labels = {
            'name': '이름',
            'phone': '전화번호',
            'address': '주소',
            'rayon': '구역',
        }

    def clean_name(self):
        name = (self.cleaned_data.get('name') or '').strip()
        if not name:
            raise forms.ValidationError('이름을 입력하세요.')
        return name
