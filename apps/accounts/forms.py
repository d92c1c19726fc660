from django import forms


class LoginForm(forms.Form):
    """API 로그인 폼 (앞뒤 공백 제거)"""
    username = forms.CharField(max_length=150)
    password = forms.CharField(max_length=128, strip=True)
    role = forms.CharField(max_length=20)
