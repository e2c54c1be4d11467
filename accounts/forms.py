"""
Forms for Authentication
"""
from django import forms
from django.contrib.auth.forms import UserCreationForm, UserChangeForm
from accounts.models import User


class UserLoginForm(forms.Form):
    """User login form"""
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={
            'class': 'form-control form-control-lg',
            'placeholder': 'your@email.com',
            'autofocus': True
        }),
        label='Email Address'
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={
            'class': 'form-control form-control-lg',
            'placeholder': 'Enter your password'
        }),
        label='Password'
    )

    def clean_email(self):
        """Normalize email"""
        return self.cleaned_data.get('email', '').lower().strip()


class CasaUserCreationForm(UserCreationForm):
    """Admin form for provisioning a user into an organization"""

    class Meta:
        model = User
        fields = ('email', 'casa_org', 'role')

    def clean_email(self):
        """Validate email is unique once lowercased"""
        email = self.cleaned_data.get('email', '').lower().strip()

        if User.objects.filter(email=email).exists():
            raise forms.ValidationError('A user with this email address already exists.')

        return email


class CasaUserChangeForm(UserChangeForm):

    class Meta:
        model = User
        fields = '__all__'
