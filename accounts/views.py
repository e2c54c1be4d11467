"""
Authentication Views
"""
import logging

from django.shortcuts import render, redirect
from django.contrib.auth import login, authenticate, logout
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme
from accounts.models import User, LoginHistory
from accounts.forms import UserLoginForm
from core.utils import get_client_ip

security_logger = logging.getLogger('security')


def _record_login(request, user, success):
    LoginHistory.objects.create(
        user=user,
        ip_address=get_client_ip(request),
        user_agent=request.META.get('HTTP_USER_AGENT', '')[:512],
        success=success
    )


def _safe_next_url(request):
    next_url = request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return 'core:dashboard'


def user_login(request):
    """User login"""
    if request.user.is_authenticated:
        return redirect('core:dashboard')

    if request.method == 'POST':
        form = UserLoginForm(request.POST)
        if form.is_valid():
            email = form.cleaned_data['email']
            password = form.cleaned_data['password']

            known_user = User.objects.filter(email__iexact=email).first()
            if known_user is not None and known_user.is_locked_out():
                security_logger.warning(f"Login attempt on locked account {known_user.id}")
                messages.error(request, 'Account temporarily locked due to failed login attempts.')
                return render(request, 'accounts/login.html', {'form': form})

            user = authenticate(request, username=known_user.email if known_user else email, password=password)

            if user is not None:
                login(request, user)
                user.reset_failed_login()
                _record_login(request, user, success=True)
                return redirect(_safe_next_url(request))

            if known_user is not None:
                known_user.increment_failed_login()
                _record_login(request, known_user, success=False)
                security_logger.warning(f"Failed login for user {known_user.id}")

            # Same message whether or not the account exists
            messages.error(request, 'Invalid email or password.')
    else:
        form = UserLoginForm()

    return render(request, 'accounts/login.html', {'form': form})


@login_required
def user_logout(request):
    """User logout"""
    logout(request)
    messages.success(request, 'You have been logged out successfully.')
    return redirect('accounts:login')
