from functools import wraps

from django.contrib import messages
from django.shortcuts import redirect

from cases.exceptions import AuthorizationDenied


def redirect_on_denial(view_func):
    """
    Decorator: turns AuthorizationDenied into an error message and a redirect.
    """
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except AuthorizationDenied as denial:
            messages.error(request, denial.message)
            return redirect(denial.redirect_to)
    return _wrapped_view
