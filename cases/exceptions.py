"""
Errors raised by case services
"""
from django.core.exceptions import PermissionDenied

from cases.policy import DENIED_MESSAGE


class AuthorizationDenied(PermissionDenied):
    """The user's role forbids the whole operation."""

    def __init__(self, message=DENIED_MESSAGE, redirect_to='cases:case_list'):
        super().__init__(message)
        self.message = message
        self.redirect_to = redirect_to

    def __str__(self):
        return self.message


class ValidationFailure(Exception):
    """Submitted values were rejected; carries the bound form with its errors."""

    def __init__(self, form):
        super().__init__(form.errors.as_text())
        self.form = form
