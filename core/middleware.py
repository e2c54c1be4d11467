"""
Custom Middleware for CASA Tracker
Organization context and security headers.
"""
from django.utils.functional import SimpleLazyObject


def get_casa_org(request):
    """The signed-in user's organization, or None for anonymous requests."""
    if not request.user.is_authenticated:
        return None
    return request.user.casa_org


class OrganizationContextMiddleware:
    """
    Injects the user's organization into every request as 'request.casa_org'.
    Must run after AuthenticationMiddleware.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # Lazy so static files and anonymous pages never touch the DB
        request.casa_org = SimpleLazyObject(lambda: get_casa_org(request))
        return self.get_response(request)


class SecurityHeadersMiddleware:
    """
    Add security headers beyond what Django provides by default
    """
    CONTENT_SECURITY_POLICY = "; ".join([
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data:",
        "form-action 'self'",
        "frame-ancestors 'none'",
    ])

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        response['X-Content-Type-Options'] = 'nosniff'
        response['X-Frame-Options'] = 'DENY'
        response['Referrer-Policy'] = 'same-origin'
        response.setdefault('Content-Security-Policy', self.CONTENT_SECURITY_POLICY)

        return response
