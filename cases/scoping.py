"""
Tenant scoping for cases.

Every case lookup made on behalf of a user goes through here. A case in
another organization, or a case a volunteer is not assigned to, is reported
exactly like a case that does not exist: Http404, never a permission error,
so one tenant cannot probe for another tenant's records.
"""
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import get_object_or_404

from accounts.roles import CASA_ADMIN, SUPERVISOR, VOLUNTEER
from cases.models import CasaCase


def visible_cases(user):
    """Cases the user may address at all."""
    if not user.is_authenticated or user.casa_org_id is None:
        return CasaCase.objects.none()

    cases = CasaCase.objects.filter(casa_org_id=user.casa_org_id)

    if user.role in (CASA_ADMIN, SUPERVISOR):
        return cases
    if user.role == VOLUNTEER:
        return cases.filter(case_assignments__volunteer=user)
    return CasaCase.objects.none()


def resolve_case(user, case_id):
    """Return the case if the user can see it, otherwise raise Http404."""
    try:
        return get_object_or_404(visible_cases(user), pk=case_id)
    except ValidationError:
        # Malformed ids are just another way of not existing
        raise Http404('No CasaCase matches the given query.')
