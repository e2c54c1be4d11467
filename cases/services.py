"""
Case services: the authorization gate in front of every case operation.

Each operation first resolves the case for the actor (Http404 when it is out
of reach), then consults the policy table, then validates and writes inside a
single transaction together with its audit record. Denials and not-found
outcomes happen before anything is written.
"""
import logging

from django.db import transaction
from django.forms.models import model_to_dict
from django.shortcuts import get_object_or_404
from django.urls import reverse

from audit.models import AuditLog
from cases.exceptions import AuthorizationDenied, ValidationFailure
from cases.forms import CaseAssignmentForm, CaseUpdateForm, case_form_for
from cases.models import CasaCase, CaseAssignment
from cases.policy import (
    CASE_FIELDS, CREATE, DESTROY, READ, UPDATE,
    authorize, can_manage_assignments, can_open_new_case_form,
)
from cases.scoping import resolve_case, visible_cases

logger = logging.getLogger(__name__)
security_logger = logging.getLogger('security')


def ensure_permitted(actor, operation, case=None, proposed_changes=None):
    """Return the policy decision, raising AuthorizationDenied if it rejects."""
    decision = authorize(actor, operation, case, proposed_changes)
    if decision.rejected or actor.casa_org_id is None:
        security_logger.warning(
            f"Denied {operation} on case {case.pk if case else '-'} "
            f"for user {actor.pk} ({getattr(actor, 'role', None)})"
        )
        raise AuthorizationDenied()
    return decision


def ensure_can_manage_assignments(actor, case):
    if not can_manage_assignments(actor):
        security_logger.warning(
            f"Denied assignment change on case {case.pk} for user {actor.pk} ({actor.role})"
        )
        raise AuthorizationDenied(redirect_to=case_detail_target(case))


def new_case_form(actor):
    """Blank form for a new case. Supervisors may open it but not submit it."""
    if not can_open_new_case_form(actor) or actor.casa_org_id is None:
        security_logger.warning(
            f"Denied new case form for user {actor.pk} ({getattr(actor, 'role', None)})"
        )
        raise AuthorizationDenied()
    return case_form_for(CASE_FIELDS)()


def case_detail_target(case):
    return reverse('cases:case_detail', kwargs={'case_id': case.pk})


def list_cases(actor):
    return visible_cases(actor)


def read_case(actor, case_id):
    case = resolve_case(actor, case_id)
    ensure_permitted(actor, READ, case)
    return case


def create_case(actor, changes, ip_address=None):
    """
    Create a case in the actor's organization.
    The organization always comes from the actor, never from `changes`.
    """
    decision = ensure_permitted(actor, CREATE, proposed_changes=changes)

    form_class = case_form_for(decision.permitted_fields)
    form = form_class(data=decision.allowed_changes, instance=CasaCase(casa_org_id=actor.casa_org_id))
    if not form.is_valid():
        raise ValidationFailure(form)

    with transaction.atomic():
        case = form.save()
        AuditLog.record(
            actor, 'create', case,
            f"Created case {case.case_number}",
            changes=dict(form.cleaned_data),
            ip_address=ip_address
        )

    logger.info(f"Case {case.pk} created in org {case.casa_org_id} by user {actor.pk}")
    return case


def update_case(actor, case_id, changes, ip_address=None):
    """
    Apply the changes the actor's role permits and drop the rest.

    Dropped fields are not an error: the update still succeeds and the
    returned case shows what was actually stored.
    """
    case = resolve_case(actor, case_id)
    decision = ensure_permitted(actor, UPDATE, case, changes)

    if decision.dropped:
        logger.info(
            f"Ignored {', '.join(sorted(decision.dropped))} in update of case {case.pk} "
            f"by user {actor.pk} ({actor.role})"
        )

    stored = model_to_dict(case, fields=decision.permitted_fields)

    form_class = case_form_for(decision.allowed_changes)
    form = form_class(data=decision.allowed_changes, instance=case)
    if not form.is_valid():
        # Redisplay every permitted field, not just the submitted ones
        redisplay = case_form_for(decision.permitted_fields)(
            data={**stored, **decision.allowed_changes}, instance=case
        )
        redisplay.is_valid()
        raise ValidationFailure(redisplay)

    with transaction.atomic():
        case = form.save()
        AuditLog.record(
            actor, 'update', case,
            f"Updated case {case.case_number}",
            changes={name: form.cleaned_data[name] for name in form.changed_data},
            ip_address=ip_address
        )

    return case


def destroy_case(actor, case_id, ip_address=None):
    case = resolve_case(actor, case_id)
    ensure_permitted(actor, DESTROY, case)

    with transaction.atomic():
        AuditLog.record(
            actor, 'delete', case,
            f"Deleted case {case.case_number}",
            changes={'case_number': case.case_number},
            ip_address=ip_address
        )
        case.delete()

    logger.info(f"Case {case_id} deleted by user {actor.pk}")


def assign_volunteer(actor, case_id, data, ip_address=None):
    """Link a volunteer from the case's organization to the case."""
    case = resolve_case(actor, case_id)
    ensure_can_manage_assignments(actor, case)

    form = CaseAssignmentForm(data, casa_case=case)
    if not form.is_valid():
        raise ValidationFailure(form)

    volunteer = form.cleaned_data['volunteer']
    with transaction.atomic():
        assignment = CaseAssignment.objects.create(casa_case=case, volunteer=volunteer)
        AuditLog.record(
            actor, 'assign', case,
            f"Assigned {volunteer.email} to case {case.case_number}",
            changes={'volunteer': str(volunteer.pk)},
            ip_address=ip_address
        )

    return assignment


def unassign_volunteer(actor, case_id, assignment_id, ip_address=None):
    case = resolve_case(actor, case_id)
    ensure_can_manage_assignments(actor, case)
    assignment = get_object_or_404(case.case_assignments.select_related('volunteer'), pk=assignment_id)

    with transaction.atomic():
        AuditLog.record(
            actor, 'unassign', case,
            f"Unassigned {assignment.volunteer.email} from case {case.case_number}",
            changes={'volunteer': str(assignment.volunteer_id)},
            ip_address=ip_address
        )
        assignment.delete()


def record_case_update(actor, case_id, data, ip_address=None):
    """Anyone who can see a case may log an update on it."""
    case = read_case(actor, case_id)

    form = CaseUpdateForm(data)
    if not form.is_valid():
        raise ValidationFailure(form)

    with transaction.atomic():
        case_update = form.save(commit=False)
        case_update.casa_case = case
        case_update.user = actor
        case_update.save()
        AuditLog.record(
            actor, 'case_update', case,
            f"Logged {case_update.get_type_label()} update on case {case.case_number}",
            changes={'update_type': case_update.update_type},
            ip_address=ip_address
        )

    return case_update
