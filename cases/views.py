"""
Case Management Views
"""
from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.views.decorators.http import require_POST

from cases import services
from cases.decorators import redirect_on_denial
from cases.exceptions import ValidationFailure
from cases.forms import CaseAssignmentForm, CaseUpdateForm, case_form_for
from cases.policy import UPDATE, can_manage_assignments
from cases.scoping import resolve_case
from core.utils import get_client_ip, render_to_pdf


@login_required
def case_list(request):
    """List the cases the user can see."""
    cases = services.list_cases(request.user).order_by('case_number')
    return render(request, 'cases/case_list.html', {'cases': cases})


@login_required
def case_detail(request, case_id):
    """View case details."""
    case = services.read_case(request.user, case_id)

    context = {
        'case': case,
        'assignments': case.case_assignments.select_related('volunteer').order_by('volunteer__email'),
        'case_updates': case.case_updates.select_related('user').order_by('-created_at')[:20],
        'update_form': CaseUpdateForm(),
    }
    if can_manage_assignments(request.user):
        context['assignment_form'] = CaseAssignmentForm(casa_case=case)

    return render(request, 'cases/case_detail.html', context)


@login_required
@redirect_on_denial
def case_create(request):
    """Create a new case."""
    if request.method == "POST":
        try:
            case = services.create_case(request.user, request.POST, ip_address=get_client_ip(request))
        except ValidationFailure as failure:
            form = failure.form
        else:
            messages.success(request, "Case created successfully!")
            return redirect("cases:case_detail", case_id=case.id)
    else:
        form = services.new_case_form(request.user)

    return render(request, "cases/case_form.html", {"form": form, "action": "Create"})


@login_required
@redirect_on_denial
def case_edit(request, case_id):
    """
    Update case details.
    Fields the user's role may not change are dropped from the submission.
    """
    case = resolve_case(request.user, case_id)
    decision = services.ensure_permitted(request.user, UPDATE, case)

    if request.method == "POST":
        try:
            case = services.update_case(request.user, case_id, request.POST, ip_address=get_client_ip(request))
        except ValidationFailure as failure:
            form = failure.form
            case.refresh_from_db()
        else:
            messages.success(request, "Case updated successfully!")
            return redirect("cases:case_edit", case_id=case.id)
    else:
        form = case_form_for(decision.permitted_fields)(instance=case)

    return render(request, "cases/case_form.html", {"form": form, "action": "Update", "case": case})


@login_required
@require_POST
@redirect_on_denial
def case_delete(request, case_id):
    services.destroy_case(request.user, case_id, ip_address=get_client_ip(request))
    messages.success(request, "Case deleted.")
    return redirect("cases:case_list")


@login_required
def case_summary_pdf(request, case_id):
    """Printable case summary."""
    case = services.read_case(request.user, case_id)

    response = render_to_pdf('cases/case_summary_pdf.html', {
        'case': case,
        'volunteers': case.volunteers.order_by('email'),
        'case_updates': case.case_updates.select_related('user').order_by('-created_at')[:20],
    }, filename=f"case-{case.case_number}.pdf")

    if response is None:
        messages.error(request, "Could not generate the case summary.")
        return redirect("cases:case_detail", case_id=case.id)
    return response


@login_required
@redirect_on_denial
def case_update_create(request, case_id):
    """Log an update on a case."""
    case = services.read_case(request.user, case_id)

    if request.method == "POST":
        try:
            services.record_case_update(request.user, case_id, request.POST, ip_address=get_client_ip(request))
        except ValidationFailure as failure:
            form = failure.form
        else:
            messages.success(request, "Case update added successfully!")
            return redirect("cases:case_detail", case_id=case.id)
    else:
        form = CaseUpdateForm()

    return render(request, "cases/case_update_form.html", {"form": form, "case": case})


@login_required
@require_POST
@redirect_on_denial
def assignment_create(request, case_id):
    try:
        assignment = services.assign_volunteer(request.user, case_id, request.POST, ip_address=get_client_ip(request))
    except ValidationFailure as failure:
        for errors in failure.form.errors.values():
            for error in errors:
                messages.error(request, error)
    else:
        messages.success(request, f"{assignment.volunteer.get_full_name()} assigned to this case.")
    return redirect("cases:case_detail", case_id=case_id)


@login_required
@require_POST
@redirect_on_denial
def assignment_delete(request, case_id, assignment_id):
    services.unassign_volunteer(request.user, case_id, assignment_id, ip_address=get_client_ip(request))
    messages.success(request, "Volunteer unassigned.")
    return redirect("cases:case_detail", case_id=case_id)
