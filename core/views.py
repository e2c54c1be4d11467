from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse

from cases.models import CaseUpdate
from cases.scoping import visible_cases


def home(request):
    """
    Landing Page View.
    Signed-in users go straight to the dashboard.
    """
    if request.user.is_authenticated:
        return redirect('core:dashboard')
    return render(request, 'home.html')


def health_check(request):
    """Simple health check for load balancers"""
    return HttpResponse("OK", status=200)


@login_required
def dashboard(request):
    """
    Main Dashboard View.
    Summarizes the cases the user can see and the latest updates on them.
    """
    cases = visible_cases(request.user)

    recent_updates = CaseUpdate.objects.filter(
        casa_case__in=cases
    ).select_related('casa_case', 'user').order_by('-created_at')[:10]

    return render(request, 'core/dashboard.html', {
        'case_count': cases.count(),
        'reports_pending': cases.filter(court_report_submitted=False).count(),
        'transition_aged_count': cases.filter(transition_aged_youth=True).count(),
        'recent_updates': recent_updates,
    })
