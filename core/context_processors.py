"""
Context Processors for CASA Tracker
Makes organization and role flags available in all templates
"""
from cases.policy import CREATE, DESTROY, can_manage_assignments, is_permitted


def casa_context(request):
    """
    Add the current organization and what the user may do to template context
    """
    context = {
        'casa_org': getattr(request, 'casa_org', None),
    }

    user = request.user
    if user.is_authenticated:
        context.update({
            'can_create_cases': is_permitted(user, CREATE),
            'can_delete_cases': is_permitted(user, DESTROY),
            'can_manage_assignments': can_manage_assignments(user),
        })

    return context
