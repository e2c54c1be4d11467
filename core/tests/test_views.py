"""
Tests for dashboard, health check and middleware.
"""
import pytest
from django.urls import reverse

from cases.models import CaseUpdate


@pytest.mark.django_db
class TestDashboard:

    def test_counts_only_visible_cases(self, client, volunteer, make_case, organization, assign):
        mine = make_case(organization, court_report_submitted=False)
        make_case(organization)
        assign(volunteer, mine)
        client.force_login(volunteer)

        response = client.get(reverse('core:dashboard'))

        assert response.status_code == 200
        assert response.context['case_count'] == 1
        assert response.context['reports_pending'] == 1

    def test_recent_updates_are_tenant_scoped(
        self, client, admin, make_user, make_case, organization, other_organization
    ):
        foreign_case = make_case(other_organization)
        outsider = make_user(other_organization, 'supervisor')
        CaseUpdate.objects.create(casa_case=foreign_case, user=outsider, update_type='court')
        client.force_login(admin)

        response = client.get(reverse('core:dashboard'))

        assert list(response.context['recent_updates']) == []

    def test_home_redirects_signed_in_users(self, client, admin):
        client.force_login(admin)

        response = client.get(reverse('core:home'))

        assert response.status_code == 302
        assert response.url == reverse('core:dashboard')


@pytest.mark.django_db
class TestMiddleware:

    def test_health_check(self, client):
        response = client.get(reverse('core:health_check'))

        assert response.status_code == 200
        assert response.content == b'OK'

    def test_security_headers(self, client):
        response = client.get(reverse('core:home'))

        assert response['X-Content-Type-Options'] == 'nosniff'
        assert response['X-Frame-Options'] == 'DENY'
        assert "frame-ancestors 'none'" in response['Content-Security-Policy']

    def test_request_carries_users_organization(self, client, supervisor, organization):
        client.force_login(supervisor)

        response = client.get(reverse('core:dashboard'))

        assert response.wsgi_request.casa_org == organization
        assert response.context['casa_org'] == organization
