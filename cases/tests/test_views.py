"""
Request tests for the case views, per role.
"""
import uuid

import pytest
from django.contrib import messages
from django.contrib.messages import get_messages
from django.urls import reverse

from accounts.roles import VOLUNTEER
from cases.models import CasaCase, CaseAssignment, CaseUpdate

VALID_ATTRIBUTES = {'case_number': '1234', 'transition_aged_youth': True}
INVALID_ATTRIBUTES = {'case_number': ''}


def case_url(case, name='case_detail'):
    return reverse(f'cases:{name}', kwargs={'case_id': case.id})


def error_messages(response):
    return [str(m) for m in get_messages(response.wsgi_request) if m.level == messages.ERROR]


@pytest.mark.django_db
class TestAsAdmin:

    @pytest.fixture(autouse=True)
    def sign_in(self, client, admin):
        client.force_login(admin)

    def test_index(self, client, make_case, other_organization, casa_case):
        foreign = make_case(other_organization, case_number='FOREIGN-1')

        response = client.get(reverse('cases:case_list'))

        assert response.status_code == 200
        assert casa_case.case_number in response.content.decode()
        assert foreign.case_number not in response.content.decode()

    def test_show(self, client, casa_case):
        assert client.get(case_url(casa_case)).status_code == 200

    def test_show_fails_across_organizations(self, client, make_case, other_organization):
        other_case = make_case(other_organization)

        assert client.get(case_url(other_case)).status_code == 404

    def test_show_missing_case(self, client):
        response = client.get(reverse('cases:case_detail', kwargs={'case_id': uuid.uuid4()}))

        assert response.status_code == 404

    def test_new(self, client):
        assert client.get(reverse('cases:case_create')).status_code == 200

    def test_edit(self, client, casa_case):
        assert client.get(case_url(casa_case, 'case_edit')).status_code == 200

    def test_create_with_valid_parameters(self, client, organization):
        response = client.post(reverse('cases:case_create'), VALID_ATTRIBUTES)

        case = CasaCase.objects.get()
        assert response.status_code == 302
        assert response.url == case_url(case)
        assert case.case_number == '1234'
        assert case.transition_aged_youth is True
        assert case.casa_org == organization

    def test_create_with_invalid_parameters(self, client):
        response = client.post(reverse('cases:case_create'), INVALID_ATTRIBUTES)

        assert response.status_code == 200
        assert CasaCase.objects.count() == 0
        assert 'case_number' in response.context['form'].errors

    def test_update_changes_case_number(self, client, casa_case):
        response = client.post(case_url(casa_case, 'case_edit'), {'case_number': '12345'})

        casa_case.refresh_from_db()
        assert casa_case.case_number == '12345'
        assert response.status_code == 302
        assert response.url == case_url(casa_case, 'case_edit')

    def test_update_with_invalid_parameters(self, client, casa_case):
        response = client.post(case_url(casa_case, 'case_edit'), INVALID_ATTRIBUTES)

        assert response.status_code == 200
        casa_case.refresh_from_db()
        assert casa_case.case_number == '111'

    def test_invalid_partial_update_redisplays_every_field(self, client, make_case, organization):
        case = make_case(organization, court_report_submitted=True)

        response = client.post(case_url(case, 'case_edit'), INVALID_ATTRIBUTES)

        form = response.context['form']
        assert response.status_code == 200
        assert list(form.fields) == ['case_number', 'transition_aged_youth', 'court_report_submitted']
        assert 'case_number' in form.errors
        assert form['court_report_submitted'].value() is True

    def test_update_unchecking_box_through_form(self, client, make_case, organization):
        case = make_case(organization, court_report_submitted=True)

        # What the edit form sends for an unchecked box
        client.post(case_url(case, 'case_edit'), {'case_number': case.case_number, 'court_report_submitted': 'false'})

        case.refresh_from_db()
        assert case.court_report_submitted is False

    def test_destroy(self, client, make_case, organization, casa_case):
        another_case = make_case(organization)

        response = client.post(case_url(another_case, 'case_delete'))

        assert response.status_code == 302
        assert response.url == reverse('cases:case_list')
        assert CasaCase.objects.count() == 1

    def test_destroy_requires_post(self, client, casa_case):
        assert client.get(case_url(casa_case, 'case_delete')).status_code == 405
        assert CasaCase.objects.count() == 1

    def test_summary_pdf(self, client, casa_case):
        response = client.get(case_url(casa_case, 'case_summary_pdf'))

        assert response.status_code == 200
        assert response['Content-Type'] == 'application/pdf'

    def test_summary_pdf_across_organizations(self, client, make_case, other_organization):
        other_case = make_case(other_organization)

        assert client.get(case_url(other_case, 'case_summary_pdf')).status_code == 404


@pytest.mark.django_db
class TestAsVolunteer:

    @pytest.fixture(autouse=True)
    def sign_in(self, client, volunteer, casa_case, assign):
        assign(volunteer, casa_case)
        client.force_login(volunteer)

    def test_new_denies_access_and_redirects(self, client):
        response = client.get(reverse('cases:case_create'))

        assert response.status_code == 302
        assert response.url == reverse('cases:case_list')
        assert any('you are not authorized' in m for m in error_messages(response))

    def test_create_is_denied(self, client):
        response = client.post(reverse('cases:case_create'), VALID_ATTRIBUTES)

        assert response.status_code == 302
        assert CasaCase.objects.count() == 1

    def test_edit(self, client, casa_case):
        assert client.get(case_url(casa_case, 'case_edit')).status_code == 200

    def test_edit_form_has_no_case_number_field(self, client, casa_case):
        response = client.get(case_url(casa_case, 'case_edit'))

        assert 'case_number' not in response.context['form'].fields

    def test_update_changes_fields_except_case_number(self, client, casa_case):
        response = client.post(
            case_url(casa_case, 'case_edit'),
            {'case_number': '12345', 'court_report_submitted': True}
        )

        casa_case.refresh_from_db()
        assert casa_case.case_number == '111'
        assert casa_case.court_report_submitted is True
        assert response.status_code == 302
        assert response.url == case_url(casa_case, 'case_edit')

    def test_destroy_is_denied(self, client, casa_case):
        response = client.post(case_url(casa_case, 'case_delete'))

        assert response.status_code == 302
        assert CasaCase.objects.count() == 1
        assert any('you are not authorized' in m for m in error_messages(response))

    def test_index_shows_only_assigned_cases(self, client, volunteer, make_case, organization, assign):
        mine = make_case(organization, case_number=uuid.uuid4().hex)
        other = make_case(organization, case_number=uuid.uuid4().hex)
        assign(volunteer, mine)

        response = client.get(reverse('cases:case_list'))

        body = response.content.decode()
        assert response.status_code == 200
        assert mine.case_number in body
        assert other.case_number not in body

    def test_unassigned_case_is_not_found(self, client, make_case, organization):
        other = make_case(organization)

        assert client.get(case_url(other)).status_code == 404
        assert client.get(case_url(other, 'case_edit')).status_code == 404
        assert client.post(case_url(other, 'case_edit'), {'court_report_submitted': True}).status_code == 404

    def test_add_case_update(self, client, casa_case):
        response = client.post(case_url(casa_case, 'case_update_create'), {'update_type': 'youth'})

        assert response.status_code == 302
        assert CaseUpdate.objects.filter(casa_case=casa_case, update_type='youth').count() == 1

    def test_invalid_case_update_rerenders_form(self, client, casa_case):
        response = client.post(case_url(casa_case, 'case_update_create'), {'update_type': 'other'})

        assert response.status_code == 200
        assert CaseUpdate.objects.count() == 0

    def test_cannot_assign_volunteers(self, client, casa_case, make_user, organization):
        other = make_user(organization, VOLUNTEER)

        response = client.post(case_url(casa_case, 'assignment_create'), {'volunteer': other.pk})

        assert response.status_code == 302
        assert response.url == case_url(casa_case)
        assert not CaseAssignment.objects.filter(volunteer=other).exists()


@pytest.mark.django_db
class TestAsSupervisor:

    @pytest.fixture(autouse=True)
    def sign_in(self, client, supervisor):
        client.force_login(supervisor)

    def test_index(self, client, casa_case):
        response = client.get(reverse('cases:case_list'))

        assert response.status_code == 200
        assert casa_case.case_number in response.content.decode()

    def test_new_renders_a_successful_response(self, client):
        response = client.get(reverse('cases:case_create'))

        assert response.status_code == 200
        assert not error_messages(response)

    def test_create_is_denied(self, client):
        response = client.post(reverse('cases:case_create'), VALID_ATTRIBUTES)

        assert response.status_code == 302
        assert response.url == reverse('cases:case_list')
        assert CasaCase.objects.count() == 0
        assert any('you are not authorized' in m for m in error_messages(response))

    def test_edit(self, client, casa_case):
        assert client.get(case_url(casa_case, 'case_edit')).status_code == 200

    def test_update_changes_fields_except_case_number(self, client, casa_case):
        response = client.post(
            case_url(casa_case, 'case_edit'),
            {'case_number': '12345', 'court_report_submitted': True}
        )

        casa_case.refresh_from_db()
        assert casa_case.case_number == '111'
        assert casa_case.court_report_submitted is True
        assert response.url == case_url(casa_case, 'case_edit')

    def test_destroy_is_denied(self, client, casa_case):
        client.post(case_url(casa_case, 'case_delete'))

        assert CasaCase.objects.count() == 1

    def test_assign_and_unassign_volunteer(self, client, casa_case, volunteer):
        client.post(case_url(casa_case, 'assignment_create'), {'volunteer': volunteer.pk})
        assignment = CaseAssignment.objects.get(casa_case=casa_case, volunteer=volunteer)

        response = client.post(reverse('cases:assignment_delete', kwargs={
            'case_id': casa_case.id, 'assignment_id': assignment.id
        }))

        assert response.status_code == 302
        assert not CaseAssignment.objects.exists()

    def test_assign_invalid_volunteer_reports_error(self, client, casa_case, make_user, other_organization):
        outsider = make_user(other_organization, VOLUNTEER)

        response = client.post(case_url(casa_case, 'assignment_create'), {'volunteer': outsider.pk})

        assert response.status_code == 302
        assert error_messages(response)
        assert not CaseAssignment.objects.exists()


@pytest.mark.django_db
class TestAnonymous:

    def test_redirects_to_login(self, client, casa_case):
        response = client.get(case_url(casa_case))

        assert response.status_code == 302
        assert response.url.startswith(reverse('accounts:login'))
