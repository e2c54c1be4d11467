"""
Tests for tenant scoping of cases.
"""
import uuid

import pytest
from django.contrib.auth.models import AnonymousUser
from django.http import Http404

from accounts.roles import CASA_ADMIN, SUPERVISOR, VOLUNTEER
from cases.scoping import resolve_case, visible_cases


@pytest.mark.django_db
class TestVisibleCases:

    def test_admin_and_supervisor_see_whole_organization(
        self, admin, supervisor, make_case, organization, other_organization
    ):
        mine = [make_case(organization), make_case(organization)]
        make_case(other_organization)

        assert set(visible_cases(admin)) == set(mine)
        assert set(visible_cases(supervisor)) == set(mine)

    def test_volunteer_sees_only_assigned_cases(self, volunteer, make_case, organization, assign):
        assigned = make_case(organization)
        make_case(organization)
        assign(volunteer, assigned)

        assert list(visible_cases(volunteer)) == [assigned]

    def test_volunteer_assignment_in_other_org_grants_nothing(
        self, make_user, make_case, other_organization, organization, assign
    ):
        # Assignment rows can only be trusted within the volunteer's organization
        volunteer = make_user(organization, VOLUNTEER)
        foreign = make_case(other_organization)
        assign(volunteer, foreign)

        assert list(visible_cases(volunteer)) == []

    def test_anonymous_and_orgless_users_see_nothing(self, make_user, casa_case):
        orgless = make_user(None, CASA_ADMIN)

        assert list(visible_cases(AnonymousUser())) == []
        assert list(visible_cases(orgless)) == []

    def test_unknown_role_sees_nothing(self, make_user, organization, casa_case):
        user = make_user(organization, 'guardian')

        assert list(visible_cases(user)) == []


@pytest.mark.django_db
class TestResolveCase:

    @pytest.mark.parametrize('role', [CASA_ADMIN, SUPERVISOR, VOLUNTEER])
    def test_cross_organization_is_not_found_for_every_role(
        self, role, make_user, make_case, other_organization, organization, assign
    ):
        user = make_user(organization, role)
        foreign = make_case(other_organization)
        if role == VOLUNTEER:
            assign(user, foreign)

        with pytest.raises(Http404):
            resolve_case(user, foreign.id)

    def test_unassigned_volunteer_gets_not_found(self, volunteer, casa_case):
        with pytest.raises(Http404):
            resolve_case(volunteer, casa_case.id)

    def test_assigned_volunteer_resolves(self, volunteer, casa_case, assign):
        assign(volunteer, casa_case)

        assert resolve_case(volunteer, casa_case.id) == casa_case

    def test_missing_and_foreign_cases_look_the_same(self, admin, make_case, other_organization):
        foreign = make_case(other_organization)

        with pytest.raises(Http404) as missing:
            resolve_case(admin, uuid.uuid4())
        with pytest.raises(Http404) as hidden:
            resolve_case(admin, foreign.id)

        assert str(missing.value) == str(hidden.value)

    def test_malformed_id_is_not_found(self, admin):
        with pytest.raises(Http404):
            resolve_case(admin, 'not-a-uuid')
