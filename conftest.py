"""
Pytest configuration and fixtures.
"""
import pytest

from accounts.roles import CASA_ADMIN, SUPERVISOR, VOLUNTEER


@pytest.fixture
def organization(db):
    """Create a test CASA organization."""
    from organizations.models import CasaOrg
    return CasaOrg.objects.create(name='Prince George CASA')


@pytest.fixture
def other_organization(db):
    """Create another organization for isolation tests."""
    from organizations.models import CasaOrg
    return CasaOrg.objects.create(name='Montgomery CASA')


@pytest.fixture
def make_user(db):
    """Factory for users in an organization with a given role."""
    from accounts.models import User

    counter = {'n': 0}

    def _make_user(casa_org, role, **extra):
        counter['n'] += 1
        return User.objects.create_user(
            email=f"{role}{counter['n']}@example.org",
            password='Sup3r-Secret-Pass!',
            casa_org=casa_org,
            role=role,
            first_name=role.title(),
            last_name=str(counter['n']),
            **extra
        )
    return _make_user


@pytest.fixture
def admin(make_user, organization):
    return make_user(organization, CASA_ADMIN)


@pytest.fixture
def supervisor(make_user, organization):
    return make_user(organization, SUPERVISOR)


@pytest.fixture
def volunteer(make_user, organization):
    return make_user(organization, VOLUNTEER)


@pytest.fixture
def make_case(db):
    """Factory for cases."""
    from cases.models import CasaCase

    counter = {'n': 0}

    def _make_case(casa_org, case_number=None, **extra):
        counter['n'] += 1
        return CasaCase.objects.create(
            casa_org=casa_org,
            case_number=case_number or f"CINA-{counter['n']:04d}",
            **extra
        )
    return _make_case


@pytest.fixture
def casa_case(make_case, organization):
    """The case most tests act on, with case number 111."""
    return make_case(organization, case_number='111')


@pytest.fixture
def assign(db):
    from cases.models import CaseAssignment

    def _assign(volunteer, casa_case):
        return CaseAssignment.objects.create(volunteer=volunteer, casa_case=casa_case)
    return _assign
