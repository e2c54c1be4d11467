"""
Role-based authorization for case operations.

The policy table maps (role, operation) to the set of case fields the role may
write for that operation. A missing entry means the operation is rejected
outright. Roles and operations outside the table are always rejected.

Fields a role may not write are dropped from the proposed changes instead of
failing the request: a supervisor who submits a new case_number together with
other edits gets the other edits applied and case_number left untouched.
"""
from dataclasses import dataclass, field

from accounts.roles import CASA_ADMIN, SUPERVISOR, VOLUNTEER

CREATE = 'create'
READ = 'read'
UPDATE = 'update'
DESTROY = 'destroy'

OPERATIONS = (CREATE, READ, UPDATE, DESTROY)

# Writable attributes of a CasaCase. casa_org is deliberately absent: the
# organization of a case is set from the actor and never from a payload.
CASE_FIELDS = ('case_number', 'transition_aged_youth', 'court_report_submitted')

ADMIN_ONLY_FIELDS = frozenset({'case_number'})

FULL_FIELD_SET = frozenset(CASE_FIELDS)
RESTRICTED_FIELD_SET = FULL_FIELD_SET - ADMIN_ONLY_FIELDS
NO_FIELDS = frozenset()

CASE_POLICY = {
    CASA_ADMIN: {
        CREATE: FULL_FIELD_SET,
        READ: NO_FIELDS,
        UPDATE: FULL_FIELD_SET,
        DESTROY: NO_FIELDS,
    },
    SUPERVISOR: {
        READ: NO_FIELDS,
        UPDATE: RESTRICTED_FIELD_SET,
    },
    VOLUNTEER: {
        READ: NO_FIELDS,
        UPDATE: RESTRICTED_FIELD_SET,
    },
}

ASSIGNMENT_MANAGERS = frozenset({CASA_ADMIN, SUPERVISOR})

# Roles that may open the blank new-case form. Submitting it is still CREATE.
NEW_CASE_FORM_ROLES = frozenset({CASA_ADMIN, SUPERVISOR})

DENIED_MESSAGE = 'Sorry, you are not authorized to perform this action.'


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check."""
    rejected: bool
    allowed_changes: dict = field(default_factory=dict)
    dropped: frozenset = NO_FIELDS
    permitted_fields: frozenset = NO_FIELDS

    @property
    def allowed(self):
        return not self.rejected


REJECTED = Decision(rejected=True)


def permitted_fields(role, operation):
    """Fields `role` may write for `operation`, or None if the operation is rejected."""
    return CASE_POLICY.get(role, {}).get(operation)


def is_permitted(actor, operation):
    return permitted_fields(getattr(actor, 'role', None), operation) is not None


def can_manage_assignments(actor):
    return getattr(actor, 'role', None) in ASSIGNMENT_MANAGERS


def can_open_new_case_form(actor):
    return getattr(actor, 'role', None) in NEW_CASE_FORM_ROLES


def authorize(actor, operation, case=None, proposed_changes=None):
    """
    Decide whether `actor` may perform `operation` and which changes survive.

    `case` must already have been resolved for the actor; visibility is not
    checked here. `proposed_changes` is any mapping of field name to value
    (a QueryDict works, the last value of each key wins). Keys that are not
    case fields are ignored.
    """
    fields = permitted_fields(getattr(actor, 'role', None), operation)
    if fields is None:
        return REJECTED

    proposed_changes = proposed_changes or {}
    known = [name for name in CASE_FIELDS if name in proposed_changes]

    return Decision(
        rejected=False,
        allowed_changes={name: proposed_changes[name] for name in known if name in fields},
        dropped=frozenset(name for name in known if name not in fields),
        permitted_fields=fields,
    )
