"""
User roles inside a CASA organization
"""
CASA_ADMIN = 'casa_admin'
SUPERVISOR = 'supervisor'
VOLUNTEER = 'volunteer'

ROLE_CHOICES = [
    (CASA_ADMIN, 'CASA Admin'),
    (SUPERVISOR, 'Supervisor'),
    (VOLUNTEER, 'Volunteer'),
]

ALL_ROLES = frozenset(role for role, _ in ROLE_CHOICES)
