"""
Audit Models for CASA Tracker
Audit trail of every change made to cases and assignments
"""
from django.db import models
from django.conf import settings
import uuid


class AuditLog(models.Model):
    """
    Audit log for case actions
    Immutable once created
    """
    ACTION_CHOICES = [
        ('create', 'Created'),
        ('update', 'Updated'),
        ('delete', 'Deleted'),
        ('assign', 'Volunteer Assigned'),
        ('unassign', 'Volunteer Unassigned'),
        ('case_update', 'Case Update Logged'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs'
    )
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    action = models.CharField(max_length=30, choices=ACTION_CHOICES)
    description = models.TextField()

    # Tenant and case context (for filtering)
    casa_org = models.ForeignKey(
        'organizations.CasaOrg',
        on_delete=models.CASCADE,
        related_name='audit_logs'
    )
    # Kept after the case is deleted so deletions stay auditable
    case = models.ForeignKey(
        'cases.CasaCase',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs'
    )

    changes = models.JSONField(
        default=dict,
        blank=True,
        help_text='Dictionary of field changes'
    )

    ip_address = models.GenericIPAddressField(null=True, blank=True)

    class Meta:
        db_table = 'audit_logs'
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['user', '-timestamp'], name='audit_logs_user_idx'),
            models.Index(fields=['case', '-timestamp'], name='audit_logs_case_idx'),
            models.Index(fields=['casa_org', '-timestamp'], name='audit_logs_org_idx'),
        ]

    def __str__(self):
        user_str = self.user.email if self.user else 'Anonymous'
        return f"{user_str} - {self.action} - {self.timestamp}"

    def save(self, *args, **kwargs):
        """Prevent updates to audit logs"""
        # UUIDs exist before the first save, so check the adding flag instead of pk
        if not self._state.adding:
            raise ValueError("Audit logs are immutable and cannot be updated")
        super().save(*args, **kwargs)

    @classmethod
    def record(cls, user, action, case, description, changes=None, ip_address=None):
        return cls.objects.create(
            user=user,
            action=action,
            casa_org_id=case.casa_org_id,
            case=case,
            description=description,
            changes=changes or {},
            ip_address=ip_address,
        )
