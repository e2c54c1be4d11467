"""
Case Models for CASA Tracker
Cases belong to one CASA organization; volunteers reach them through assignments
"""
from django.db import models
from django.conf import settings
import uuid


class CasaCase(models.Model):
    """
    A child's case inside a CASA organization.
    The organization is fixed at creation and never changes.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    casa_org = models.ForeignKey(
        'organizations.CasaOrg',
        on_delete=models.CASCADE,
        related_name='casa_cases'
    )

    case_number = models.CharField(
        max_length=255,
        help_text='Court case number used by the organization'
    )
    transition_aged_youth = models.BooleanField(
        default=False,
        help_text='Youth aged 14 or older who is preparing to leave foster care'
    )
    court_report_submitted = models.BooleanField(default=False)

    volunteers = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through='CaseAssignment',
        related_name='casa_cases'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'casa_cases'
        verbose_name = 'CASA Case'
        verbose_name_plural = 'CASA Cases'
        ordering = ['case_number']
        constraints = [
            models.UniqueConstraint(
                fields=['casa_org', 'case_number'],
                name='unique_case_number_per_org'
            ),
        ]

    def __str__(self):
        return self.case_number


class CaseAssignment(models.Model):
    """
    Links a volunteer to a case.
    Gives the volunteer visibility and edit rights on that case only.
    """
    id = models.BigAutoField(primary_key=True)
    casa_case = models.ForeignKey(CasaCase, on_delete=models.CASCADE, related_name='case_assignments')
    volunteer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='case_assignments'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'case_assignments'
        verbose_name = 'Case Assignment'
        verbose_name_plural = 'Case Assignments'
        unique_together = [['casa_case', 'volunteer']]

    def __str__(self):
        return f"{self.volunteer} - {self.casa_case}"


class CaseUpdate(models.Model):
    """
    A note that someone was in contact about the case.
    """
    UPDATE_TYPE_CHOICES = [
        ('youth', 'Youth'),
        ('school', 'School'),
        ('social_worker', 'Social Worker'),
        ('therapist', 'Therapist'),
        ('attorney', 'Attorney'),
        ('bio_parent', 'Bio Parent'),
        ('foster_parent', 'Foster Parent'),
        ('other_family', 'Other Family'),
        ('supervisor', 'Supervisor'),
        ('court', 'Court'),
        ('other', 'Other'),
    ]

    id = models.BigAutoField(primary_key=True)
    casa_case = models.ForeignKey(CasaCase, on_delete=models.CASCADE, related_name='case_updates')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='case_updates'
    )

    update_type = models.CharField(max_length=20, choices=UPDATE_TYPE_CHOICES)
    other_type_text = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'case_updates'
        verbose_name = 'Case Update'
        verbose_name_plural = 'Case Updates'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['casa_case', '-created_at'], name='case_updates_case_idx'),
        ]

    def __str__(self):
        return f"{self.get_update_type_display()} - {self.casa_case}"

    def get_type_label(self):
        if self.update_type == 'other' and self.other_type_text:
            return self.other_type_text
        return self.get_update_type_display()
