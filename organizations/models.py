"""
Organization Models for CASA Tracker
The CASA organization is the tenant boundary for users and cases
"""
from django.db import models
import uuid


class CasaOrg(models.Model):
    """
    A CASA program.
    Every user and every case belongs to exactly one organization.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    display_name = models.CharField(max_length=255, blank=True)
    address = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'casa_orgs'
        verbose_name = 'CASA Organization'
        verbose_name_plural = 'CASA Organizations'
        ordering = ['name']

    def __str__(self):
        return self.display_name or self.name
