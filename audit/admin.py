from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "user", "casa_org", "action", "case")
    list_filter = ("casa_org", "action")
    search_fields = ("description", "user__email")
    ordering = ("-timestamp",)

    def has_change_permission(self, request, obj=None):
        return False
