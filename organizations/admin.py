from django.contrib import admin
from .models import CasaOrg


@admin.register(CasaOrg)
class CasaOrgAdmin(admin.ModelAdmin):
    list_display = ("name", "display_name", "created_at")
    search_fields = ("name", "display_name")
