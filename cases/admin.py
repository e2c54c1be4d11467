from django.contrib import admin
from .models import CasaCase, CaseAssignment, CaseUpdate


class CaseAssignmentInline(admin.TabularInline):
    model = CaseAssignment
    extra = 0


@admin.register(CasaCase)
class CasaCaseAdmin(admin.ModelAdmin):
    list_display = ("case_number", "casa_org", "transition_aged_youth", "court_report_submitted")
    list_filter = ("casa_org", "transition_aged_youth", "court_report_submitted")
    search_fields = ("case_number",)
    inlines = [CaseAssignmentInline]


@admin.register(CaseUpdate)
class CaseUpdateAdmin(admin.ModelAdmin):
    list_display = ("casa_case", "user", "update_type", "created_at")
    list_filter = ("update_type",)
