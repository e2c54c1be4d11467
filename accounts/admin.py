from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .forms import CasaUserCreationForm, CasaUserChangeForm
from .models import User, LoginHistory

@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = CasaUserChangeForm
    add_form = CasaUserCreationForm
    list_display = ("email", "first_name", "last_name", "casa_org", "role", "is_active")
    list_filter = ("casa_org", "role", "is_active")
    search_fields = ("email", "first_name", "last_name")
    ordering = ("email",)
    readonly_fields = ("date_joined", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal Info", {"fields": ("first_name", "last_name")}),
        ("Organization", {"fields": ("casa_org", "role")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
        ("Security", {"fields": ("failed_login_attempts", "last_failed_login")}),
        ("Timestamps", {"fields": ("date_joined", "last_login")}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "casa_org", "role", "password1", "password2"),
        }),
    )

@admin.register(LoginHistory)
class LoginHistoryAdmin(admin.ModelAdmin):
    list_display = ("user", "timestamp", "ip_address", "success")
    search_fields = ("user__email", "ip_address")
    ordering = ("-timestamp",)
