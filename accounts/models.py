"""
User Models for CASA Tracker
Email-based users that belong to one CASA organization with one role
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone
import uuid

from accounts.roles import ROLE_CHOICES, CASA_ADMIN, SUPERVISOR, VOLUNTEER


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication"""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Users must have an email address')

        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', CASA_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)

    def volunteers(self):
        return self.filter(role=VOLUNTEER, is_active=True)


class User(AbstractBaseUser, PermissionsMixin):
    """
    A CASA staff member or volunteer.
    The organization and role decide which cases the user can see and change.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, unique=True, db_index=True)

    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)

    # Tenancy
    casa_org = models.ForeignKey(
        'organizations.CasaOrg',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='users'
    )
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=VOLUNTEER)

    # Status fields
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    date_joined = models.DateTimeField(default=timezone.now)
    last_login = models.DateTimeField(null=True, blank=True)

    # Security fields
    failed_login_attempts = models.IntegerField(default=0)
    last_failed_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-date_joined']
        indexes = [
            models.Index(fields=['casa_org', 'role'], name='users_org_role_idx'),
        ]

    def clean(self):
        super().clean()
        # Logins are matched on the lowercased address
        self.email = self.email.lower()

    def __str__(self):
        return self.email

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip() or self.email

    def get_short_name(self):
        return self.first_name or self.email.split('@')[0]

    @property
    def is_casa_admin(self):
        return self.role == CASA_ADMIN

    @property
    def is_supervisor(self):
        return self.role == SUPERVISOR

    @property
    def is_volunteer(self):
        return self.role == VOLUNTEER

    def increment_failed_login(self):
        """Track failed login attempts for security"""
        self.failed_login_attempts += 1
        self.last_failed_login = timezone.now()
        self.save(update_fields=['failed_login_attempts', 'last_failed_login'])

    def reset_failed_login(self):
        """Reset failed login counter on successful login"""
        if self.failed_login_attempts > 0:
            self.failed_login_attempts = 0
            self.save(update_fields=['failed_login_attempts'])

    def is_locked_out(self):
        """Check if account is temporarily locked due to failed attempts"""
        if self.failed_login_attempts >= 5:
            if self.last_failed_login:
                lockout_duration = timezone.now() - self.last_failed_login
                # Lock for 30 minutes after 5 failed attempts
                return lockout_duration.total_seconds() < 1800
        return False


class LoginHistory(models.Model):
    """
    Track login history for security auditing
    """
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='login_history')
    timestamp = models.DateTimeField(auto_now_add=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.CharField(max_length=512, blank=True)
    success = models.BooleanField(default=True)

    class Meta:
        db_table = 'login_history'
        verbose_name = 'Login History'
        verbose_name_plural = 'Login History'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['user', '-timestamp'], name='login_history_user_idx'),
        ]

    def __str__(self):
        status = "SUCCESS" if self.success else "FAILED"
        return f"{self.user.email} - {status} - {self.timestamp}"
