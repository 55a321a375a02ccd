from django.db import models
from django.contrib.auth.models import AbstractUser


class UserRole(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrator'
    MEMBER = 'MEMBER', 'Member'
    GUEST = 'GUEST', 'Guest'


class User(AbstractUser):
    """
    Account that owns tasks. Authenticates with a bearer token issued at login.
    """
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.MEMBER
    )

    class Meta:
        ordering = ['username']

    def __str__(self):
        return self.email or self.username
