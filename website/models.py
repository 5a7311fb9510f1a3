# website/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    class Roles(models.TextChoices):
        ADMIN = "ADMIN", "Admin"
        MANAGER = "MANAGER", "Manager"
        FRONT_DESK = "FRONT_DESK", "Front Desk"
        CASHIER = "CASHIER", "Cashier"

    role = models.CharField(
        max_length=20,
        choices=Roles.choices,
        default=Roles.FRONT_DESK,
    )
    department = models.CharField(max_length=80, blank=True)

    def is_admin(self):
        return self.role == self.Roles.ADMIN

    def is_front_desk_user(self):
        return self.role in self.Roles.values
