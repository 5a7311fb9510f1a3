from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class FrontDeskUserAdmin(UserAdmin):
    list_display = ("username", "email", "role", "department", "is_active")
    list_filter = ("role", "is_active")
    fieldsets = UserAdmin.fieldsets + (
        ("Front desk", {"fields": ("role", "department")}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ("Front desk", {"fields": ("role", "department")}),
    )
