from django.contrib import admin

from modules.users.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("name", "position", "age", "hire_date")
    search_fields = ("name", "position")
    readonly_fields = ("id", "created_at", "updated_at")
