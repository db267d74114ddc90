from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "quantity",
        "entry_date",
        "registered_by",
        "last_modified_by",
        "last_modified_at",
    )
    list_filter = ("entry_date",)
    search_fields = ("name",)
    list_select_related = ("registered_by", "last_modified_by")
    readonly_fields = ("id", "created_at", "updated_at")
