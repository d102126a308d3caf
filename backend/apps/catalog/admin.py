from django.contrib import admin

from apps.catalog.models import Product
from apps.inventory.models import WarehouseStock


class WarehouseStockInline(admin.TabularInline):
    model = WarehouseStock
    extra = 0
    readonly_fields = ("stock",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("sku", "name", "category", "unit_of_measure", "price", "created_at")
    list_filter = ("category",)
    search_fields = ("sku", "name")
    inlines = [WarehouseStockInline]
