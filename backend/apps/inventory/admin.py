from django.contrib import admin

from apps.inventory.models import Adjustment, WarehouseStock


@admin.register(WarehouseStock)
class WarehouseStockAdmin(admin.ModelAdmin):
    list_display = ("product", "warehouse", "stock", "min_stock", "updated_at")
    search_fields = ("product__sku", "product__name", "warehouse__name")
    list_filter = ("warehouse",)


@admin.register(Adjustment)
class AdjustmentAdmin(admin.ModelAdmin):
    list_display = ("reference", "product_name", "warehouse", "old_quantity", "new_quantity", "created_by", "date")
    search_fields = ("reference", "product_name", "reason")
    list_filter = ("warehouse",)
