from django.contrib import admin

from apps.operations.models import Delivery, DeliveryLine, Receipt, ReceiptLine, Transfer


class ReceiptLineInline(admin.TabularInline):
    model = ReceiptLine
    extra = 0


class DeliveryLineInline(admin.TabularInline):
    model = DeliveryLine
    extra = 0


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    list_display = ("reference", "supplier", "warehouse", "status", "created_by", "processed_by", "date")
    search_fields = ("reference", "supplier")
    list_filter = ("status", "warehouse")
    readonly_fields = ("reference", "status", "processed_by")
    inlines = [ReceiptLineInline]


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    list_display = ("reference", "customer", "warehouse", "status", "created_by", "processed_by", "date")
    search_fields = ("reference", "customer")
    list_filter = ("status", "warehouse")
    readonly_fields = ("reference", "status", "processed_by")
    inlines = [DeliveryLineInline]


@admin.register(Transfer)
class TransferAdmin(admin.ModelAdmin):
    list_display = (
        "reference",
        "product_name",
        "quantity",
        "from_warehouse",
        "to_warehouse",
        "status",
        "created_by",
        "date",
    )
    search_fields = ("reference", "product_name")
    list_filter = ("status",)
    readonly_fields = ("reference", "status", "processed_by")
