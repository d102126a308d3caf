from django.contrib import admin

from apps.core.models import DocumentSequence, IdempotentRequest, Warehouse


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "city", "capacity", "is_active", "created_at")
    list_filter = ("type", "is_active")
    search_fields = ("name", "location", "city")


@admin.register(DocumentSequence)
class DocumentSequenceAdmin(admin.ModelAdmin):
    list_display = ("document_type", "last_value", "updated_at")


@admin.register(IdempotentRequest)
class IdempotentRequestAdmin(admin.ModelAdmin):
    list_display = ("scope", "idempotency_key", "status", "started_at", "finished_at")
    list_filter = ("scope", "status")
    search_fields = ("idempotency_key",)
