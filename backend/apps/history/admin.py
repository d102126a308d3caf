from django.contrib import admin

from apps.history.models import HistoryEntry


@admin.register(HistoryEntry)
class HistoryEntryAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "action", "entity_type", "actor_name", "actor_role")
    list_filter = ("action", "entity_type")
    search_fields = ("actor_name",)
    readonly_fields = ("action", "entity_type", "data", "actor_name", "actor_role", "timestamp")

    def has_change_permission(self, request, obj=None):
        return False
