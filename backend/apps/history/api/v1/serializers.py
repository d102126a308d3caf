from rest_framework import serializers

from apps.history.models import HistoryEntry


class HistoryEntrySerializer(serializers.ModelSerializer):
    type = serializers.CharField(source="entity_type", read_only=True)

    class Meta:
        model = HistoryEntry
        fields = ("id", "action", "type", "data", "actor_name", "actor_role", "timestamp")
        read_only_fields = fields
