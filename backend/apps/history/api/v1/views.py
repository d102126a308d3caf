from rest_framework import mixins, viewsets
from rest_framework.exceptions import ValidationError

from apps.core.roles import Permission
from apps.history.api.v1.serializers import HistoryEntrySerializer
from apps.history.models import EntityType, HistoryAction, HistoryEntry

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


class HistoryEntryViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = HistoryEntrySerializer
    required_permissions = {"list": Permission.VIEW_HISTORY}

    def get_queryset(self):
        params = self.request.query_params
        queryset = HistoryEntry.objects.live().order_by("-timestamp")

        entity_type = params.get("type")
        if entity_type:
            if entity_type not in EntityType.values:
                raise ValidationError({"type": f"Unknown entity type '{entity_type}'."})
            queryset = queryset.filter(entity_type=entity_type)

        action = params.get("action")
        if action:
            if action not in HistoryAction.values:
                raise ValidationError({"action": f"Unknown action '{action}'."})
            queryset = queryset.filter(action=action)

        actor = (params.get("actor") or "").strip()
        if actor:
            queryset = queryset.filter(actor_name__iexact=actor)

        return queryset[: self._limit()]

    def _limit(self) -> int:
        raw = self.request.query_params.get("limit")
        if raw is None:
            return DEFAULT_LIMIT
        try:
            limit = int(raw)
        except ValueError as exc:
            raise ValidationError({"limit": "limit must be an integer."}) from exc
        return max(1, min(limit, MAX_LIMIT))
