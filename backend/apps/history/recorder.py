import logging

from apps.core.idempotency import normalize_payload
from apps.history.models import EntityType, HistoryAction, HistoryEntry

logger = logging.getLogger(__name__)


def record(action: HistoryAction, entity_type: EntityType, data: dict, actor) -> HistoryEntry:
    entry = HistoryEntry.objects.create(
        action=HistoryAction(action),
        entity_type=EntityType(entity_type),
        data=normalize_payload(data),
        actor_name=getattr(actor, "name", str(actor)),
        actor_role=getattr(actor, "role", ""),
    )
    logger.debug("History %s %s by %s", entry.action, entry.entity_type, entry.actor_name)
    return entry


def purge_expired(now=None) -> int:
    deleted, _ = HistoryEntry.objects.expired(now=now).delete()
    if deleted:
        logger.info("Purged %s expired history entries", deleted)
    return deleted
