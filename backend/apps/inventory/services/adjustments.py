import logging

from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product
from apps.core.models import DocumentType, Warehouse
from apps.core.services.sequences import next_id
from apps.history.models import EntityType, HistoryAction
from apps.history.recorder import record
from apps.inventory.models import Adjustment
from apps.inventory.services import ledger

logger = logging.getLogger(__name__)


def apply_adjustment(
    product: Product,
    warehouse: Warehouse,
    new_quantity: int,
    reason: str,
    actor,
) -> Adjustment:
    """Set a warehouse's stock to a counted quantity and keep a record of the change.

    Adjustments take effect immediately. The creator is recorded as approver
    because only roles holding the adjustment permission can create one.
    """
    reason = (reason or "").strip()
    if not reason:
        raise ValidationError({"reason": "Reason is required."})
    if new_quantity is None or new_quantity < 0:
        raise ValidationError({"new_quantity": "New quantity must be a non-negative number."})

    with transaction.atomic():
        old_quantity = ledger.set_stock(product, warehouse, new_quantity)
        adjustment = Adjustment.objects.create(
            reference=next_id(DocumentType.ADJUSTMENT),
            product=product,
            product_name=product.name,
            warehouse=warehouse,
            old_quantity=old_quantity,
            new_quantity=new_quantity,
            reason=reason,
            created_by=actor.name,
            approved_by=actor.name,
        )
        record(
            HistoryAction.CREATE,
            EntityType.ADJUSTMENT,
            {
                "id": adjustment.reference,
                "product": product.name,
                "warehouse": warehouse.name,
                "change": {"from": old_quantity, "to": new_quantity},
                "difference": adjustment.difference,
                "reason": reason,
            },
            actor,
        )

    logger.info(
        "%s: %s in %s adjusted %s -> %s",
        adjustment.reference,
        product.sku,
        warehouse.name,
        old_quantity,
        new_quantity,
    )
    return adjustment


def delete_adjustment(adjustment: Adjustment, actor) -> None:
    """Remove the record only; the stock level it set is left as is."""
    with transaction.atomic():
        record(
            HistoryAction.DELETE,
            EntityType.ADJUSTMENT,
            {"id": adjustment.reference, "product": adjustment.product_name, "stock_reversed": False},
            actor,
        )
        adjustment.delete()
