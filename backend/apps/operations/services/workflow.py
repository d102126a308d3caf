"""Status workflow shared by receipts, deliveries and transfers.

    draft -> waiting -> ready -> done
    draft | waiting | ready -> canceled

``done`` and ``canceled`` are terminal. Entering ``done`` is the only
transition that touches stock; the whole transition, including every stock
row it changes, commits or rolls back as one unit.
"""
from __future__ import annotations

import logging
from collections import defaultdict

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from apps.core.exceptions import InvalidStatusTransition
from apps.history.models import EntityType, HistoryAction
from apps.history.recorder import record
from apps.inventory.services import ledger
from apps.operations.models import Delivery, OperationStatus, Receipt, Transfer

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    OperationStatus.DRAFT: frozenset({OperationStatus.WAITING, OperationStatus.CANCELED}),
    OperationStatus.WAITING: frozenset({OperationStatus.READY, OperationStatus.CANCELED}),
    OperationStatus.READY: frozenset({OperationStatus.DONE, OperationStatus.CANCELED}),
    OperationStatus.DONE: frozenset(),
    OperationStatus.CANCELED: frozenset(),
}

ENTITY_TYPES = {
    Receipt: EntityType.RECEIPT,
    Delivery: EntityType.DELIVERY,
    Transfer: EntityType.TRANSFER,
}


def can_transition(current: str, new: str) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def _line_product(line, reference: str):
    if line.product is None:
        raise NotFound(f"{reference}: product '{line.product_name}' no longer exists.")
    return line.product


def _complete_receipt(receipt: Receipt) -> None:
    for line in receipt.items.select_related("product"):
        ledger.increase(_line_product(line, receipt.reference), receipt.warehouse, line.quantity)


def _complete_delivery(delivery: Delivery) -> None:
    lines = list(delivery.items.select_related("product"))
    required = defaultdict(int)
    products = {}
    for line in lines:
        product = _line_product(line, delivery.reference)
        required[product.pk] += line.quantity
        products[product.pk] = product
    # every line is checked before the first unit leaves the warehouse
    for product_id, quantity in required.items():
        ledger.ensure_available(products[product_id], delivery.warehouse, quantity)
    for line in lines:
        ledger.decrease(line.product, delivery.warehouse, line.quantity)


def _complete_transfer(transfer: Transfer) -> None:
    if transfer.product is None:
        raise NotFound(f"{transfer.reference}: product '{transfer.product_name}' no longer exists.")
    ledger.transfer(transfer.product, transfer.from_warehouse, transfer.to_warehouse, transfer.quantity)


COMPLETIONS = {
    Receipt: _complete_receipt,
    Delivery: _complete_delivery,
    Transfer: _complete_transfer,
}


def set_status(document, new_status: str, actor):
    if new_status not in OperationStatus.values:
        raise ValidationError({"status": f"'{new_status}' is not a valid status."})
    new_status = OperationStatus(new_status)
    model = type(document)

    with transaction.atomic():
        locked = model.objects.select_for_update().filter(pk=document.pk).first()
        if locked is None:
            raise NotFound(f"{document.reference} no longer exists.")

        previous = locked.status
        if previous == new_status and locked.is_terminal:
            logger.info("%s already %s; nothing to apply", locked.reference, previous)
            return locked
        if not can_transition(previous, new_status):
            raise InvalidStatusTransition(locked.reference, previous, new_status)

        if new_status == OperationStatus.DONE:
            COMPLETIONS[model](locked)

        locked.status = new_status
        locked.processed_by = actor.name
        locked.save(update_fields=["status", "processed_by", "updated_at"])
        record(
            HistoryAction.VALIDATE if new_status == OperationStatus.DONE else HistoryAction.UPDATE,
            ENTITY_TYPES[model],
            {"id": locked.reference, "statusChange": {"from": previous, "to": new_status}},
            actor,
        )

    logger.info("%s: %s -> %s by %s", locked.reference, previous, new_status, actor.name)
    return locked
