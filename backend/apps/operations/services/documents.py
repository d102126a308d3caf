from collections import defaultdict

from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product
from apps.core.models import DocumentType, Warehouse
from apps.core.services.sequences import next_id
from apps.history.models import EntityType, HistoryAction
from apps.history.recorder import record
from apps.inventory.services import ledger
from apps.operations.models import Delivery, DeliveryLine, Receipt, ReceiptLine, Transfer
from apps.operations.services.workflow import ENTITY_TYPES


def _line_snapshots(items: list[dict]) -> list[dict]:
    return [
        {
            "product": item["product"],
            "product_name": item["product"].name,
            "quantity": item["quantity"],
            "unit": item["product"].unit_of_measure,
            "position": position,
        }
        for position, item in enumerate(items)
    ]


def create_receipt(*, supplier: str, warehouse: Warehouse, items: list[dict], actor, notes: str = "") -> Receipt:
    with transaction.atomic():
        receipt = Receipt.objects.create(
            reference=next_id(DocumentType.RECEIPT),
            supplier=supplier,
            warehouse=warehouse,
            notes=notes,
            created_by=actor.name,
        )
        ReceiptLine.objects.bulk_create(
            [ReceiptLine(receipt=receipt, **line) for line in _line_snapshots(items)]
        )
        record(
            HistoryAction.CREATE,
            EntityType.RECEIPT,
            {"id": receipt.reference, "supplier": supplier, "warehouse": warehouse.name, "itemsCount": len(items)},
            actor,
        )
    return receipt


def check_delivery_availability(warehouse: Warehouse, items: list[dict]) -> None:
    required = defaultdict(int)
    products = {}
    for item in items:
        product = item["product"]
        required[product.pk] += item["quantity"]
        products[product.pk] = product
    for product_id, quantity in required.items():
        ledger.ensure_available(products[product_id], warehouse, quantity)


def create_delivery(
    *,
    customer: str,
    warehouse: Warehouse,
    items: list[dict],
    actor,
    shipping_address: str = "",
    notes: str = "",
) -> Delivery:
    with transaction.atomic():
        check_delivery_availability(warehouse, items)
        delivery = Delivery.objects.create(
            reference=next_id(DocumentType.DELIVERY),
            customer=customer,
            warehouse=warehouse,
            shipping_address=shipping_address,
            notes=notes,
            created_by=actor.name,
        )
        DeliveryLine.objects.bulk_create(
            [DeliveryLine(delivery=delivery, **line) for line in _line_snapshots(items)]
        )
        record(
            HistoryAction.CREATE,
            EntityType.DELIVERY,
            {"id": delivery.reference, "customer": customer, "warehouse": warehouse.name, "itemsCount": len(items)},
            actor,
        )
    return delivery


def create_transfer(
    *,
    product: Product,
    quantity: int,
    from_warehouse: Warehouse,
    to_warehouse: Warehouse,
    actor,
    notes: str = "",
) -> Transfer:
    if from_warehouse.pk == to_warehouse.pk:
        raise ValidationError({"to_warehouse": "Source and destination warehouses must differ."})
    with transaction.atomic():
        transfer = Transfer.objects.create(
            reference=next_id(DocumentType.TRANSFER),
            product=product,
            product_name=product.name,
            unit=product.unit_of_measure,
            quantity=quantity,
            from_warehouse=from_warehouse,
            to_warehouse=to_warehouse,
            notes=notes,
            created_by=actor.name,
        )
        record(
            HistoryAction.CREATE,
            EntityType.TRANSFER,
            {
                "id": transfer.reference,
                "product": product.name,
                "from": from_warehouse.name,
                "to": to_warehouse.name,
                "quantity": quantity,
            },
            actor,
        )
    return transfer


def delete_document(document, actor) -> None:
    """Delete an operation document. Stock already moved by a completed document stays moved."""
    with transaction.atomic():
        record(
            HistoryAction.DELETE,
            ENTITY_TYPES[type(document)],
            {"id": document.reference, "status": document.status},
            actor,
        )
        document.delete()
