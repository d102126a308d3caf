"""Per-product, per-warehouse stock quantities.

Every function works on a single product's stock rows and locks the rows it
reads for update, so callers that wrap several calls in one transaction see
a consistent view and either apply all of their changes or none.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction
from django.db.models import Sum
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product
from apps.core.exceptions import InsufficientStock
from apps.core.models import Warehouse
from apps.inventory.models import WarehouseStock

logger = logging.getLogger(__name__)


def default_min_stock() -> int:
    return getattr(settings, "STOCKOPS_DEFAULT_MIN_STOCK", 10)


def _locked_entry(product: Product, warehouse: Warehouse) -> WarehouseStock | None:
    return WarehouseStock.objects.select_for_update().filter(product=product, warehouse=warehouse).first()


def _require_non_negative(amount: int) -> None:
    if amount < 0:
        raise ValidationError({"quantity": "Quantity cannot be negative."})


def get_stock(product: Product, warehouse: Warehouse) -> int:
    entry = WarehouseStock.objects.filter(product=product, warehouse=warehouse).only("stock").first()
    return entry.stock if entry else 0


def total_stock(product: Product) -> int:
    return WarehouseStock.objects.filter(product=product).aggregate(total=Sum("stock"))["total"] or 0


def increase(product: Product, warehouse: Warehouse, amount: int) -> WarehouseStock:
    _require_non_negative(amount)
    with transaction.atomic():
        entry = _locked_entry(product, warehouse)
        if entry is None:
            logger.info("Opening stock entry for %s in %s", product.sku, warehouse.name)
            return WarehouseStock.objects.create(
                product=product,
                warehouse=warehouse,
                stock=amount,
                min_stock=default_min_stock(),
            )
        entry.stock += amount
        entry.save(update_fields=["stock", "updated_at"])
        return entry


def decrease(product: Product, warehouse: Warehouse, amount: int) -> int:
    """Remove ``amount`` units, flooring the stock at zero.

    Returns the shortfall that could not be taken from the warehouse. Callers
    that must not lose units check availability first.
    """
    _require_non_negative(amount)
    with transaction.atomic():
        entry = _locked_entry(product, warehouse)
        if entry is None:
            logger.warning("No stock entry for %s in %s; nothing to decrease", product.sku, warehouse.name)
            return amount
        shortfall = max(0, amount - entry.stock)
        entry.stock = max(0, entry.stock - amount)
        entry.save(update_fields=["stock", "updated_at"])
    if shortfall:
        logger.warning(
            "Stock of %s in %s floored at zero, %s units short",
            product.sku,
            warehouse.name,
            shortfall,
        )
    return shortfall


def ensure_available(product: Product, warehouse: Warehouse, amount: int) -> int:
    with transaction.atomic():
        entry = _locked_entry(product, warehouse)
        available = entry.stock if entry else 0
    if available < amount:
        raise InsufficientStock(product.name, warehouse.name, amount, available)
    return available


def transfer(product: Product, from_warehouse: Warehouse, to_warehouse: Warehouse, amount: int) -> None:
    _require_non_negative(amount)
    if from_warehouse.pk == to_warehouse.pk:
        raise ValidationError({"to_warehouse": "Source and destination warehouses must differ."})
    with transaction.atomic():
        ensure_available(product, from_warehouse, amount)
        decrease(product, from_warehouse, amount)
        increase(product, to_warehouse, amount)
    logger.info(
        "Moved %s x %s from %s to %s",
        amount,
        product.sku,
        from_warehouse.name,
        to_warehouse.name,
    )


def set_stock(product: Product, warehouse: Warehouse, quantity: int) -> int:
    """Overwrite the stock level and return the previous one."""
    _require_non_negative(quantity)
    with transaction.atomic():
        entry = _locked_entry(product, warehouse)
        if entry is None:
            WarehouseStock.objects.create(
                product=product,
                warehouse=warehouse,
                stock=quantity,
                min_stock=default_min_stock(),
            )
            return 0
        previous = entry.stock
        entry.stock = quantity
        entry.save(update_fields=["stock", "updated_at"])
        return previous
