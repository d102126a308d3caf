"""Human-readable document references (``RCP-0001``, ``DEL-0001``, ...).

Each document type owns one ``DocumentSequence`` row. The row is locked for
the duration of the caller's transaction, so two concurrent creations can
never be handed the same number, and numbers are never reused after the
documents carrying them are deleted.
"""
from __future__ import annotations

import logging
import re

from django.apps import apps
from django.db import transaction

from apps.core.models import DOCUMENT_PREFIXES, DocumentSequence, DocumentType

logger = logging.getLogger(__name__)

REFERENCE_MODELS = {
    DocumentType.RECEIPT: "operations.Receipt",
    DocumentType.DELIVERY: "operations.Delivery",
    DocumentType.TRANSFER: "operations.Transfer",
    DocumentType.ADJUSTMENT: "inventory.Adjustment",
}


def format_reference(document_type: str, number: int) -> str:
    return f"{DOCUMENT_PREFIXES[DocumentType(document_type)]}-{number:04d}"


def parse_reference(document_type: str, reference: str | None) -> int | None:
    prefix = DOCUMENT_PREFIXES[DocumentType(document_type)]
    match = re.fullmatch(rf"{prefix}-(\d+)", reference or "")
    if not match:
        return None
    return int(match.group(1))


def highest_existing_number(document_type: str) -> int:
    """Largest number already carried by a stored document of this type.

    Used only to seed a counter that does not exist yet, e.g. after importing
    documents created elsewhere.
    """
    model = apps.get_model(REFERENCE_MODELS[DocumentType(document_type)])
    prefix = DOCUMENT_PREFIXES[DocumentType(document_type)]
    numbers = [
        parse_reference(document_type, reference)
        for reference in model.objects.filter(reference__startswith=f"{prefix}-").values_list("reference", flat=True)
    ]
    return max((number for number in numbers if number is not None), default=0)


def next_value(document_type: str) -> int:
    document_type = DocumentType(document_type)
    with transaction.atomic():
        sequence = DocumentSequence.objects.select_for_update().filter(document_type=document_type).first()
        if sequence is None:
            DocumentSequence.objects.get_or_create(
                document_type=document_type,
                defaults={"last_value": highest_existing_number(document_type)},
            )
            sequence = DocumentSequence.objects.select_for_update().get(document_type=document_type)
        sequence.last_value += 1
        sequence.save(update_fields=["last_value", "updated_at"])
    logger.debug("Allocated %s number %s", document_type, sequence.last_value)
    return sequence.last_value


def next_id(document_type: str) -> str:
    return format_reference(document_type, next_value(document_type))
