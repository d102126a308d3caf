from django.test import TestCase

from apps.catalog.models import Product
from apps.core.actors import Actor
from apps.core.models import DocumentSequence, DocumentType, Warehouse
from apps.core.services.sequences import format_reference, next_id, parse_reference
from apps.operations.models import Receipt
from apps.operations.services.documents import create_receipt, delete_document


class DocumentSequenceTests(TestCase):
    def setUp(self):
        self.actor = Actor(name="Dana", role="manager")
        self.warehouse = Warehouse.objects.create(
            name="Main Warehouse",
            location="Downtown",
            address="1 Dock St",
            city="Springfield",
            state="IL",
            zip_code="62701",
            capacity=1000,
            type=Warehouse.Type.MAIN,
        )
        self.product = Product.objects.create(
            name="Widget",
            sku="WID-001",
            category=Product.Category.FINISHED,
            unit_of_measure="pcs",
        )

    def _create_receipt(self):
        return create_receipt(
            supplier="Acme",
            warehouse=self.warehouse,
            items=[{"product": self.product, "quantity": 5}],
            actor=self.actor,
        )

    def test_format_and_parse_reference(self):
        self.assertEqual(format_reference(DocumentType.RECEIPT, 1), "RCP-0001")
        self.assertEqual(format_reference(DocumentType.ADJUSTMENT, 12345), "ADJ-12345")
        self.assertEqual(parse_reference(DocumentType.DELIVERY, "DEL-0042"), 42)
        self.assertIsNone(parse_reference(DocumentType.DELIVERY, "RCP-0042"))
        self.assertIsNone(parse_reference(DocumentType.DELIVERY, None))

    def test_references_are_sequential_per_type(self):
        self.assertEqual(next_id(DocumentType.RECEIPT), "RCP-0001")
        self.assertEqual(next_id(DocumentType.RECEIPT), "RCP-0002")
        self.assertEqual(next_id(DocumentType.DELIVERY), "DEL-0001")
        self.assertEqual(next_id(DocumentType.TRANSFER), "TRF-0001")
        self.assertEqual(next_id(DocumentType.ADJUSTMENT), "ADJ-0001")

    def test_numbers_are_not_reused_after_deletion(self):
        first = self._create_receipt()
        self.assertEqual(first.reference, "RCP-0001")
        delete_document(first, self.actor)

        second = self._create_receipt()

        self.assertEqual(second.reference, "RCP-0002")
        self.assertFalse(Receipt.objects.filter(reference="RCP-0001").exists())

    def test_missing_counter_is_seeded_from_existing_references(self):
        Receipt.objects.create(
            reference="RCP-0007",
            supplier="Legacy",
            warehouse=self.warehouse,
            created_by="import",
        )
        self.assertFalse(DocumentSequence.objects.filter(document_type=DocumentType.RECEIPT).exists())

        self.assertEqual(next_id(DocumentType.RECEIPT), "RCP-0008")
        self.assertEqual(
            DocumentSequence.objects.get(document_type=DocumentType.RECEIPT).last_value,
            8,
        )
