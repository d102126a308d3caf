from django.test import TestCase, override_settings
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product
from apps.core.exceptions import InsufficientStock
from apps.core.models import Warehouse
from apps.inventory.models import WarehouseStock
from apps.inventory.services import ledger


def make_warehouse(name):
    return Warehouse.objects.create(
        name=name,
        location="Downtown",
        address="1 Dock St",
        city="Springfield",
        state="IL",
        zip_code="62701",
        capacity=1000,
        type=Warehouse.Type.MAIN,
    )


class LedgerTests(TestCase):
    def setUp(self):
        self.main = make_warehouse("Main")
        self.east = make_warehouse("East")
        self.product = Product.objects.create(
            name="Widget",
            sku="WID-001",
            category=Product.Category.FINISHED,
            unit_of_measure="pcs",
        )
        WarehouseStock.objects.create(product=self.product, warehouse=self.main, stock=100, min_stock=10)

    def test_increase_creates_missing_entry_with_default_min_stock(self):
        entry = ledger.increase(self.product, self.east, 7)

        self.assertEqual(entry.stock, 7)
        self.assertEqual(entry.min_stock, 10)
        self.assertEqual(ledger.get_stock(self.product, self.east), 7)

    @override_settings(STOCKOPS_DEFAULT_MIN_STOCK=3)
    def test_default_min_stock_is_configurable(self):
        entry = ledger.increase(self.product, self.east, 1)

        self.assertEqual(entry.min_stock, 3)

    def test_decrease_floors_at_zero_and_reports_shortfall(self):
        shortfall = ledger.decrease(self.product, self.main, 130)

        self.assertEqual(shortfall, 30)
        self.assertEqual(ledger.get_stock(self.product, self.main), 0)

    def test_decrease_without_entry_changes_nothing(self):
        self.assertEqual(ledger.decrease(self.product, self.east, 4), 4)
        self.assertFalse(WarehouseStock.objects.filter(product=self.product, warehouse=self.east).exists())

    def test_negative_amounts_are_rejected(self):
        with self.assertRaises(ValidationError):
            ledger.increase(self.product, self.main, -1)
        with self.assertRaises(ValidationError):
            ledger.decrease(self.product, self.main, -1)
        with self.assertRaises(ValidationError):
            ledger.set_stock(self.product, self.main, -1)

    def test_transfer_moves_units_and_conserves_total(self):
        ledger.transfer(self.product, self.main, self.east, 30)

        self.assertEqual(ledger.get_stock(self.product, self.main), 70)
        self.assertEqual(ledger.get_stock(self.product, self.east), 30)
        self.assertEqual(ledger.total_stock(self.product), 100)
        self.assertEqual(WarehouseStock.objects.get(product=self.product, warehouse=self.east).min_stock, 10)

    def test_transfer_beyond_available_raises_and_leaves_stock(self):
        with self.assertRaises(InsufficientStock) as ctx:
            ledger.transfer(self.product, self.main, self.east, 101)

        self.assertEqual(ctx.exception.requested, 101)
        self.assertEqual(ctx.exception.available, 100)
        self.assertEqual(ledger.get_stock(self.product, self.main), 100)
        self.assertEqual(ledger.get_stock(self.product, self.east), 0)

    def test_transfer_to_same_warehouse_is_rejected(self):
        with self.assertRaises(ValidationError):
            ledger.transfer(self.product, self.main, self.main, 1)

    def test_set_stock_returns_previous_level(self):
        self.assertEqual(ledger.set_stock(self.product, self.main, 65), 100)
        self.assertEqual(ledger.set_stock(self.product, self.east, 12), 0)
        self.assertEqual(ledger.total_stock(self.product), 77)
