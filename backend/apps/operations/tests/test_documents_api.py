from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Product
from apps.core.models import IdempotentRequest, Warehouse
from apps.history.models import EntityType, HistoryAction, HistoryEntry
from apps.inventory.models import WarehouseStock
from apps.inventory.services import ledger
from apps.operations.models import Delivery, OperationStatus, Receipt, Transfer


def make_warehouse(name, **extra):
    defaults = {
        "location": "Downtown",
        "address": "1 Dock St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "capacity": 1000,
        "type": Warehouse.Type.MAIN,
    }
    defaults.update(extra)
    return Warehouse.objects.create(name=name, **defaults)


class OperationDocumentsApiTests(APITestCase):
    def setUp(self):
        self.client.credentials(HTTP_X_API_KEY="dev-manager-key")
        self.main = make_warehouse("Main")
        self.east = make_warehouse("East")
        self.widget = Product.objects.create(name="Widget", sku="WID-001", category="finished", unit_of_measure="pcs")
        WarehouseStock.objects.create(product=self.widget, warehouse=self.main, stock=100, min_stock=10)

    def _receipt_payload(self, quantity=5):
        return {
            "supplier": "Acme",
            "warehouse": str(self.main.id),
            "items": [{"product": str(self.widget.id), "quantity": quantity}],
        }

    def _advance(self, collection, document_id, *statuses):
        response = None
        for new_status in statuses:
            response = self.client.post(
                f"/api/v1/{collection}/{document_id}/status/",
                {"status": new_status},
                format="json",
            )
        return response

    def test_create_receipt_returns_201_with_reference_and_lines(self):
        response = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body["reference"], "RCP-0001")
        self.assertEqual(body["status"], "draft")
        self.assertEqual(body["created_by"], "Dev Manager")
        self.assertEqual(body["warehouse_name"], "Main")
        self.assertEqual(body["items"][0]["product_name"], "Widget")
        self.assertEqual(body["items"][0]["unit"], "pcs")
        self.assertEqual(ledger.get_stock(self.widget, self.main), 100)

    def test_receipt_requires_lines(self):
        payload = self._receipt_payload()
        payload["items"] = []

        response = self.client.post("/api/v1/receipts/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("items", response.json()["field_errors"])

    def test_receipt_lines_need_positive_quantity(self):
        response = self.client.post("/api/v1/receipts/", self._receipt_payload(quantity=0), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Receipt.objects.exists())

    def test_inactive_warehouse_is_rejected(self):
        closed = make_warehouse("Closed", is_active=False)
        payload = self._receipt_payload()
        payload["warehouse"] = str(closed.id)

        response = self.client.post("/api/v1/receipts/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("warehouse", response.json()["field_errors"])

    def test_full_receipt_workflow_over_api(self):
        created = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json").json()

        response = self._advance("receipts", created["id"], "waiting", "ready", "done")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["status"], "done")
        self.assertEqual(response.json()["processed_by"], "Dev Manager")
        self.assertEqual(ledger.get_stock(self.widget, self.main), 105)

    def test_invalid_transition_returns_409(self):
        created = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json").json()

        response = self._advance("receipts", created["id"], "done")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()["code"], "invalid_status_transition")

    def test_unknown_status_returns_400(self):
        created = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json").json()

        response = self._advance("receipts", created["id"], "shipped")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delivery_beyond_stock_returns_409_at_creation(self):
        payload = {
            "customer": "Globex",
            "warehouse": str(self.main.id),
            "items": [{"product": str(self.widget.id), "quantity": 101}],
        }

        response = self.client.post("/api/v1/deliveries/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()["code"], "insufficient_stock")
        self.assertIn("available: 100", response.json()["detail"])
        self.assertFalse(Delivery.objects.exists())

    def test_delivery_workflow_decreases_stock(self):
        payload = {
            "customer": "Globex",
            "warehouse": str(self.main.id),
            "shipping_address": "42 Harbor Rd",
            "items": [{"product": str(self.widget.id), "quantity": 100}],
        }
        created = self.client.post("/api/v1/deliveries/", payload, format="json").json()
        self.assertEqual(created["reference"], "DEL-0001")

        response = self._advance("deliveries", created["id"], "waiting", "ready", "done")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(ledger.get_stock(self.widget, self.main), 0)

    def test_transfer_over_api(self):
        payload = {
            "product": str(self.widget.id),
            "quantity": 30,
            "from_warehouse": str(self.main.id),
            "to_warehouse": str(self.east.id),
        }
        created = self.client.post("/api/v1/transfers/", payload, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.json()["from_warehouse_name"], "Main")

        self._advance("transfers", created.json()["id"], "waiting", "ready", "done")

        self.assertEqual(ledger.get_stock(self.widget, self.main), 70)
        self.assertEqual(ledger.get_stock(self.widget, self.east), 30)
        self.assertEqual(WarehouseStock.objects.get(product=self.widget, warehouse=self.east).min_stock, 10)

    def test_transfer_to_same_warehouse_returns_400(self):
        payload = {
            "product": str(self.widget.id),
            "quantity": 1,
            "from_warehouse": str(self.main.id),
            "to_warehouse": str(self.main.id),
        }

        response = self.client.post("/api/v1/transfers/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Transfer.objects.exists())

    def test_list_filters_by_status_and_warehouse(self):
        first = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json").json()
        other = self._receipt_payload()
        other["warehouse"] = str(self.east.id)
        self.client.post("/api/v1/receipts/", other, format="json")
        self._advance("receipts", first["id"], "canceled")

        response = self.client.get("/api/v1/receipts/?status=canceled")
        self.assertEqual([row["reference"] for row in response.json()], ["RCP-0001"])

        response = self.client.get("/api/v1/receipts/?warehouse=east")
        self.assertEqual([row["reference"] for row in response.json()], ["RCP-0002"])

        response = self.client.get(f"/api/v1/receipts/?warehouse={self.main.id}")
        self.assertEqual([row["reference"] for row in response.json()], ["RCP-0001"])

        response = self.client.get("/api/v1/receipts/?status=lost")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_document_records_history_and_keeps_stock(self):
        created = self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json").json()
        self._advance("receipts", created["id"], "waiting", "ready", "done")

        response = self.client.delete(f"/api/v1/receipts/{created['id']}/")

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Receipt.objects.exists())
        self.assertEqual(ledger.get_stock(self.widget, self.main), 105)
        self.assertTrue(
            HistoryEntry.objects.filter(entity_type=EntityType.RECEIPT, action=HistoryAction.DELETE).exists()
        )

    def test_repeated_idempotency_key_creates_one_document(self):
        first = self.client.post(
            "/api/v1/receipts/", self._receipt_payload(), format="json", HTTP_IDEMPOTENCY_KEY="rcp-abc"
        )
        second = self.client.post(
            "/api/v1/receipts/", self._receipt_payload(), format="json", HTTP_IDEMPOTENCY_KEY="rcp-abc"
        )

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.json()["id"], first.json()["id"])
        self.assertEqual(Receipt.objects.count(), 1)

    def test_idempotency_keys_are_scoped_per_document_type(self):
        self.client.post("/api/v1/receipts/", self._receipt_payload(), format="json", HTTP_IDEMPOTENCY_KEY="k-1")
        payload = {
            "customer": "Globex",
            "warehouse": str(self.main.id),
            "items": [{"product": str(self.widget.id), "quantity": 1}],
        }

        response = self.client.post("/api/v1/deliveries/", payload, format="json", HTTP_IDEMPOTENCY_KEY="k-1")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["reference"], "DEL-0001")

    def test_key_still_in_progress_returns_409(self):
        IdempotentRequest.objects.create(
            scope="receipt",
            idempotency_key="rcp-busy",
            status=IdempotentRequest.Status.STARTED,
            payload=self._receipt_payload(),
        )

        response = self.client.post(
            "/api/v1/receipts/", self._receipt_payload(), format="json", HTTP_IDEMPOTENCY_KEY="rcp-busy"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()["code"], "idempotency_conflict")
        self.assertFalse(Receipt.objects.exists())

    def test_failed_request_can_be_retried_with_same_key(self):
        payload = {
            "customer": "Globex",
            "warehouse": str(self.main.id),
            "items": [{"product": str(self.widget.id), "quantity": 101}],
        }
        failed = self.client.post("/api/v1/deliveries/", payload, format="json", HTTP_IDEMPOTENCY_KEY="del-1")
        self.assertEqual(failed.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(
            IdempotentRequest.objects.get(scope="delivery", idempotency_key="del-1").status,
            IdempotentRequest.Status.FAILED,
        )

        payload["items"][0]["quantity"] = 10
        retried = self.client.post("/api/v1/deliveries/", payload, format="json", HTTP_IDEMPOTENCY_KEY="del-1")

        self.assertEqual(retried.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Delivery.objects.count(), 1)
        self.assertEqual(
            IdempotentRequest.objects.get(scope="delivery", idempotency_key="del-1").status,
            IdempotentRequest.Status.COMPLETED,
        )


class StaffOperationsApiTests(APITestCase):
    def setUp(self):
        self.main = make_warehouse("Main")
        self.widget = Product.objects.create(name="Widget", sku="WID-001", category="finished", unit_of_measure="pcs")
        self.receipt = Receipt.objects.create(
            reference="RCP-0001",
            supplier="Acme",
            warehouse=self.main,
            created_by="Dev Manager",
            status=OperationStatus.READY,
        )
        self.receipt.items.create(product=self.widget, product_name="Widget", quantity=8, unit="pcs")
        self.client.credentials(HTTP_X_API_KEY="dev-staff-key")

    def test_staff_can_process_but_not_create_or_delete(self):
        payload = {
            "supplier": "Acme",
            "warehouse": str(self.main.id),
            "items": [{"product": str(self.widget.id), "quantity": 1}],
        }
        self.assertEqual(
            self.client.post("/api/v1/receipts/", payload, format="json").status_code,
            status.HTTP_403_FORBIDDEN,
        )
        self.assertEqual(
            self.client.delete(f"/api/v1/receipts/{self.receipt.id}/").status_code,
            status.HTTP_403_FORBIDDEN,
        )

        response = self.client.post(
            f"/api/v1/receipts/{self.receipt.id}/status/",
            {"status": "done"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["processed_by"], "Dev Staff")
        self.assertEqual(ledger.get_stock(self.widget, self.main), 8)

    def test_staff_can_create_transfers_but_not_delete_them(self):
        east = make_warehouse("East")
        WarehouseStock.objects.create(product=self.widget, warehouse=self.main, stock=20, min_stock=5)
        payload = {
            "product": str(self.widget.id),
            "quantity": 5,
            "from_warehouse": str(self.main.id),
            "to_warehouse": str(east.id),
        }

        response = self.client.post("/api/v1/transfers/", payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["created_by"], "Dev Staff")
        self.assertEqual(
            self.client.delete(f"/api/v1/transfers/{response.json()['id']}/").status_code,
            status.HTTP_403_FORBIDDEN,
        )
