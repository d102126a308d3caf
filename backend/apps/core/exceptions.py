from rest_framework import status
from rest_framework.exceptions import APIException


class InsufficientStock(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "insufficient_stock"
    default_detail = "Insufficient stock."

    def __init__(self, product_name: str, warehouse_name: str, requested: int, available: int):
        self.product_name = product_name
        self.warehouse_name = warehouse_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} in {warehouse_name}. "
            f"Requested: {requested}, available: {available}."
        )


class InvalidStatusTransition(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "invalid_status_transition"
    default_detail = "Status transition is not allowed."

    def __init__(self, reference: str, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"{reference} cannot move from '{current}' to '{requested}'.")


class DuplicateKey(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "duplicate_key"
    default_detail = "A record with the same unique value already exists."


class WarehouseInUse(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "warehouse_in_use"
    default_detail = "Warehouse still holds stock or is referenced by documents."


class IdempotencyConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "idempotency_conflict"
    default_detail = "Idempotency-Key conflicts with an earlier request."
