import uuid

from django.db.models import Q
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.core.api.mixins import IdempotentCreateMixin
from apps.core.roles import Permission
from apps.operations.api.v1.serializers import (
    DeliverySerializer,
    DeliveryWriteSerializer,
    ReceiptSerializer,
    ReceiptWriteSerializer,
    StatusUpdateSerializer,
    TransferSerializer,
    TransferWriteSerializer,
)
from apps.operations.models import Delivery, OperationStatus, Receipt, Transfer
from apps.operations.services import workflow
from apps.operations.services.documents import create_delivery, create_receipt, create_transfer, delete_document


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


class OperationDocumentViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    write_serializer_class = None
    warehouse_filter_fields = ("warehouse",)
    required_permissions = {
        "list": Permission.VIEW_OPERATIONS,
        "retrieve": Permission.VIEW_OPERATIONS,
        "create": Permission.CREATE_OPERATION,
        "destroy": Permission.DELETE_OPERATION,
        "set_status": Permission.PROCESS_OPERATION,
    }

    def get_queryset(self):
        queryset = self.queryset.all()
        params = self.request.query_params

        status_filter = params.get("status")
        if status_filter:
            if status_filter not in OperationStatus.values:
                raise ValidationError({"status": f"'{status_filter}' is not a valid status."})
            queryset = queryset.filter(status=status_filter)

        warehouse = (params.get("warehouse") or "").strip()
        if warehouse:
            lookup = "id" if _is_uuid(warehouse) else "name__iexact"
            condition = Q()
            for field in self.warehouse_filter_fields:
                condition |= Q(**{f"{field}__{lookup}": warehouse})
            queryset = queryset.filter(condition)
        return queryset

    def perform_create_document(self, validated_data):
        raise NotImplementedError

    def create(self, request, *args, **kwargs):
        serializer = self.write_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        document = self.perform_create_document(serializer.validated_data)
        data = self.get_serializer(document).data
        return Response(data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        delete_document(self.get_object(), request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post", "put"], url_path="status")
    def set_status(self, request, *args, **kwargs):
        document = self.get_object()
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        document = workflow.set_status(document, serializer.validated_data["status"], request.user)
        return Response(self.get_serializer(document).data)


class ReceiptViewSet(IdempotentCreateMixin, OperationDocumentViewSet):
    queryset = Receipt.objects.select_related("warehouse").prefetch_related("items")
    serializer_class = ReceiptSerializer
    write_serializer_class = ReceiptWriteSerializer
    idempotency_scope = "receipt"

    def perform_create_document(self, validated_data):
        return create_receipt(actor=self.request.user, **validated_data)


class DeliveryViewSet(IdempotentCreateMixin, OperationDocumentViewSet):
    queryset = Delivery.objects.select_related("warehouse").prefetch_related("items")
    serializer_class = DeliverySerializer
    write_serializer_class = DeliveryWriteSerializer
    idempotency_scope = "delivery"

    def perform_create_document(self, validated_data):
        return create_delivery(actor=self.request.user, **validated_data)


class TransferViewSet(IdempotentCreateMixin, OperationDocumentViewSet):
    queryset = Transfer.objects.select_related("from_warehouse", "to_warehouse")
    serializer_class = TransferSerializer
    write_serializer_class = TransferWriteSerializer
    warehouse_filter_fields = ("from_warehouse", "to_warehouse")
    idempotency_scope = "transfer"
    required_permissions = {
        **OperationDocumentViewSet.required_permissions,
        "create": Permission.CREATE_TRANSFER,
    }

    def perform_create_document(self, validated_data):
        return create_transfer(actor=self.request.user, **validated_data)
