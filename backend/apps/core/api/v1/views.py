import logging

from django.db import transaction
from django.db.models import F, ProtectedError
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.models import Product
from apps.core.api.v1.serializers import WarehouseSerializer, WarehouseWriteSerializer
from apps.core.exceptions import WarehouseInUse
from apps.core.models import Warehouse
from apps.core.roles import Permission
from apps.history.api.v1.serializers import HistoryEntrySerializer
from apps.history.models import EntityType, HistoryAction, HistoryEntry
from apps.history.recorder import record
from apps.inventory.models import WarehouseStock
from apps.operations.models import TERMINAL_STATUSES, Delivery, Receipt, Transfer

logger = logging.getLogger(__name__)


class HealthView(APIView):
    authentication_classes = []
    permission_classes = []

    def get(self, request):
        return Response({"status": "ok", "service": "stockops", "version": "v1"})


class DashboardStatsView(APIView):
    required_permissions = {"get": Permission.VIEW_DASHBOARD}

    def get(self, request):
        recent = HistoryEntry.objects.live().order_by("-timestamp")[:10]
        return Response(
            {
                "products": {
                    "total": Product.objects.count(),
                    "low_stock": WarehouseStock.objects.filter(stock__lt=F("min_stock")).count(),
                },
                "operations": {
                    "pending_receipts": Receipt.objects.exclude(status__in=TERMINAL_STATUSES).count(),
                    "pending_deliveries": Delivery.objects.exclude(status__in=TERMINAL_STATUSES).count(),
                    "pending_transfers": Transfer.objects.exclude(status__in=TERMINAL_STATUSES).count(),
                },
                "warehouses": Warehouse.objects.filter(is_active=True).count(),
                "recent_activity": HistoryEntrySerializer(recent, many=True).data,
            }
        )


class WarehouseListView(APIView):
    required_permissions = {"get": Permission.VIEW_WAREHOUSES, "post": Permission.MANAGE_WAREHOUSES}

    def get(self, request):
        include_inactive = request.query_params.get("include_inactive") in {"1", "true", "True"}
        queryset = Warehouse.objects.all() if include_inactive else Warehouse.objects.filter(is_active=True)
        queryset = queryset.order_by("name")
        return Response(WarehouseSerializer(queryset, many=True).data)

    def post(self, request):
        serializer = WarehouseWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            warehouse = serializer.save()
            record(
                HistoryAction.CREATE,
                EntityType.WAREHOUSE,
                {"id": warehouse.id, "name": warehouse.name},
                request.user,
            )
        return Response(WarehouseSerializer(warehouse).data, status=status.HTTP_201_CREATED)


class WarehouseDetailView(APIView):
    required_permissions = {
        "get": Permission.VIEW_WAREHOUSES,
        "patch": Permission.MANAGE_WAREHOUSES,
        "delete": Permission.MANAGE_WAREHOUSES,
    }

    def get(self, request, warehouse_id):
        warehouse = get_object_or_404(Warehouse, id=warehouse_id)
        return Response(WarehouseSerializer(warehouse).data)

    def patch(self, request, warehouse_id):
        warehouse = get_object_or_404(Warehouse, id=warehouse_id)
        serializer = WarehouseWriteSerializer(warehouse, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            serializer.save()
            record(
                HistoryAction.UPDATE,
                EntityType.WAREHOUSE,
                {"id": warehouse.id, "name": warehouse.name, "updates": request.data},
                request.user,
            )
        return Response(WarehouseSerializer(warehouse).data)

    def delete(self, request, warehouse_id):
        warehouse = get_object_or_404(Warehouse, id=warehouse_id)
        if warehouse.stock_entries.filter(stock__gt=0).exists():
            raise WarehouseInUse(f"{warehouse.name} still holds stock; move or adjust it before deleting.")
        try:
            with transaction.atomic():
                warehouse.stock_entries.all().delete()
                name = warehouse.name
                warehouse.delete()
                record(HistoryAction.DELETE, EntityType.WAREHOUSE, {"id": warehouse_id, "name": name}, request.user)
        except ProtectedError as exc:
            logger.info("Refused to delete warehouse %s: referenced by documents", warehouse.name)
            raise WarehouseInUse(f"{warehouse.name} is referenced by receipts, deliveries, transfers or adjustments.") from exc
        return Response(status=status.HTTP_204_NO_CONTENT)
