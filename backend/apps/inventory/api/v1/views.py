from django.db.models import F
from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from apps.core.api.mixins import IdempotentCreateMixin
from apps.core.roles import Permission
from apps.inventory.api.v1.serializers import (
    AdjustmentSerializer,
    AdjustmentWriteSerializer,
    WarehouseStockSerializer,
)
from apps.inventory.models import Adjustment, WarehouseStock
from apps.inventory.services.adjustments import apply_adjustment, delete_adjustment


class WarehouseStockViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = WarehouseStockSerializer
    required_permissions = {"list": Permission.VIEW_PRODUCTS}

    def get_queryset(self):
        queryset = WarehouseStock.objects.select_related("product", "warehouse").order_by(
            "warehouse__name", "product__name"
        )
        params = self.request.query_params
        warehouse = (params.get("warehouse") or "").strip()
        if warehouse:
            queryset = queryset.filter(warehouse__name__iexact=warehouse)
        product = (params.get("product") or "").strip()
        if product:
            queryset = queryset.filter(product__sku__iexact=product)
        if params.get("low_stock") in {"1", "true", "True"}:
            queryset = queryset.filter(stock__lt=F("min_stock"))
        return queryset


class AdjustmentCreateMixin:
    def create(self, request, *args, **kwargs):
        serializer = AdjustmentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        adjustment = apply_adjustment(actor=request.user, **serializer.validated_data)
        return Response(self.get_serializer(adjustment).data, status=status.HTTP_201_CREATED)


class AdjustmentViewSet(
    IdempotentCreateMixin,
    AdjustmentCreateMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    queryset = Adjustment.objects.select_related("warehouse").order_by("-date", "-reference")
    serializer_class = AdjustmentSerializer
    idempotency_scope = "adjustment"
    required_permissions = {
        "list": Permission.VIEW_ADJUSTMENTS,
        "retrieve": Permission.VIEW_ADJUSTMENTS,
        "create": Permission.CREATE_ADJUSTMENT,
        "destroy": Permission.DELETE_ADJUSTMENT,
    }

    def destroy(self, request, *args, **kwargs):
        delete_adjustment(self.get_object(), request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
