import logging

from django.db import transaction
from django.db.models import F, Q
from rest_framework import viewsets

from apps.catalog.api.v1.serializers import ProductSerializer
from apps.catalog.models import Product
from apps.core.roles import Permission
from apps.history.models import EntityType, HistoryAction
from apps.history.recorder import record

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    required_permissions = {
        "list": Permission.VIEW_PRODUCTS,
        "retrieve": Permission.VIEW_PRODUCTS,
        "create": Permission.MANAGE_PRODUCTS,
        "update": Permission.MANAGE_PRODUCTS,
        "partial_update": Permission.MANAGE_PRODUCTS,
        "destroy": Permission.MANAGE_PRODUCTS,
    }

    def get_queryset(self):
        queryset = Product.objects.prefetch_related("stock_entries__warehouse").order_by("-created_at", "name")
        params = self.request.query_params

        category = params.get("category")
        if category:
            queryset = queryset.filter(category=category)

        search = (params.get("search") or "").strip()
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(sku__icontains=search))

        warehouse = (params.get("warehouse") or "").strip()
        if warehouse:
            queryset = queryset.filter(stock_entries__warehouse__name__iexact=warehouse)

        if params.get("low_stock") in {"1", "true", "True"}:
            queryset = queryset.filter(stock_entries__stock__lt=F("stock_entries__min_stock"))

        return queryset.distinct()

    def perform_create(self, serializer):
        with transaction.atomic():
            product = serializer.save()
            record(
                HistoryAction.CREATE,
                EntityType.PRODUCT,
                {"id": product.id, "name": product.name, "sku": product.sku},
                self.request.user,
            )
        logger.info("Product %s created by %s", product.sku, self.request.user)

    def perform_update(self, serializer):
        with transaction.atomic():
            product = serializer.save()
            record(
                HistoryAction.UPDATE,
                EntityType.PRODUCT,
                {"id": product.id, "name": product.name, "updates": self.request.data},
                self.request.user,
            )

    def perform_destroy(self, instance):
        with transaction.atomic():
            record(
                HistoryAction.DELETE,
                EntityType.PRODUCT,
                {"id": instance.id, "name": instance.name, "sku": instance.sku},
                self.request.user,
            )
            instance.delete()
