from rest_framework import serializers

from apps.catalog.models import Product
from apps.core.models import Warehouse
from apps.inventory.models import Adjustment, WarehouseStock


class WarehouseStockSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)
    sku = serializers.CharField(source="product.sku", read_only=True)
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = WarehouseStock
        fields = (
            "id",
            "product",
            "product_name",
            "sku",
            "warehouse",
            "warehouse_name",
            "stock",
            "min_stock",
            "is_low_stock",
            "updated_at",
        )
        read_only_fields = fields


class AdjustmentSerializer(serializers.ModelSerializer):
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    difference = serializers.IntegerField(read_only=True)

    class Meta:
        model = Adjustment
        fields = (
            "id",
            "reference",
            "product",
            "product_name",
            "warehouse",
            "warehouse_name",
            "old_quantity",
            "new_quantity",
            "difference",
            "reason",
            "status",
            "date",
            "created_by",
            "approved_by",
        )
        read_only_fields = fields


class AdjustmentWriteSerializer(serializers.Serializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.all())
    new_quantity = serializers.IntegerField(min_value=0)
    reason = serializers.CharField(max_length=2000)

    def validate_reason(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Reason is required.")
        return value
