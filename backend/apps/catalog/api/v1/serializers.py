from django.db import transaction
from rest_framework import serializers

from apps.catalog.models import Product
from apps.core.models import Warehouse
from apps.inventory.models import WarehouseStock


class ProductStockEntrySerializer(serializers.ModelSerializer):
    warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.all())
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    stock = serializers.IntegerField(min_value=0, required=False, default=0)
    min_stock = serializers.IntegerField(min_value=0, required=False, default=0)
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = WarehouseStock
        fields = ("warehouse", "warehouse_name", "stock", "min_stock", "is_low_stock")


class ProductSerializer(serializers.ModelSerializer):
    warehouses = ProductStockEntrySerializer(source="stock_entries", many=True, required=False)
    total_stock = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = (
            "id",
            "name",
            "sku",
            "category",
            "unit_of_measure",
            "description",
            "price",
            "warehouses",
            "total_stock",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")

    def get_total_stock(self, obj) -> int:
        return sum(entry.stock for entry in obj.stock_entries.all())

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Product name is required.")
        return value

    def validate_sku(self, value):
        normalized = value.strip().upper()
        if not normalized:
            raise serializers.ValidationError("SKU is required.")
        clashes = Product.objects.filter(sku__iexact=normalized)
        if self.instance is not None:
            clashes = clashes.exclude(pk=self.instance.pk)
        if clashes.exists():
            raise serializers.ValidationError("SKU already exists.")
        return normalized

    def validate(self, attrs):
        entries = attrs.get("stock_entries")
        if self.instance is None:
            if not entries:
                raise serializers.ValidationError({"warehouses": "At least one warehouse is required."})
        elif entries is not None:
            raise serializers.ValidationError(
                {"warehouses": "Stock levels change only through receipts, deliveries, transfers or adjustments."}
            )

        if entries:
            seen = set()
            errors = []
            for entry in entries:
                warehouse_id = entry["warehouse"].pk
                errors.append({"warehouse": "Duplicate warehouse."} if warehouse_id in seen else {})
                seen.add(warehouse_id)
            if any(errors):
                raise serializers.ValidationError({"warehouses": errors})
        return attrs

    def create(self, validated_data):
        entries = validated_data.pop("stock_entries", [])
        with transaction.atomic():
            product = Product.objects.create(**validated_data)
            WarehouseStock.objects.bulk_create(
                [WarehouseStock(product=product, **entry) for entry in entries]
            )
        return product
