from rest_framework import serializers

from apps.catalog.models import Product
from apps.core.models import Warehouse
from apps.operations.models import Delivery, DeliveryLine, OperationStatus, Receipt, ReceiptLine, Transfer


class LineInputSerializer(serializers.Serializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField(min_value=1)


class ReceiptLineSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReceiptLine
        fields = ("id", "product", "product_name", "quantity", "unit")
        read_only_fields = fields


class DeliveryLineSerializer(serializers.ModelSerializer):
    class Meta:
        model = DeliveryLine
        fields = ("id", "product", "product_name", "quantity", "unit")
        read_only_fields = fields


DOCUMENT_FIELDS = (
    "id",
    "reference",
    "status",
    "date",
    "notes",
    "created_by",
    "processed_by",
    "created_at",
    "updated_at",
)


class ReceiptSerializer(serializers.ModelSerializer):
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    items = ReceiptLineSerializer(many=True, read_only=True)

    class Meta:
        model = Receipt
        fields = DOCUMENT_FIELDS + ("supplier", "warehouse", "warehouse_name", "items")
        read_only_fields = fields


class DeliverySerializer(serializers.ModelSerializer):
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    items = DeliveryLineSerializer(many=True, read_only=True)

    class Meta:
        model = Delivery
        fields = DOCUMENT_FIELDS + ("customer", "shipping_address", "warehouse", "warehouse_name", "items")
        read_only_fields = fields


class TransferSerializer(serializers.ModelSerializer):
    from_warehouse_name = serializers.CharField(source="from_warehouse.name", read_only=True)
    to_warehouse_name = serializers.CharField(source="to_warehouse.name", read_only=True)

    class Meta:
        model = Transfer
        fields = DOCUMENT_FIELDS + (
            "product",
            "product_name",
            "unit",
            "quantity",
            "from_warehouse",
            "from_warehouse_name",
            "to_warehouse",
            "to_warehouse_name",
        )
        read_only_fields = fields


class ReceiptWriteSerializer(serializers.Serializer):
    supplier = serializers.CharField(max_length=255)
    warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.filter(is_active=True))
    items = LineInputSerializer(many=True, allow_empty=False)
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_supplier(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Supplier is required.")
        return value


class DeliveryWriteSerializer(serializers.Serializer):
    customer = serializers.CharField(max_length=255)
    warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.filter(is_active=True))
    items = LineInputSerializer(many=True, allow_empty=False)
    shipping_address = serializers.CharField(required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_customer(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Customer is required.")
        return value


class TransferWriteSerializer(serializers.Serializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField(min_value=1)
    from_warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.filter(is_active=True))
    to_warehouse = serializers.PrimaryKeyRelatedField(queryset=Warehouse.objects.filter(is_active=True))
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate(self, attrs):
        if attrs["from_warehouse"].pk == attrs["to_warehouse"].pk:
            raise serializers.ValidationError({"to_warehouse": "Source and destination warehouses must differ."})
        return attrs


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OperationStatus.choices)
