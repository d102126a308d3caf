from rest_framework import serializers

from apps.core.models import Warehouse


class WarehouseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Warehouse
        fields = (
            "id",
            "name",
            "location",
            "address",
            "city",
            "state",
            "zip_code",
            "country",
            "capacity",
            "type",
            "contact",
            "phone",
            "email",
            "is_active",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")


class WarehouseWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Warehouse
        fields = (
            "name",
            "location",
            "address",
            "city",
            "state",
            "zip_code",
            "country",
            "capacity",
            "type",
            "contact",
            "phone",
            "email",
            "is_active",
        )
        extra_kwargs = {
            "country": {"required": False},
            "is_active": {"required": False},
        }

    def validate_name(self, value):
        normalized = value.strip()
        if not normalized:
            raise serializers.ValidationError("Warehouse name is required.")
        clashes = Warehouse.objects.filter(name__iexact=normalized)
        if self.instance is not None:
            clashes = clashes.exclude(pk=self.instance.pk)
        if clashes.exists():
            raise serializers.ValidationError("Warehouse name already exists.")
        return normalized

    def validate_email(self, value):
        return value.strip().lower()
