from decimal import Decimal

from rest_framework import serializers

from .models import Category
from .uploads import image_errors


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()
    category = serializers.CharField()
    price = serializers.CharField()
    stock = serializers.IntegerField()
    image = serializers.CharField()


class ProductCreateSerializer(serializers.Serializer):
    """Multipart form of the admin add-item action; every field error is reported at once."""

    itemName = serializers.CharField(
        max_length=255, error_messages={"blank": "Product name is required."}
    )
    itemCategory = serializers.ChoiceField(
        choices=Category.choices,
        error_messages={"invalid_choice": "Choose one of: phone, tablet, laptop."},
    )
    itemPrice = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
        error_messages={"invalid": "Enter a valid price."},
    )
    stock = serializers.IntegerField(
        min_value=0, error_messages={"invalid": "Enter the number of items in stock."}
    )
    image = serializers.FileField(
        error_messages={"required": "A product image is required."}
    )

    def validate_image(self, value):
        errors = image_errors(value)
        if errors:
            raise serializers.ValidationError(errors)
        return value
