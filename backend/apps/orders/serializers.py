from rest_framework import serializers


class DeliveryRequestSerializer(serializers.Serializer):
    city = serializers.CharField(max_length=100)
    address = serializers.CharField(max_length=255)
    postcode = serializers.CharField(max_length=20)
    tel = serializers.CharField(max_length=30)


class CartQuerySerializer(serializers.Serializer):
    cart_id = serializers.IntegerField(required=False, min_value=1)


class OrderLineSerializer(serializers.Serializer):
    order_id = serializers.IntegerField()
    product_id = serializers.IntegerField()
    product_name = serializers.CharField()
    quantity = serializers.IntegerField()
    unit_price = serializers.CharField()


class OrderSummarySerializer(serializers.Serializer):
    order_id = serializers.IntegerField()
    created_at = serializers.CharField()
    total_amount = serializers.CharField()
    user_name = serializers.CharField()
    city = serializers.CharField()
    address = serializers.CharField()
    postcode = serializers.CharField()
    tel = serializers.CharField()


class OrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    created_at = serializers.CharField()
    total_amount = serializers.CharField()
    city = serializers.CharField()
    address = serializers.CharField()
    postcode = serializers.CharField()
    tel = serializers.CharField()
    items = OrderLineSerializer(many=True)
